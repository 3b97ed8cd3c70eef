"""
Data access exception taxonomy and the translation of backing-store errors.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError


class DataAccessException(Exception):
    """Base class for every failure surfaced by repositories and units of work."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class NotFoundError(DataAccessException):
    """No entity matched a query that requires one."""


class MultipleResultsError(DataAccessException):
    """More than one entity matched a query that requires exactly one."""


class InvalidArgumentError(ValueError):
    """Raised for invalid arguments before the backing store is touched."""


def require(value: Any, name: str) -> Any:
    """Return value, or raise InvalidArgumentError when it is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


@contextmanager
def translate_errors(operation: str, log=logger) -> Iterator[None]:
    """Re-raise backing-store failures inside the block as DataAccessException."""
    try:
        yield
    except (DataAccessException, InvalidArgumentError):
        raise
    except SQLAlchemyError as exc:
        log.error(f"{operation} failed | DatabaseError: {exc}")
        raise DataAccessException(str(exc), exc) from exc
    except Exception as exc:
        log.error(f"{operation} failed | {type(exc).__name__}: {exc}")
        raise DataAccessException(str(exc), exc) from exc
