from .handler import (
    DataAccessException,
    InvalidArgumentError,
    MultipleResultsError,
    NotFoundError,
    require,
    translate_errors,
)

__all__ = [
    "DataAccessException",
    "InvalidArgumentError",
    "MultipleResultsError",
    "NotFoundError",
    "require",
    "translate_errors",
]
