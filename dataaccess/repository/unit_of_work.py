"""
Unit of Work: change notifications and transaction boundaries.
"""

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import inspect
from sqlmodel import Session

from dataaccess.exceptions import require, translate_errors
from dataaccess.logging import get_logger


class IUnitOfWork(ABC):
    """Unit of work interface.

    Callers should always notify the unit of work through the register_* methods,
    even where the backing store tracks changes by itself, so that the calling code
    keeps working with backends that require explicit tracking.
    """

    @abstractmethod
    def register_new(self, entity: Any) -> None:
        pass

    @abstractmethod
    def register_dirty(self, entity: Any) -> None:
        pass

    @abstractmethod
    def register_clean(self, entity: Any) -> None:
        pass

    @abstractmethod
    def register_deleted(self, entity: Any) -> None:
        pass

    @abstractmethod
    def commit(self) -> None:
        """Apply all staged changes atomically."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()


class UnitOfWork(IUnitOfWork):
    """Unit of work over a SQLModel session; the session already tracks loaded entities."""

    def __init__(self, session: Session):
        self.session = require(session, "session")
        self.log = get_logger(__name__, session.info.get("trace_id"))

    def register_new(self, entity: Any) -> None:
        require(entity, "entity")
        with translate_errors("register_new", self.log):
            self.session.add(entity)

    def register_dirty(self, entity: Any) -> None:
        require(entity, "entity")
        with translate_errors("register_dirty", self.log):
            self.session.add(entity)

    def register_clean(self, entity: Any) -> None:
        require(entity, "entity")

    def register_deleted(self, entity: Any) -> None:
        require(entity, "entity")
        with translate_errors("register_deleted", self.log):
            state = inspect(entity)
            if state.pending:
                self.session.expunge(entity)
            else:
                self.session.delete(entity)

    def commit(self) -> None:
        try:
            with translate_errors("commit", self.log):
                self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.log.info("Committed")

    def rollback(self) -> None:
        with translate_errors("rollback", self.log):
            self.session.rollback()
        self.log.info("Rolled back")

    def flush(self) -> None:
        """Flush session (e.g. to get auto-increment IDs)."""
        with translate_errors("flush", self.log):
            self.session.flush()
