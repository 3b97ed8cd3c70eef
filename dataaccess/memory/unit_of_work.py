from typing import Any, Optional

from dataaccess.exceptions import require, translate_errors
from dataaccess.logging import get_logger
from dataaccess.repository import IUnitOfWork
from .store import ChangeAction, InMemoryStore


class InMemoryUnitOfWork(IUnitOfWork):
    """Unit of work that records every notification in the store's change list."""

    def __init__(self, store: InMemoryStore, trace_id: Optional[str] = None):
        self.store = require(store, "store")
        self.log = get_logger(__name__, trace_id)

    def register_new(self, entity: Any) -> None:
        self.store.stage(require(entity, "entity"), ChangeAction.NEW)

    def register_dirty(self, entity: Any) -> None:
        self.store.stage(require(entity, "entity"), ChangeAction.DIRTY)

    def register_clean(self, entity: Any) -> None:
        self.store.stage(require(entity, "entity"), ChangeAction.CLEAN)

    def register_deleted(self, entity: Any) -> None:
        self.store.stage(require(entity, "entity"), ChangeAction.DELETED)

    def commit(self) -> None:
        with translate_errors("commit", self.log):
            applied = self.store.commit()
        self.log.info(f"Committed | {applied} change(s)")

    def rollback(self) -> None:
        with translate_errors("rollback", self.log):
            self.store.rollback()
        self.log.info("Rolled back")
