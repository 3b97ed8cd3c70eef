import uuid
from typing import Optional, Type, TypeVar

from dataaccess.database.base import IDataAccessService
from dataaccess.logging import get_logger
from dataaccess.repository import IRepository, IUnitOfWork
from .repository import InMemoryRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork

T = TypeVar("T")


class InMemoryDataAccessService(IDataAccessService):
    """Data access service over an InMemoryStore; a store created here is cleared on close."""

    def __init__(self, store: Optional[InMemoryStore] = None):
        self._owns_store = store is None
        self.store = store if store is not None else InMemoryStore()
        self.session_id = uuid.uuid4().hex[:8]
        self._closed = False
        self.log = get_logger(__name__, self.session_id)

    @property
    def closed(self) -> bool:
        return self._closed

    def get_unit_of_work(self) -> IUnitOfWork:
        return InMemoryUnitOfWork(self.store, self.session_id)

    def get_repository(self, model: Type[T]) -> IRepository[T]:
        return InMemoryRepository(self.store, model, self.session_id)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_store:
            self.store.clear()
        self.log.debug("In-memory session closed")
