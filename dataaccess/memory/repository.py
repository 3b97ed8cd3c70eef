from typing import Any, Optional, Tuple, Type, TypeVar

from dataaccess.exceptions import require, translate_errors
from dataaccess.logging import get_logger
from dataaccess.repository import IRepository, QuerySpec
from .store import ChangeAction, InMemoryStore

T = TypeVar("T")


class InMemoryRepository(IRepository[T]):
    """Repository over one collection of an InMemoryStore.

    Include paths are ignored: related objects are plain references and already loaded.
    Queries only see committed entities.
    """

    def __init__(self, store: InMemoryStore, model: Type[T], trace_id: Optional[str] = None):
        self.store = require(store, "store")
        self.model = require(model, "model")
        self.log = get_logger(__name__, trace_id)

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def get(self, query: Optional[QuerySpec] = None) -> Tuple[T, ...]:
        query = (query or QuerySpec()).check_in_memory(self.model)
        with translate_errors(f"{self.entity_name}.get", self.log):
            return query.apply(self.store.items(self.model))

    def count(self, where: Any = None) -> int:
        query = QuerySpec(where=where).check_in_memory(self.model)
        with translate_errors(f"{self.entity_name}.count", self.log):
            return sum(1 for item in self.store.items(self.model) if query.matches(item))

    def add(self, item: T) -> None:
        require(item, "item")
        self.store.stage(item, ChangeAction.NEW, self.model)

    def remove(self, item: T) -> None:
        require(item, "item")
        self.store.stage(item, ChangeAction.DELETED, self.model)
