"""
Query specification: filter, ordering, include paths and paging passed to repositories as one value.
"""

from collections.abc import Mapping
from operator import attrgetter
from typing import Any, Callable, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.sql import ClauseElement

from dataaccess.exceptions import InvalidArgumentError


def is_clause(value: Any) -> bool:
    """True for SQLAlchemy expressions and mapped attributes (e.g. Employee.first_name)."""
    return isinstance(value, ClauseElement) or hasattr(value, "__clause_element__")


def _attribute_name(key: Any) -> str:
    if isinstance(key, str):
        return key
    name = getattr(key, "key", None)
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Cannot order by {key!r}")
    return name


def _is_key_function(key: Any) -> bool:
    return callable(key) and not is_clause(key)


def _has_attribute(model: Any, name: str) -> bool:
    if hasattr(model, name) or name in getattr(model, "model_fields", {}):
        return True
    return any(name in getattr(klass, "__annotations__", {}) for klass in model.__mro__)


def _nulls_first(getter: Callable[[Any], Any]) -> Callable[[Any], Any]:
    # Same placement as SQL ascending order: None before any value
    def key(entity):
        value = getter(entity)
        return (value is not None, value)
    return key


class QuerySpec(BaseModel):
    """
    Describes a repository query.

    Args:
        where: None, a mapping of attribute -> value (equality), a SQLAlchemy
            clause (SQL backend only) or a callable ``entity -> bool``
        order_by: None, attribute name, mapped attribute, callable key, or a
            sequence of names/attributes for then-by ordering (ascending)
        include: related entity paths to eager load, e.g. ``("employees",)``
        page_index: zero-based page number
        page_size: page length; None means unbounded
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    where: Any = None
    order_by: Any = None
    include: Tuple[str, ...] = ()
    page_index: int = 0
    page_size: Optional[int] = None

    @field_validator("include", mode="before")
    @classmethod
    def _single_path(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple(value)

    def check(self) -> "QuerySpec":
        """Validate paging arguments; raises InvalidArgumentError."""
        if self.page_index < 0:
            raise InvalidArgumentError(f"page_index must be >= 0, got {self.page_index}")
        if self.page_size is not None and self.page_size < 0:
            raise InvalidArgumentError(f"page_size must be >= 0, got {self.page_size}")
        if self.page_index > 0 and self.page_size is None:
            raise InvalidArgumentError("page_index > 0 requires a page_size")
        return self

    @property
    def is_paged(self) -> bool:
        return self.page_size is not None

    @property
    def skip(self) -> int:
        return self.page_index * self.page_size if self.page_size else 0

    def order_keys(self) -> Sequence[Any]:
        """Ordering keys as a list (empty when unordered)."""
        if self.order_by is None:
            return []
        if isinstance(self.order_by, (list, tuple)):
            return list(self.order_by)
        return [self.order_by]

    # --- Python-side evaluation (in-memory backend and callable fallbacks) ---

    def check_in_memory(self, model: Any) -> "QuerySpec":
        """Validate paging, filter form and attribute names against model before evaluating in Python."""
        self.check()
        where = self.where
        if is_clause(where):
            raise InvalidArgumentError("SQL expressions cannot be evaluated in memory")
        names = [str(key) for key in where] if isinstance(where, Mapping) else []
        names += [_attribute_name(key) for key in self.order_keys() if not _is_key_function(key)]
        for name in names:
            if not _has_attribute(model, name.split(".")[0]):
                raise InvalidArgumentError(f"{model.__name__} has no attribute {name!r}")
        return self

    def matches(self, entity: Any) -> bool:
        where = self.where
        if where is None:
            return True
        if isinstance(where, Mapping):
            return all(getattr(entity, key) == value for key, value in where.items())
        if is_clause(where):
            raise InvalidArgumentError("SQL expressions cannot be evaluated in memory")
        return bool(where(entity))

    def sort_key(self) -> Optional[Callable[[Any], Any]]:
        keys = self.order_keys()
        if not keys:
            return None
        getters = [key if _is_key_function(key) else _nulls_first(attrgetter(_attribute_name(key)))
                   for key in keys]
        if len(getters) == 1:
            return getters[0]
        return lambda entity: tuple(getter(entity) for getter in getters)

    def apply(self, entities) -> Tuple[Any, ...]:
        """Filter, order and page an iterable of entities in Python."""
        items = [entity for entity in entities if self.matches(entity)]
        key = self.sort_key()
        if key is not None:
            items.sort(key=key)
        if self.is_paged:
            items = items[self.skip:self.skip + self.page_size]
        return tuple(items)
