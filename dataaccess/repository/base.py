"""
Repository abstract base class and generic SQLModel implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import func, inspect
from sqlalchemy.orm import RelationshipProperty, selectinload
from sqlmodel import Session, select

from dataaccess.exceptions import (
    InvalidArgumentError,
    MultipleResultsError,
    NotFoundError,
    require,
    translate_errors,
)
from dataaccess.logging import get_logger
from .query import QuerySpec, is_clause

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Repository interface; query and stage changes for one entity collection."""

    @property
    def entity_name(self) -> str:
        return "entity"

    @abstractmethod
    def get(self, query: Optional[QuerySpec] = None) -> Tuple[T, ...]:
        """Get entities matching query: include, filter, order, then page."""
        pass

    @abstractmethod
    def count(self, where: Any = None) -> int:
        """Count entities matching where (all when None)."""
        pass

    @abstractmethod
    def add(self, item: T) -> None:
        """Stage item for insertion; effective on commit."""
        pass

    @abstractmethod
    def remove(self, item: T) -> None:
        """Stage item for deletion; effective on commit."""
        pass

    def get_single(self, where: Any) -> T:
        """Get the only entity matching where; raises NotFoundError or MultipleResultsError."""
        require(where, "where")
        items = self.get(QuerySpec(where=where, page_size=2))
        if not items:
            raise NotFoundError(f"No {self.entity_name} matches the query")
        if len(items) > 1:
            raise MultipleResultsError(f"More than one {self.entity_name} matches the query")
        return items[0]

    def get_single_or_default(self, where: Any = None, default: Optional[T] = None) -> Optional[T]:
        """Like get_single, but returns default when nothing matches."""
        items = self.get(QuerySpec(where=where, page_size=2))
        if len(items) > 1:
            raise MultipleResultsError(f"More than one {self.entity_name} matches the query")
        return items[0] if items else default

    def get_first(self, query: Optional[QuerySpec] = None) -> T:
        """Get the first entity under the query's order; raises NotFoundError when none."""
        items = self._first_page(query)
        if not items:
            raise NotFoundError(f"No {self.entity_name} matches the query")
        return items[0]

    def get_first_or_default(self, query: Optional[QuerySpec] = None, default: Optional[T] = None) -> Optional[T]:
        """Like get_first, but returns default when nothing matches."""
        items = self._first_page(query)
        return items[0] if items else default

    def _first_page(self, query: Optional[QuerySpec]) -> Tuple[T, ...]:
        query = (query or QuerySpec()).check()
        if not query.is_paged:
            query = query.model_copy(update={"page_size": 1})
        return self.get(query)[:1]


class BaseRepository(IRepository[T]):
    """Generic repository over a SQLModel session; subclasses can add custom queries."""

    def __init__(self, session: Session, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = require(session, "session")
        self.model = require(model, "model")
        self.log = get_logger(__name__, session.info.get("trace_id"))

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def get(self, query: Optional[QuerySpec] = None) -> Tuple[T, ...]:
        query = (query or QuerySpec()).check()
        with translate_errors(f"{self.entity_name}.get", self.log):
            statement = select(self.model)
            for option in self._load_options(query.include):
                statement = statement.options(option)

            if self._needs_python(query):
                # Callables can't be translated; finish filtering/ordering/paging on the fetched rows
                statement = self._filtered(statement, query.where)
                rows = self.session.exec(statement).all()
                where = query.where if self._is_callable_filter(query.where) else None
                return query.model_copy(update={"where": where}).apply(rows)

            statement = self._filtered(statement, query.where)
            order = [self._order_column(key) for key in query.order_keys()]
            if order:
                statement = statement.order_by(*order)
            if query.is_paged:
                statement = statement.offset(query.skip).limit(query.page_size)

            self.log.debug("{}.get | {}", self.entity_name, statement)
            return tuple(self.session.exec(statement).all())

    def count(self, where: Any = None) -> int:
        with translate_errors(f"{self.entity_name}.count", self.log):
            if self._is_callable_filter(where):
                rows = self.session.exec(select(self.model)).all()
                return sum(1 for row in rows if where(row))
            statement = self._filtered(select(func.count()).select_from(self.model), where)
            return self.session.exec(statement).one()

    def add(self, item: T) -> None:
        require(item, "item")
        with translate_errors(f"{self.entity_name}.add", self.log):
            self.session.add(item)

    def remove(self, item: T) -> None:
        require(item, "item")
        with translate_errors(f"{self.entity_name}.remove", self.log):
            if inspect(item).pending:
                # Added but never flushed; nothing to delete in the database
                self.session.expunge(item)
            else:
                self.session.delete(item)

    # --- statement building ---

    @staticmethod
    def _is_callable_filter(where: Any) -> bool:
        return where is not None and not isinstance(where, Mapping) and not is_clause(where)

    def _needs_python(self, query: QuerySpec) -> bool:
        if self._is_callable_filter(query.where):
            return True
        return any(callable(key) and not is_clause(key) for key in query.order_keys())

    def _column(self, name: str):
        column = getattr(self.model, name, None)
        if column is None or not is_clause(column):
            raise InvalidArgumentError(f"{self.entity_name} has no attribute {name!r}")
        return column

    def _filtered(self, statement, where: Any):
        if where is None or self._is_callable_filter(where):
            return statement
        if isinstance(where, Mapping):
            return statement.where(*[self._column(key) == value for key, value in where.items()])
        return statement.where(where)

    def _order_column(self, key: Any):
        return self._column(key) if isinstance(key, str) else key

    def _load_options(self, include: Tuple[str, ...]) -> List[Any]:
        """Build selectinload options for include paths such as 'department.employees'."""
        options = []
        for path in include:
            model, option = self.model, None
            for name in path.split("."):
                attribute = getattr(model, name, None)
                prop = getattr(attribute, "property", None)
                if not isinstance(prop, RelationshipProperty):
                    raise InvalidArgumentError(f"{model.__name__} has no relationship {name!r}")
                option = selectinload(attribute) if option is None else option.selectinload(attribute)
                model = prop.mapper.class_
            options.append(option)
        return options
