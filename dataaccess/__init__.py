"""
Repository and Unit of Work patterns over SQLModel, with an in-memory binding.
"""

from .database import DataAccessService, IDataAccessService, SQLDriver
from .exceptions import (
    DataAccessException,
    InvalidArgumentError,
    MultipleResultsError,
    NotFoundError,
)
from .memory import InMemoryDataAccessService, InMemoryStore
from .repository import BaseRepository, IRepository, IUnitOfWork, QuerySpec, UnitOfWork

__version__ = "1.0.0"

__all__ = [
    "BaseRepository",
    "DataAccessException",
    "DataAccessService",
    "IDataAccessService",
    "IRepository",
    "IUnitOfWork",
    "InMemoryDataAccessService",
    "InMemoryStore",
    "InvalidArgumentError",
    "MultipleResultsError",
    "NotFoundError",
    "QuerySpec",
    "SQLDriver",
    "UnitOfWork",
]
