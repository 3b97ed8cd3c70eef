"""
Repository pattern: data access abstraction, decouples callers from the backing store session.
"""

from .base import BaseRepository, IRepository
from .query import QuerySpec
from .unit_of_work import IUnitOfWork, UnitOfWork

__all__ = ["BaseRepository", "IRepository", "IUnitOfWork", "QuerySpec", "UnitOfWork"]
