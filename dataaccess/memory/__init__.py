"""
In-memory binding of the repository and unit of work contracts.
"""

from .repository import InMemoryRepository
from .service import InMemoryDataAccessService
from .store import ChangeAction, InMemoryStore
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "ChangeAction",
    "InMemoryDataAccessService",
    "InMemoryRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]
