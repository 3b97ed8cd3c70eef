from abc import ABC, abstractmethod
from typing import Type, TypeVar

from dataaccess.repository import IRepository, IUnitOfWork

T = TypeVar("T")


class IDataAccessService(ABC):
    """Factory for a unit of work and repositories sharing one backing context.

    The service owns the context; close() releases it once. Repositories and units of
    work obtained before close() must not be used afterwards.
    """

    @abstractmethod
    def get_unit_of_work(self) -> IUnitOfWork:
        pass

    @abstractmethod
    def get_repository(self, model: Type[T]) -> IRepository[T]:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
