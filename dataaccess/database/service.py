"""
SQLModel-bound data access service.
"""

import uuid
from typing import Optional, Type, TypeVar

from sqlmodel import Session

from dataaccess.config import settings
from dataaccess.logging import get_logger
from dataaccess.repository import BaseRepository, IRepository, IUnitOfWork, UnitOfWork
from .base import IDataAccessService
from .sql_driver import SQLDriver

T = TypeVar("T")


class DataAccessService(IDataAccessService):
    """
    Mints SQLModel repositories and units of work bound to one session.

    Switching to a different data access technology only means providing another
    IDataAccessService; callers depend on IRepository and IUnitOfWork alone.

    Args:
        url: database URL; defaults to settings.DATABASE_URL
        driver: existing SQLDriver to share an engine; the service then only owns its session
    """

    def __init__(self, url: Optional[str] = None, driver: Optional[SQLDriver] = None):
        self._owns_driver = driver is None
        self.driver = driver or SQLDriver(url or settings.DATABASE_URL, echo=settings.DB_ECHO)
        self.session_id = uuid.uuid4().hex[:8]
        self._session = self.driver.new_session()
        self._session.info["trace_id"] = self.session_id
        self._closed = False
        self.log = get_logger(__name__, self.session_id)
        self.log.debug(f"Session opened | {self.driver.engine.url}")

    @property
    def session(self) -> Session:
        """The session every repository and unit of work from this service is bound to."""
        return self._session

    @property
    def closed(self) -> bool:
        return self._closed

    def create_schema(self) -> None:
        """Create missing tables for the imported SQLModel models."""
        self.driver.create_all()

    def get_unit_of_work(self) -> IUnitOfWork:
        return UnitOfWork(self._session)

    def get_repository(self, model: Type[T]) -> IRepository[T]:
        return BaseRepository(self._session, model)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._session.close()
        if self._owns_driver:
            self.driver.disconnect()
        self.log.debug("Session closed")
