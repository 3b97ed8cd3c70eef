from .base import IDataAccessService
from .service import DataAccessService
from .sql_driver import SQLDriver

__all__ = ["DataAccessService", "IDataAccessService", "SQLDriver"]
