from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from dataaccess.logging import get_logger

logger = get_logger(__name__)


class SQLDriver:
    """Owns the SQLAlchemy engine and a session factory bound to it."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        if url.startswith("sqlite") and (":memory:" in url or url in ("sqlite://", "sqlite:///")):
            # One shared connection, otherwise every connection sees its own empty database
            engine_kwargs.setdefault("poolclass", StaticPool)
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self.url = url
        self.engine = create_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = sessionmaker(
            self.engine, class_=Session, expire_on_commit=False, autoflush=False
        )

    def connect(self):
        """Check the database is reachable."""
        with self.engine.begin() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self):
        """Create tables for every SQLModel table model imported so far."""
        SQLModel.metadata.create_all(self.engine)

    def disconnect(self):
        """Dispose the engine's connection pool."""
        self.engine.dispose()
        logger.debug(f"Engine disposed | {self.engine.url}")

    def new_session(self) -> Session:
        return self.session_factory()
