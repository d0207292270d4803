"""Database configuration and session management."""
import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from traininghub.core.config import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def _engine_options(url: str) -> dict:
    """Pool/connect options per backend."""
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            # One shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,          # Verify connections before use
        "pool_recycle": 300,            # Recycle connections every 5 minutes
        "pool_timeout": 30,             # Wait up to 30s for a connection from pool
        "connect_args": {"connect_timeout": 20},
    }


class Database:
    """
    Process-scoped data-access handle.

    Owns the engine (connection pool) and the session factory. Built once by
    the application factory, stored on ``app.state.database`` and disposed at
    shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, **_engine_options(url))
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    def session(self) -> Session:
        return self.session_factory()

    def create_all(self) -> None:
        """Create every table known to the models metadata."""
        import traininghub.models  # noqa: F401  registers the mappers

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> None:
        """Round trip to the store; raises on failure."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        logger.info("Closing database connection pool")
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get database session.

    Usage:
        @router.get("/items/")
        def read_items(db: Annotated[Session, Depends(get_db)]):
            return db.query(Item).all()
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
