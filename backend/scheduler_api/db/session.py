import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from scheduler_api.core.config import get_database_url, mask_url_password

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

# Internal lazy globals
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None
_database_url: Optional[str] = None


def build_engine(database_url: str) -> Engine:
    """Create an engine tuned for the backend named in ``database_url``."""
    try:
        url = make_url(database_url)
        drivername = url.drivername
    except ArgumentError:
        # Let create_engine raise its own error for malformed URLs
        drivername = ""

    if drivername.startswith("postgres"):
        return create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,  # Detects and refreshes stale connections
            pool_recycle=3600,  # Recycle connections every hour to avoid idle timeouts
            connect_args={
                "application_name": "scheduler_api",  # Visible in pg_stat_activity
                "connect_timeout": 10,
            },
        )

    if drivername.startswith("sqlite"):
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            # One shared in-memory database across the process so DDL
            # persists across connections
            return create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(database_url)


def get_engine() -> Engine:
    """Return a cached SQLAlchemy engine, creating it from DATABASE_URL on
    first call. This allows tests to set DATABASE_URL before the engine is
    constructed."""
    global _engine, _SessionLocal, _database_url
    database_url = get_database_url()
    if _engine is None or _database_url != database_url:
        if _engine is not None:
            _engine.dispose()
        _engine = build_engine(database_url)
        _SessionLocal = None
        _database_url = database_url
        logger.info(
            "Database engine created",
            extra={
                "context": {
                    "database_url": mask_url_password(database_url),
                    "dialect": _engine.dialect.name,
                }
            },
        )
    return _engine


def get_sessionmaker() -> sessionmaker:
    """Return a cached sessionmaker bound to the lazy engine."""
    global _SessionLocal
    engine = get_engine()
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )
    return _SessionLocal


def SessionLocal():
    """Return a new Session from the cached sessionmaker."""
    return get_sessionmaker()()


def dispose_engine() -> None:
    """Dispose the cached engine; the next call to get_engine() rebuilds it."""
    global _engine, _SessionLocal, _database_url
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
    _database_url = None


def create_tables(engine: Optional[Engine] = None) -> None:
    """Create all tables in the database."""
    # Models must be imported so Base.metadata is populated
    from scheduler_api.db import base  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def drop_tables(engine: Optional[Engine] = None) -> None:
    from scheduler_api.db import base  # noqa: F401

    Base.metadata.drop_all(bind=engine or get_engine())
