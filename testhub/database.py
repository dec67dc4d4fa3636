"""Database utilities and setup."""
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from testhub.config import DATABASE_URL

logger = logging.getLogger(__name__)

_IN_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


def _engine_options(url: str) -> dict[str, object]:
    """Build engine keyword arguments for the given URL."""
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    options: dict[str, object] = {"connect_args": {"check_same_thread": False}}
    if url in _IN_MEMORY_URLS:
        # every session must see the same in-memory database
        options["poolclass"] = StaticPool
    return options


# Create engine
engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class _StoreState:
    """Process-wide readiness of the store connection."""

    ready: bool = False


state = _StoreState()


# Base class for models
class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> bool:
    """Initialize database (create all tables) and record readiness."""
    # Register models on Base.metadata before create_all
    from testhub.models import db as _models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        state.ready = False
        logger.error(f"Database connection error: {e}")
        return False
    state.ready = True
    logger.info(f"Database connected: {engine.url.render_as_string(hide_password=True)}")
    return True


def is_connected() -> bool:
    """Check the store is initialized and still answers a ping."""
    if not state.ready:
        return False
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Database ping failed: {e}")
        return False
    return True


def close_db() -> None:
    """Release pooled connections on shutdown."""
    engine.dispose()
    state.ready = False
    logger.info("Database connection closed")
