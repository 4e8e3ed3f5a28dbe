import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from chirpy.config import settings
from chirpy.utils.exceptions import StorageFailureException

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite connections are shared across the threadpool FastAPI runs sync routes on
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size":     settings.DATABASE_POOL_SIZE,
        "max_overflow":  settings.DATABASE_MAX_OVERFLOW,
        "pool_timeout":  settings.DATABASE_POOL_TIMEOUT,
        "pool_pre_ping": True,
    }


# ─── Engine ────────────────────────────────────────────────────────────────────
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    **_engine_options(settings.DATABASE_URL),
)


# ─── Session Factory ───────────────────────────────────────────────────────────
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,      # Avoid DetachedInstanceError after commit
)


# ─── Base Model ────────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.
    All models in chirpy/models/ should inherit from this class.
    """
    pass


# ─── Dependency Injection ──────────────────────────────────────────────────────
def get_db():
    """
    FastAPI dependency that provides a database session per request.
    Automatically closes session after request completes.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# ─── Storage Guard ─────────────────────────────────────────────────────────────
@contextmanager
def storage_operation(db: Session, action: str):
    """
    Wrap one logical storage step.

    Backend errors are rolled back, logged with their traceback and re-raised
    as StorageFailureException so the client only sees a generic 500.
    IntegrityError passes through untouched and is mapped to 409 by its handler.
    """
    try:
        yield
    except IntegrityError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Storage failure while trying to {action}")
        raise StorageFailureException() from exc


# ─── Health Check ──────────────────────────────────────────────────────────────
def check_db_connection() -> bool:
    """Verify database is reachable. Used at startup."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False
