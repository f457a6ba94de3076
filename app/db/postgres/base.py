import logging
import threading
from typing import Optional

from sqlalchemy import create_engine, exc
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.settings import Settings, settings

logger = logging.getLogger(__name__)

Base = declarative_base()
SessionLocal = sessionmaker(autoflush=False, autocommit=False)

_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def build_engine(settings_obj: Settings = settings) -> Engine:
    connect_args = {
        "connect_timeout": settings_obj.DB_CONNECT_TIMEOUT,
        "options": f"-c statement_timeout={settings_obj.DB_STATEMENT_TIMEOUT_MS}",
    }
    if settings_obj.DATABASE_SSLMODE:
        connect_args["sslmode"] = settings_obj.DATABASE_SSLMODE

    return create_engine(
        settings_obj.postgres_url,
        future=True,
        echo=False,
        pool_size=settings_obj.DB_POOL_SIZE,
        pool_timeout=settings_obj.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def get_engine() -> Engine:
    """Return the process engine, creating it on first use or after a reset."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = build_engine()
    return _engine


def dispose_engine() -> None:
    global _engine
    with _engine_lock:
        engine, _engine = _engine, None
    if engine is not None:
        engine.dispose()


def is_connection_fault(error: BaseException) -> bool:
    if isinstance(error, (exc.OperationalError, exc.InterfaceError)):
        return True
    return isinstance(error, exc.DBAPIError) and error.connection_invalidated


def handle_db_fault(error: BaseException) -> None:
    """Drop the pool after a connection-level fault; the next request rebuilds it."""
    if is_connection_fault(error):
        logger.warning(f"Discarding database engine after connection fault: {error}")
        dispose_engine()


def init_db(engine: Optional[Engine] = None) -> None:
    """Create missing tables. Run once before the app starts serving."""
    from app.models import post  # noqa: F401  registers the posts table

    Base.metadata.create_all(bind=engine or get_engine())
    logger.info("Database schema ready")


def get_db():
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()
