# conectidade/storage/__init__.py
import logging

from conectidade.storage.base import Storage
from conectidade.storage.memory import MemStorage
from conectidade.storage.sessions import MemorySessionStore

logger = logging.getLogger(__name__)

__all__ = ["Storage", "MemStorage", "MemorySessionStore", "build_storage"]


def build_storage(settings) -> Storage:
    """Pick the storage backend named by ``settings.STORAGE_BACKEND``."""
    session_store = MemorySessionStore(
        ttl_seconds=settings.SESSION_TTL_SECONDS,
        check_period_seconds=settings.SESSION_CHECK_PERIOD_SECONDS,
    )
    backend = (settings.STORAGE_BACKEND or "memory").strip().lower()

    if backend == "memory":
        logger.info("Using in-memory storage")
        return MemStorage(session_store=session_store)

    if backend == "sql":
        if not settings.DATABASE_URL:
            raise RuntimeError("DATABASE_URL is not set. Check your .env file.")
        from conectidade.database import make_engine
        from conectidade.storage.sql import SqlStorage

        logger.info("Using SQL storage")
        return SqlStorage(make_engine(settings.DATABASE_URL), session_store=session_store)

    raise RuntimeError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND!r}")
