import logging

from chacara.core.config import Settings
from chacara.stores.base import LogStore, Store, TaskStore
from chacara.stores.local import LocalStore
from chacara.stores.sql import SqlStore

logger = logging.getLogger(__name__)


async def open_store(settings: Settings) -> Store:
    """
    Pick the backing store once, at startup.

    Prefers the remote database; an unset, malformed or unreachable
    DATABASE_URL degrades to the local JSON blob with a warning.
    """
    if settings.remote_store_configured:
        store = None
        try:
            store = SqlStore.from_url(settings.DATABASE_URL)
            await store.ping()
        except Exception as exc:
            logger.warning(
                "remote store unavailable (%s: %s); falling back to local store at %s",
                type(exc).__name__, exc, settings.LOCAL_STORE_PATH,
            )
            if store is not None:
                await store.close()
        else:
            logger.info("using remote store")
            return store
    else:
        logger.warning("DATABASE_URL not configured; using local store at %s", settings.LOCAL_STORE_PATH)
    return LocalStore(settings.LOCAL_STORE_PATH)


__all__ = [
    "LocalStore",
    "LogStore",
    "SqlStore",
    "Store",
    "TaskStore",
    "open_store",
]
