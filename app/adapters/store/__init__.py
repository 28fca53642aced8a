"""Key-value store adapters and the factory that picks one from settings."""

from app.adapters.store.local import LocalFileStoreAdapter
from app.adapters.store.memory import InMemoryStoreAdapter
from app.adapters.store.sql import SqlStoreAdapter
from app.config import Settings, StorageBackend
from app.database import build_engine
from app.ports.store import KeyValueStorePort

__all__ = [
    "InMemoryStoreAdapter",
    "LocalFileStoreAdapter",
    "SqlStoreAdapter",
    "build_store",
]


def build_store(config: Settings) -> KeyValueStorePort:
    """Instantiate the adapter named by ``config.storage_backend``."""
    if config.storage_backend is StorageBackend.MEMORY:
        return InMemoryStoreAdapter()
    if config.storage_backend is StorageBackend.SQL:
        return SqlStoreAdapter(build_engine(config.database_url))
    return LocalFileStoreAdapter(config.storage_dir)
