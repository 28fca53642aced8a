"""In-process key-value store adapter."""

import logging

from app.ports.store import KeyValueStorePort

logger = logging.getLogger(__name__)


class InMemoryStoreAdapter(KeyValueStorePort):
    """Keep values in a dict. Nothing survives a restart."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__()
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
        logger.debug("Stored key: %s (%d chars)", key, len(value))
