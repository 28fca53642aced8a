"""Key-value store port — abstract interface for persisted library state."""

import asyncio
from abc import ABC, abstractmethod


class KeyValueStorePort(ABC):
    """
    Flat key-value store holding JSON text.

    Values are opaque strings; decoding (and recovering from malformed
    content) is the caller's job. Writes replace the whole value.

    ``lock`` serializes read-modify-write cycles of every caller sharing
    this store instance.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never set."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
