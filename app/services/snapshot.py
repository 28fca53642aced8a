"""Load and persist the library state held in the key-value store."""

import json
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, TypeVar

from app.domain.entities import (
    CatalogEntry,
    InventoryRecord,
    Preferences,
    UserInventory,
    default_catalog,
)
from app.ports.store import KeyValueStorePort

logger = logging.getLogger(__name__)

BOOKS_KEY = "books"
INVENTORY_KEY = "userInventory"
PREFERENCES_KEY = "userPreferences"

T = TypeVar("T")


@dataclass
class LibrarySnapshot:
    """
    The decoded content of every store key for one operation.

    Services load a snapshot, mutate it in place and write back only the
    keys they touched. Each ``save_*`` call writes the full structure.
    """

    store: KeyValueStorePort
    catalog: list[CatalogEntry] = field(default_factory=list)
    inventory: UserInventory = field(default_factory=dict)
    preferences: dict[str, Preferences] = field(default_factory=dict)

    async def save_catalog(self) -> None:
        await self.store.set(BOOKS_KEY, _dumps([entry.to_dict() for entry in self.catalog]))

    async def save_inventory(self) -> None:
        raw = {
            username: [record.to_dict() for record in records]
            for username, records in self.inventory.items()
        }
        await self.store.set(INVENTORY_KEY, _dumps(raw))

    async def save_preferences(self) -> None:
        raw = {username: prefs.to_dict() for username, prefs in self.preferences.items()}
        await self.store.set(PREFERENCES_KEY, _dumps(raw))


async def load_snapshot(store: KeyValueStorePort) -> LibrarySnapshot:
    """Read all keys. Absent or unreadable values fall back to their defaults."""
    catalog = _decode(
        BOOKS_KEY, await store.get(BOOKS_KEY), _decode_catalog, default_catalog
    )
    inventory = _decode(
        INVENTORY_KEY, await store.get(INVENTORY_KEY), _decode_inventory, dict
    )
    preferences = _decode(
        PREFERENCES_KEY, await store.get(PREFERENCES_KEY), _decode_preferences, dict
    )
    return LibrarySnapshot(
        store=store,
        catalog=catalog,
        inventory=inventory,
        preferences=preferences,
    )


@asynccontextmanager
async def open_snapshot(store: KeyValueStorePort) -> AsyncIterator[LibrarySnapshot]:
    """
    Load a snapshot while holding the store lock.

    The lock stays held until the block exits, so a load, the mutation and
    its ``save_*`` calls run without another operation interleaving.
    """
    async with store.lock:
        yield await load_snapshot(store)


def _dumps(data: Any) -> str:
    # ASCII escapes keep lone surrogates from browser-written titles storable
    return json.dumps(data)


def _decode(
    key: str,
    raw: str | None,
    decoder: Callable[[Any], T],
    default: Callable[[], T],
) -> T:
    if raw is None:
        return default()
    try:
        return decoder(json.loads(raw))
    except (ValueError, TypeError, KeyError, AttributeError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.warning("Stored %r is unreadable, using default: %s", key, exc)
        return default()


def _decode_catalog(data: Any) -> list[CatalogEntry]:
    # A stored ``null`` reads like a missing key
    if data is None:
        return default_catalog()
    if not isinstance(data, list):
        raise TypeError(f"expected a list, got {type(data).__name__}")
    return [CatalogEntry.from_dict(item) for item in data]


def _decode_inventory(data: Any) -> UserInventory:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"expected an object, got {type(data).__name__}")
    return {
        str(username): [InventoryRecord.from_dict(item) for item in records]
        for username, records in data.items()
    }


def _decode_preferences(data: Any) -> dict[str, Preferences]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"expected an object, got {type(data).__name__}")
    return {str(username): Preferences.from_dict(item) for username, item in data.items()}
