"""Catalog maintenance and title search."""

import logging

from app.domain.entities import CatalogEntry
from app.domain.errors import DuplicateTitleError, OutOfRangeError
from app.ports.store import KeyValueStorePort
from app.services.ranking import rank
from app.services.snapshot import open_snapshot

logger = logging.getLogger(__name__)


class CatalogService:
    """Lists, adds, removes and searches catalog entries."""

    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store

    async def list_books(self) -> list[CatalogEntry]:
        async with open_snapshot(self._store) as snapshot:
            return snapshot.catalog

    async def unavailable_books(self) -> list[CatalogEntry]:
        """Entries that can currently only be reserved."""
        async with open_snapshot(self._store) as snapshot:
            return [entry for entry in snapshot.catalog if not entry.available]

    async def add_book(self, title: str, author: str, genre: str | None = None) -> CatalogEntry:
        """Append a new, available entry. Raises DuplicateTitleError if the title exists."""
        async with open_snapshot(self._store) as snapshot:
            if any(entry.title == title for entry in snapshot.catalog):
                raise DuplicateTitleError(title)

            entry = CatalogEntry(title=title, author=author, genre=genre)
            snapshot.catalog.append(entry)
            await snapshot.save_catalog()
        logger.info("Added book: %r by %s", title, author)
        return entry

    async def remove_book(self, index: int) -> CatalogEntry:
        """
        Remove the entry at ``index`` (catalog order).

        Raises OutOfRangeError and leaves the catalog untouched when the
        index does not point at an entry. Negative indexes are rejected.
        """
        async with open_snapshot(self._store) as snapshot:
            if not 0 <= index < len(snapshot.catalog):
                raise OutOfRangeError(index)

            removed = snapshot.catalog.pop(index)
            await snapshot.save_catalog()
        logger.info("Removed book #%d: %r", index, removed.title)
        return removed

    async def search(self, query: str, limit: int = 1) -> list[CatalogEntry]:
        async with open_snapshot(self._store) as snapshot:
            results = rank(query, snapshot.catalog, limit=limit)
        logger.debug("Search %r matched %d book(s)", query, len(results))
        return results
