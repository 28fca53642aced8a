"""Borrow and reserve workflows."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from app.domain.entities import BorrowedBy, InventoryRecord, RecordStatus
from app.domain.errors import BookAvailableError, BookNotFoundError, BookUnavailableError
from app.ports.store import KeyValueStorePort
from app.services.snapshot import open_snapshot

logger = logging.getLogger(__name__)

DEFAULT_LOAN_PERIOD = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CirculationService:
    """Handles borrowing, reservations and inventory listings."""

    def __init__(
        self,
        store: KeyValueStorePort,
        loan_period: timedelta = DEFAULT_LOAN_PERIOD,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._loan_period = loan_period
        self._clock = clock

    async def borrow_book(self, username: str, title: str) -> InventoryRecord:
        """
        Lend the first available copy of ``title`` to ``username``.

        The entry is marked unavailable and a Borrowed record, due back after
        the loan period, is appended to the user's inventory. Raises
        BookUnavailableError (no state change) when no available entry has
        exactly that title.
        """
        async with open_snapshot(self._store) as snapshot:
            entry = next(
                (e for e in snapshot.catalog if e.title == title and e.available),
                None,
            )
            if entry is None:
                raise BookUnavailableError(title)

            entry.available = False
            record = InventoryRecord.borrowed(title, self._clock(), self._loan_period)
            snapshot.inventory.setdefault(username, []).append(record)

            await snapshot.save_inventory()
            await snapshot.save_catalog()
        logger.info("%s borrowed %r, due %s", username, title, record.return_date)
        return record

    async def reserve_book(self, username: str, title: str) -> InventoryRecord:
        """
        Queue ``username`` for a title that is currently out.

        Raises BookAvailableError when the title can simply be borrowed and
        BookNotFoundError when the catalog has no such title.
        """
        async with open_snapshot(self._store) as snapshot:
            matching = [e for e in snapshot.catalog if e.title == title]
            if not matching:
                raise BookNotFoundError(title)
            if all(e.available for e in matching):
                raise BookAvailableError(title)

            record = InventoryRecord.reserved(title, self._clock())
            snapshot.inventory.setdefault(username, []).append(record)

            await snapshot.save_inventory()
        logger.info("%s reserved %r", username, title)
        return record

    async def inventory_for(self, username: str) -> list[InventoryRecord]:
        async with open_snapshot(self._store) as snapshot:
            return snapshot.inventory.get(username, [])

    async def borrowed_books(self) -> list[BorrowedBy]:
        """Every Borrowed record across all users, grouped by user."""
        async with open_snapshot(self._store) as snapshot:
            return [
                BorrowedBy(username=username, record=record)
                for username, records in snapshot.inventory.items()
                for record in records
                if record.status is RecordStatus.BORROWED
            ]
