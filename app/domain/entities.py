"""Catalog, inventory and preference records.

These are the objects the services load from the key-value store, mutate and
write back. The ``to_dict`` / ``from_dict`` pairs use the camelCase field
names of the stored JSON blobs so existing data keeps loading.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any


class RecordStatus(str, Enum):
    BORROWED = "Borrowed"
    RESERVED = "Reserved"


@dataclass
class CatalogEntry:
    """A book on the shelf. ``title`` is unique within a catalog."""

    title: str
    author: str
    genre: str | None = None
    available: bool = True

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title, "author": self.author}
        if self.genre is not None:
            data["genre"] = self.genre
        data["available"] = self.available
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogEntry":
        return cls(
            title=_str_field(data, "title"),
            author=_str_field(data, "author"),
            genre=_optional_str_field(data, "genre"),
            available=_bool_field(data, "available", default=True),
        )


@dataclass(frozen=True)
class InventoryRecord:
    """
    One borrow or reservation made by a user.

    Borrowed records carry ``borrowed_on`` and ``return_date``; reserved
    records carry ``reserved_on`` only. Records are never changed once
    appended to a user's inventory.
    """

    title: str
    status: RecordStatus
    borrowed_on: datetime | None = None
    return_date: datetime | None = None
    reserved_on: datetime | None = None

    @classmethod
    def borrowed(cls, title: str, on: datetime, loan_period: timedelta) -> "InventoryRecord":
        return cls(
            title=title,
            status=RecordStatus.BORROWED,
            borrowed_on=on,
            return_date=on + loan_period,
        )

    @classmethod
    def reserved(cls, title: str, on: datetime) -> "InventoryRecord":
        return cls(title=title, status=RecordStatus.RESERVED, reserved_on=on)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title, "status": self.status.value}
        if self.status is RecordStatus.BORROWED:
            data["borrowedOn"] = _iso(self.borrowed_on)
            data["returnDate"] = _iso(self.return_date)
        else:
            data["reservedOn"] = _iso(self.reserved_on)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InventoryRecord":
        # Records written before statuses existed were always borrows
        status = RecordStatus(data.get("status") or RecordStatus.BORROWED.value)
        if status is RecordStatus.BORROWED:
            return cls(
                title=_str_field(data, "title"),
                status=status,
                borrowed_on=_parse(data.get("borrowedOn")),
                return_date=_parse(data.get("returnDate")),
            )
        return cls(
            title=_str_field(data, "title"),
            status=status,
            reserved_on=_parse(data.get("reservedOn")),
        )


@dataclass(frozen=True)
class Preferences:
    """Genre/author a user wants recommendations for. ``None`` matches nothing."""

    genre: str | None = None
    author: str | None = None

    def merged(self, override: "Preferences | None") -> "Preferences":
        if override is None:
            return self
        return Preferences(
            genre=override.genre if override.genre is not None else self.genre,
            author=override.author if override.author is not None else self.author,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"genre": self.genre, "author": self.author}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Preferences":
        return cls(
            genre=_optional_str_field(data, "genre"),
            author=_optional_str_field(data, "author"),
        )


# username -> records, oldest first
UserInventory = dict[str, list[InventoryRecord]]


@dataclass(frozen=True)
class BorrowedBy:
    """An open borrow together with the user holding it."""

    username: str
    record: InventoryRecord


def default_catalog() -> list[CatalogEntry]:
    """The shelf a fresh installation starts with."""
    return [
        CatalogEntry(title="The Great Gatsby", author="F. Scott Fitzgerald"),
        CatalogEntry(title="1984", author="George Orwell"),
        CatalogEntry(title="To Kill a Mockingbird", author="Harper Lee", available=False),
        CatalogEntry(title="Moby Dick", author="Herman Melville"),
    ]


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse(value: Any) -> datetime | None:
    if value is None:
        return None
    return datetime.fromisoformat(str(value))


# Stored blobs are written by other clients; wrong types raise TypeError so
# the loader falls back to its default instead of coercing them.


def _str_field(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _optional_str_field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string or null, got {type(value).__name__}")
    return value


def _bool_field(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {type(value).__name__}")
    return value
