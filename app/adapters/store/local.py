"""Local filesystem key-value store adapter."""

import logging
import re
from uuid import uuid4
from pathlib import Path

import aiofiles
import aiofiles.os

from app.ports.store import KeyValueStorePort

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class LocalFileStoreAdapter(KeyValueStorePort):
    """Store each key as ``<key>.json`` on the local filesystem."""

    def __init__(self, base_path: str) -> None:
        super().__init__()
        self._base = Path(base_path)
        self._base.mkdir(parents=True, exist_ok=True)
        logger.info("LocalFileStore initialized at: %s", self._base.resolve())

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self._base / f"{key}.json"

    async def get(self, key: str) -> str | None:
        """Read the value for ``key`` from disk, or None if no file exists."""
        filepath = self._path_for(key)
        if not await aiofiles.os.path.exists(filepath):
            return None
        async with aiofiles.open(filepath, "r", encoding="utf-8") as f:
            value = await f.read()
        logger.debug("Read key: %s (%d chars)", key, len(value))
        return value

    async def set(self, key: str, value: str) -> None:
        """Write the value through a temp file so readers never see a partial write."""
        filepath = self._path_for(key)
        tmp_path = filepath.with_name(f"{filepath.name}.{uuid4().hex}.tmp")
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
            await f.write(value)
        await aiofiles.os.replace(tmp_path, filepath)
        logger.info("Saved key: %s (%d chars)", key, len(value))
