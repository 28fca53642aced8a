"""SQL key-value store adapter (SQLite, PostgreSQL, ...)."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.database import create_tables
from app.domain.models import KeyValueEntry
from app.ports.store import KeyValueStorePort

logger = logging.getLogger(__name__)


class SqlStoreAdapter(KeyValueStorePort):
    """Store values as rows of the ``kv_entries`` table."""

    def __init__(self, engine: AsyncEngine) -> None:
        super().__init__()
        self._engine = engine
        self._session_factory = async_sessionmaker(engine, expire_on_commit=False)
        logger.info("SqlStore initialized: %s", engine.url.render_as_string(hide_password=True))

    async def create_schema(self) -> None:
        await create_tables(self._engine)

    async def dispose(self) -> None:
        await self._engine.dispose()

    async def get(self, key: str) -> str | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(KeyValueEntry.value).where(KeyValueEntry.key == key)
            )
            return result.scalar_one_or_none()

    async def set(self, key: str, value: str) -> None:
        """Insert or overwrite the row for ``key`` in its own transaction."""
        async with self._session_factory() as session:
            async with session.begin():
                entry = await session.get(KeyValueEntry, key)
                if entry is None:
                    session.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
        logger.info("Saved key: %s (%d chars)", key, len(value))
