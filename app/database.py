"""Async SQLAlchemy engine helpers."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.domain.models import Base


def build_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, future=True)


async def create_tables(engine: AsyncEngine) -> None:
    """Create the ``kv_entries`` table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
