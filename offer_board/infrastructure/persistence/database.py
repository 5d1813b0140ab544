from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from offer_board.infrastructure.config.settings import Settings
from offer_board.infrastructure.persistence.models import table_registry


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        settings = Settings()
        _EngineStore.engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)
    return _EngineStore.engine


async def get_session() -> AsyncIterator[AsyncSession]:
    engine = get_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
