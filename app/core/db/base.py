from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from app.core.config import settings
from app.core.logging import get_logger

from typing import AsyncIterator


Base = declarative_base()


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    if url.startswith("sqlite"):
        # sqlite connections must not outlive the event loop that opened them
        return create_async_engine(url, echo=echo, poolclass=NullPool)
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.storage.database_url, echo=settings.storage.echo)

async_session_maker = async_sessionmaker(
    engine,
    expire_on_commit=False,
)


logger = get_logger(__name__)


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create tables for every registered model."""
    # Register models on Base.metadata
    from app.core.db import schemas  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error(f"Session rolled back due to error: {e}")
            raise
