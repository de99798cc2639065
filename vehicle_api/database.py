import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from vehicle_api.config import settings

logger = logging.getLogger(__name__)


def _get_database_url() -> str:
    url = settings.database_url
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _is_sqlite() -> bool:
    return settings.database_url.startswith("sqlite")


_database_url = _get_database_url()

_engine_kwargs: dict = {"echo": False}
if not _is_sqlite():
    _engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

engine = create_async_engine(_database_url, **_engine_kwargs)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def create_tables(target_engine=None):
    async with (target_engine or engine).begin() as conn:
        from vehicle_api.models import vehicle  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker = async_session,
    read_only: bool = False,
) -> AsyncIterator[AsyncSession]:
    """Open a session whose work is committed or rolled back as one unit.

    Read-only transactions never flush and always end in a rollback. Loaded
    objects are expunged first so they stay readable after the session closes.
    On PostgreSQL the transaction is additionally declared READ ONLY.
    """
    async with session_factory() as session:
        if read_only:
            session.autoflush = False
            if session.bind is not None and session.bind.dialect.name == "postgresql":
                await session.execute(text("SET TRANSACTION READ ONLY"))
        try:
            yield session
            if read_only:
                session.expunge_all()
                await session.rollback()
            else:
                await session.commit()
        except Exception:
            logger.debug("Rolling back %s transaction", "read-only" if read_only else "read-write")
            await session.rollback()
            raise
