import sys
from pathlib import Path

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine


def _ensure_local_backend_on_path() -> None:
    root_dir = Path(__file__).resolve().parents[1]
    if str(root_dir) not in sys.path:
        sys.path.insert(0, str(root_dir))


_ensure_local_backend_on_path()

from app.core.database import configure_engine  # noqa: E402
from app.models import Base, Locale  # noqa: E402


@pytest_asyncio.fixture()
async def session_factory() -> async_sessionmaker[AsyncSession]:
    """In-memory database with the schema created and two locales (en=1, fr=2)."""
    engine = configure_engine(create_async_engine("sqlite+aiosqlite:///:memory:"))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        session.add_all([Locale(code="en", name="English"), Locale(code="fr", name="French")])
        await session.commit()

    yield factory

    await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncSession:
    async with session_factory() as session:
        yield session
