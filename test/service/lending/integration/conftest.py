"""
Integration fixtures: real PostgreSQL behind the lending adapters

The test database (POSTGRES_DB from test/conftest.py) is created when missing
and its tables rebuilt once per session; every test starts from empty tables.
Tests are skipped when no PostgreSQL server is reachable.
"""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from sqlalchemy import select, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base, dispose_engine, get_session_maker
from src.service.lending.driven_adapter.model import BookModel, UserModel
from test.constants import (
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_NAME,
    BOOK_EXTERNAL_ID,
    BOOK_PRICE,
    BOOK_TITLE,
    TEST_USER_EMAIL,
    TEST_USER_NAME,
)


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    db_url = make_url(settings.DATABASE_URL_ASYNC)

    # Create database if not exists
    admin_engine = create_async_engine(
        db_url.set(database='postgres'), isolation_level='AUTOCOMMIT'
    )
    try:
        async with admin_engine.connect() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': db_url.database},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE "{db_url.database}"'))
    finally:
        await admin_engine.dispose()

    # Rebuild tables from the current models
    engine = create_async_engine(db_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


@pytest.fixture(scope='session')
def lending_database() -> None:
    try:
        asyncio.run(_setup_test_database())
    except (OSError, DBAPIError) as e:
        pytest.skip(f'PostgreSQL not reachable: {e}')


@pytest.fixture
async def session_maker(
    lending_database: None,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    maker = get_session_maker()
    async with maker() as session:
        await session.execute(
            text('TRUNCATE "reservation", "book", "user" RESTART IDENTITY CASCADE')
        )
        await session.commit()

    yield maker

    # Engine is bound to this test's event loop
    await dispose_engine()


@pytest.fixture
async def seeded_catalog(session_maker: async_sessionmaker[AsyncSession]) -> dict[str, int]:
    """Two users and one book with its last copy on the shelf (1 of 2 available)"""
    async with session_maker() as session:
        borrower = UserModel(name=TEST_USER_NAME, email=TEST_USER_EMAIL)
        another = UserModel(name=ANOTHER_USER_NAME, email=ANOTHER_USER_EMAIL)
        session.add_all(
            [
                borrower,
                another,
                BookModel(
                    external_id=BOOK_EXTERNAL_ID,
                    title=BOOK_TITLE,
                    price=BOOK_PRICE,
                    stock_quantity=2,
                    available_quantity=1,
                ),
            ]
        )
        await session.commit()
        return {'user_id': borrower.id, 'another_user_id': another.id}


@pytest.fixture
def available_quantity(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[[int], Awaitable[int | None]]:
    async def _fetch(external_id: int) -> int | None:
        async with session_maker() as session:
            return await session.scalar(
                select(BookModel.available_quantity).where(BookModel.external_id == external_id)
            )

    return _fetch
