#!/usr/bin/env python3
"""
Database Seed Script
Populate sample users and books for local runs

Features:
1. Create Tables - create the schema if it does not exist
2. Create Users - borrowers that reservations can reference
3. Create Books - catalog rows with a daily price and availability counters

Run with: python -m script.seed_data
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy import select

from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_session_maker,
)
from src.service.lending.driven_adapter.model import BookModel, UserModel


@dataclass
class UserConfig:
    """User seed configuration"""

    name: str
    email: str


@dataclass
class BookConfig:
    """Book seed configuration"""

    external_id: int
    title: str
    price: Optional[Decimal]
    stock_quantity: int


TEST_USERS = [
    UserConfig(name='Juan Perez', email='juan@example.com'),
    UserConfig(name='Maria Garcia', email='maria@example.com'),
]

TEST_BOOKS = [
    BookConfig(external_id=258027, title='The Lord of the Rings', price=Decimal('15.99'), stock_quantity=5),
    BookConfig(external_id=27421, title='Pride and Prejudice', price=Decimal('9.50'), stock_quantity=2),
    BookConfig(external_id=1, title='Out of Print Pamphlet', price=Decimal('3.00'), stock_quantity=0),
]


async def seed() -> None:
    await create_db_and_tables()
    print('🗄️  Tables ready')

    async with get_session_maker()() as session:
        for user in TEST_USERS:
            exists = await session.scalar(select(UserModel).where(UserModel.email == user.email))
            if exists:
                print(f'   ⏭️  User {user.name} already exists')
                continue
            session.add(UserModel(name=user.name, email=user.email))
            print(f'   ✅ Created user {user.name}')

        for book in TEST_BOOKS:
            exists = await session.scalar(
                select(BookModel).where(BookModel.external_id == book.external_id)
            )
            if exists:
                print(f'   ⏭️  Book {book.external_id} already exists')
                continue
            session.add(
                BookModel(
                    external_id=book.external_id,
                    title=book.title,
                    price=book.price,
                    stock_quantity=book.stock_quantity,
                    available_quantity=book.stock_quantity,
                )
            )
            print(f'   ✅ Created book {book.external_id} ({book.title})')

        await session.commit()

    await dispose_engine()
    print('🌱 Seed complete')


if __name__ == '__main__':
    asyncio.run(seed())
