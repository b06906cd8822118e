"""
Unit of Work Pattern - one database session and transaction per command

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories obtain the shared session through the UoW
- Command use cases coordinate the reservation store and the book inventory
  through the UoW so both writes commit together or not at all
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.lending.app.interface.i_book_inventory_repo import IBookInventoryRepo
    from src.service.lending.app.interface.i_reservation_command_repo import (
        IReservationCommandRepo,
    )
    from src.service.lending.app.interface.i_user_directory_repo import IUserDirectoryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the lending service

    Usage:
        async with uow:
            saved = await uow.reservation_command_repo.save(reservation=...)
            await uow.book_inventory_repo.decrease_available_quantity(external_id=...)
            await uow.commit()

    Leaving the block without commit() rolls back.
    """

    reservation_command_repo: IReservationCommandRepo
    book_inventory_repo: IBookInventoryRepo
    user_directory_repo: IUserDirectoryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.lending.driven_adapter.repo.book_inventory_repo_impl import (
            BookInventoryRepoImpl,
        )
        from src.service.lending.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )
        from src.service.lending.driven_adapter.repo.user_directory_repo_impl import (
            UserDirectoryRepoImpl,
        )

        self.reservation_command_repo = ReservationCommandRepoImpl(session=self.session)
        self.book_inventory_repo = BookInventoryRepoImpl(session=self.session)
        self.user_directory_repo = UserDirectoryRepoImpl(session=self.session)
        return await super().__aenter__()

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """FastAPI dependency for Unit of Work"""
    return SqlAlchemyUnitOfWork(session)
