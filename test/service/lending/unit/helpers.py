"""
Test helpers for unit tests

Provides reusable test doubles for the lending use cases
"""

from typing import List, Optional
from unittest.mock import AsyncMock

import attrs

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.service.lending.domain.entity.book_entity import BookEntity
from src.service.lending.domain.entity.reservation_entity import Reservation
from src.service.lending.domain.entity.user_entity import UserEntity


class MockUnitOfWork(AbstractUnitOfWork):
    """Records commit/rollback instead of talking to a database"""

    def __init__(self, *, mocks: 'RepositoryMocks') -> None:
        self.reservation_command_repo = mocks.reservation_command_repo
        self.book_inventory_repo = mocks.book_inventory_repo
        self.user_directory_repo = mocks.user_directory_repo
        self.committed = False
        self.rollback_count = 0

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rollback_count += 1


class RepositoryMocks:
    """
    Mock repositories container for testing use cases

    Example:
        ```python
        mocks = RepositoryMocks(user=borrower, book=priced_book)
        use_case = CreateReservationUseCase(uow=mocks.uow)
        result = await use_case.create_reservation(...)
        mocks.book_inventory_repo.decrease_available_quantity.assert_awaited_once()
        ```
    """

    def __init__(
        self,
        *,
        user: Optional[UserEntity] = None,
        book: Optional[BookEntity] = None,
        reservation: Optional[Reservation] = None,
    ) -> None:
        """
        Args:
            user: User returned by the directory; None makes the lookup raise NotFoundError
            book: Book returned by find_by_external_id
            reservation: Reservation returned by get_by_id
        """
        self.saved: List[Reservation] = []
        self.call_order: List[str] = []

        self.user_directory_repo = AsyncMock()
        if user is None:
            self.user_directory_repo.get_user_entity = AsyncMock(
                side_effect=NotFoundError('User not found')
            )
        else:
            self.user_directory_repo.get_user_entity = AsyncMock(return_value=user)

        self.book_inventory_repo = AsyncMock()
        self.book_inventory_repo.find_by_external_id = AsyncMock(return_value=book)
        self.book_inventory_repo.decrease_available_quantity = AsyncMock(
            side_effect=self._record('decrease_available_quantity')
        )
        self.book_inventory_repo.increase_available_quantity = AsyncMock(
            side_effect=self._record('increase_available_quantity')
        )

        self.reservation_command_repo = AsyncMock()
        self.reservation_command_repo.get_by_id = AsyncMock(return_value=reservation)
        self.reservation_command_repo.save = AsyncMock(side_effect=self._save)

        self.uow = MockUnitOfWork(mocks=self)

    def _record(self, name: str):
        async def _side_effect(**kwargs) -> None:
            self.call_order.append(name)

        return _side_effect

    async def _save(self, *, reservation: Reservation) -> Reservation:
        """Mock: assign id 1 on first save (simulates successful persistence)"""
        self.call_order.append('save')
        saved = reservation if reservation.id is not None else attrs.evolve(reservation, id=1)
        self.saved.append(saved)
        return saved
