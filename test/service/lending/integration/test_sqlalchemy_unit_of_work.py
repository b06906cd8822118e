"""
Integration test for the lending use cases on SqlAlchemyUnitOfWork

The reservation write and the inventory adjustment share one session and
commit together.
"""

from datetime import date
from decimal import Decimal

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import InvalidStateError
from src.service.lending.app.command.create_reservation_use_case import CreateReservationUseCase
from src.service.lending.app.command.return_book_use_case import ReturnBookUseCase
from src.service.lending.domain.enum.reservation_status import ReservationStatus
from src.service.lending.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from test.constants import BOOK_EXTERNAL_ID


async def _reserve(session_maker, *, user_id: int):
    async with session_maker() as session:
        return await CreateReservationUseCase(uow=SqlAlchemyUnitOfWork(session)).create_reservation(
            user_id=user_id,
            book_external_id=BOOK_EXTERNAL_ID,
            rental_days=7,
            start_date=date(2025, 1, 10),
        )


@pytest.mark.integration
class TestLendingUnitOfWork:
    @pytest.mark.asyncio
    async def test_last_copy_reserved_once(
        self, session_maker, seeded_catalog, available_quantity
    ):
        """
        Given: one copy left
        When: two users reserve it one after the other
        Then: the first gets it, the second is rejected and nothing of it is stored
        """
        first = await _reserve(session_maker, user_id=seeded_catalog['user_id'])

        with pytest.raises(InvalidStateError):
            await _reserve(session_maker, user_id=seeded_catalog['another_user_id'])

        reservations = await ReservationQueryRepoImpl(session_factory=session_maker).list_all()
        assert [r.id for r in reservations] == [first.id]
        assert first.total_fee == Decimal('111.93')
        assert await available_quantity(BOOK_EXTERNAL_ID) == 0

    @pytest.mark.asyncio
    async def test_late_return_puts_copy_back(
        self, session_maker, seeded_catalog, available_quantity
    ):
        reserved = await _reserve(session_maker, user_id=seeded_catalog['user_id'])

        async with session_maker() as session:
            returned = await ReturnBookUseCase(uow=SqlAlchemyUnitOfWork(session)).return_book(
                reservation_id=reserved.id, return_date=date(2025, 1, 20)
            )

        assert returned.status == ReservationStatus.OVERDUE
        assert returned.late_fee == Decimal('7.20')
        assert await available_quantity(BOOK_EXTERNAL_ID) == 1

        overdue = await ReservationQueryRepoImpl(session_factory=session_maker).list_overdue(
            today=date(2025, 1, 21)
        )
        assert overdue == []
