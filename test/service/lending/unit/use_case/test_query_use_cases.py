"""Unit tests for GetReservationUseCase and ListReservationsUseCase"""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.lending.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.lending.domain.enum.reservation_status import ReservationStatus
from test.constants import BOOK_EXTERNAL_ID, BOOK_TITLE, TEST_USER_ID, TEST_USER_NAME


@pytest.fixture
def reservation_detail() -> ReservationDetail:
    return ReservationDetail(
        id=1,
        user_id=TEST_USER_ID,
        user_name=TEST_USER_NAME,
        book_external_id=BOOK_EXTERNAL_ID,
        book_title=BOOK_TITLE,
        rental_days=7,
        start_date=date(2025, 1, 10),
        expected_return_date=date(2025, 1, 17),
        daily_rate=Decimal('15.99'),
        total_fee=Decimal('111.93'),
        status=ReservationStatus.ACTIVE,
    )


@pytest.fixture
def query_repo(reservation_detail: ReservationDetail) -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=reservation_detail)
    repo.list_all = AsyncMock(return_value=[reservation_detail])
    repo.list_by_user_id = AsyncMock(return_value=[reservation_detail])
    repo.list_by_status = AsyncMock(return_value=[reservation_detail])
    repo.list_overdue = AsyncMock(return_value=[])
    return repo


@pytest.mark.unit
class TestGetReservation:
    @pytest.mark.asyncio
    async def test_get_existing_reservation(self, query_repo, reservation_detail):
        use_case = GetReservationUseCase(reservation_query_repo=query_repo)

        result = await use_case.get_reservation(1)

        assert result == reservation_detail
        query_repo.get_by_id.assert_awaited_once_with(reservation_id=1)

    @pytest.mark.asyncio
    async def test_get_missing_reservation_raises_not_found(self, query_repo):
        query_repo.get_by_id.return_value = None
        use_case = GetReservationUseCase(reservation_query_repo=query_repo)

        with pytest.raises(NotFoundError, match='Reservation not found') as exc_info:
            await use_case.get_reservation(99)

        assert exc_info.value.status_code == 404
        assert exc_info.value.context == {'reservation_id': 99}


@pytest.mark.unit
class TestListReservations:
    @pytest.mark.asyncio
    async def test_list_all(self, query_repo, reservation_detail):
        use_case = ListReservationsUseCase(reservation_query_repo=query_repo)

        assert await use_case.list_all() == [reservation_detail]

    @pytest.mark.asyncio
    async def test_list_by_user(self, query_repo):
        use_case = ListReservationsUseCase(reservation_query_repo=query_repo)

        await use_case.list_by_user(TEST_USER_ID)

        query_repo.list_by_user_id.assert_awaited_once_with(user_id=TEST_USER_ID)

    @pytest.mark.asyncio
    async def test_list_active_filters_on_active_status(self, query_repo):
        use_case = ListReservationsUseCase(reservation_query_repo=query_repo)

        await use_case.list_active()

        query_repo.list_by_status.assert_awaited_once_with(status=ReservationStatus.ACTIVE)

    @pytest.mark.asyncio
    async def test_list_overdue_uses_given_day(self, query_repo):
        use_case = ListReservationsUseCase(reservation_query_repo=query_repo)

        await use_case.list_overdue(date(2025, 2, 1))

        query_repo.list_overdue.assert_awaited_once_with(today=date(2025, 2, 1))

    @pytest.mark.asyncio
    async def test_list_overdue_defaults_to_today(self, query_repo):
        use_case = ListReservationsUseCase(reservation_query_repo=query_repo)

        await use_case.list_overdue()

        query_repo.list_overdue.assert_awaited_once_with(today=date.today())
