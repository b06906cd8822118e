from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.lending.domain.enum.reservation_status import ReservationStatus
from src.service.lending.driven_adapter.model import ReservationModel


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        An injected session is used as is; otherwise a short-lived one comes
        from session_factory.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _base_query() -> Select[tuple[ReservationModel]]:
        return select(ReservationModel).options(
            selectinload(ReservationModel.user),
            selectinload(ReservationModel.book),
        )

    @staticmethod
    def _to_detail(db_reservation: ReservationModel) -> ReservationDetail:
        user_name = db_reservation.user.name if db_reservation.user else 'Unknown User'
        book_title = db_reservation.book.title if db_reservation.book else 'Unknown Book'
        return ReservationDetail(
            id=db_reservation.id,
            user_id=db_reservation.user_id,
            user_name=user_name,
            book_external_id=db_reservation.book_external_id,
            book_title=book_title,
            rental_days=db_reservation.rental_days,
            start_date=db_reservation.start_date,
            expected_return_date=db_reservation.expected_return_date,
            actual_return_date=db_reservation.actual_return_date,
            daily_rate=db_reservation.daily_rate,
            total_fee=db_reservation.total_fee,
            late_fee=db_reservation.late_fee,
            status=ReservationStatus(db_reservation.status),
            created_at=db_reservation.created_at,
        )

    async def _fetch_all(self, query: Select[tuple[ReservationModel]]) -> List[ReservationDetail]:
        async with self._get_session() as session:
            result = await session.execute(query.order_by(ReservationModel.id))
            return [self._to_detail(row) for row in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, reservation_id: int) -> ReservationDetail | None:
        async with self._get_session() as session:
            result = await session.execute(
                self._base_query().where(ReservationModel.id == reservation_id)
            )
            db_reservation = result.scalar_one_or_none()
            if not db_reservation:
                return None
            return self._to_detail(db_reservation)

    @Logger.io
    async def list_all(self) -> List[ReservationDetail]:
        return await self._fetch_all(self._base_query())

    @Logger.io
    async def list_by_user_id(self, *, user_id: int) -> List[ReservationDetail]:
        return await self._fetch_all(
            self._base_query().where(ReservationModel.user_id == user_id)
        )

    @Logger.io
    async def list_by_status(self, *, status: ReservationStatus) -> List[ReservationDetail]:
        return await self._fetch_all(
            self._base_query().where(ReservationModel.status == status.value)
        )

    @Logger.io
    async def list_overdue(self, *, today: date) -> List[ReservationDetail]:
        return await self._fetch_all(
            self._base_query().where(
                ReservationModel.status == ReservationStatus.ACTIVE.value,
                ReservationModel.expected_return_date < today,
            )
        )
