from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.interface.i_reservation_command_repo import IReservationCommandRepo
from src.service.lending.domain.entity.reservation_entity import Reservation
from src.service.lending.domain.enum.reservation_status import ReservationStatus
from src.service.lending.driven_adapter.model import ReservationModel


class ReservationCommandRepoImpl(IReservationCommandRepo):
    """Reservation writes on the unit of work's session (no commit here)"""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_reservation: ReservationModel) -> Reservation:
        return Reservation(
            id=db_reservation.id,
            user_id=db_reservation.user_id,
            book_external_id=db_reservation.book_external_id,
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

    @staticmethod
    def _apply(db_reservation: ReservationModel, reservation: Reservation) -> None:
        db_reservation.user_id = reservation.user_id
        db_reservation.book_external_id = reservation.book_external_id
        db_reservation.rental_days = reservation.rental_days
        db_reservation.start_date = reservation.start_date
        db_reservation.expected_return_date = reservation.expected_return_date
        db_reservation.actual_return_date = reservation.actual_return_date
        db_reservation.daily_rate = reservation.daily_rate
        db_reservation.total_fee = reservation.total_fee
        db_reservation.late_fee = reservation.late_fee
        db_reservation.status = reservation.status.value
        if reservation.created_at is not None:
            db_reservation.created_at = reservation.created_at

    @Logger.io
    async def get_by_id(self, *, reservation_id: int) -> Reservation | None:
        result = await self.session.execute(
            select(ReservationModel).where(ReservationModel.id == reservation_id)
        )
        db_reservation = result.scalar_one_or_none()
        if not db_reservation:
            return None
        return self._to_entity(db_reservation)

    @Logger.io
    async def save(self, *, reservation: Reservation) -> Reservation:
        if reservation.id is None:
            db_reservation = ReservationModel()
            self.session.add(db_reservation)
        else:
            found = await self.session.get(ReservationModel, reservation.id)
            if found is None:
                raise NotFoundError('Reservation not found', reservation_id=reservation.id)
            db_reservation = found

        self._apply(db_reservation, reservation)
        await self.session.flush()
        await self.session.refresh(db_reservation)
        return self._to_entity(db_reservation)
