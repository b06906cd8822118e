"""Reservation read projection returned by every lending use case."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.service.lending.domain.entity.book_entity import BookEntity
from src.service.lending.domain.entity.reservation_entity import Reservation
from src.service.lending.domain.entity.user_entity import UserEntity
from src.service.lending.domain.enum.reservation_status import ReservationStatus


@attrs.define(frozen=True)
class ReservationDetail:
    """
    Reservation joined with the borrower's name and the book's title.

    Commands build it from the entities they already hold; query repositories
    build it straight from joined rows.
    """

    id: int
    user_id: int
    user_name: str
    book_external_id: int
    book_title: str
    rental_days: int
    start_date: date
    expected_return_date: date
    daily_rate: Decimal
    total_fee: Decimal
    status: ReservationStatus
    actual_return_date: Optional[date] = None
    late_fee: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_reservation(
        cls, reservation: Reservation, *, user: UserEntity, book: BookEntity
    ) -> 'ReservationDetail':
        if reservation.id is None:
            raise ValueError('Reservation must be persisted before projecting it')

        return cls(
            id=reservation.id,
            user_id=reservation.user_id,
            user_name=user.name,
            book_external_id=reservation.book_external_id,
            book_title=book.title,
            rental_days=reservation.rental_days,
            start_date=reservation.start_date,
            expected_return_date=reservation.expected_return_date,
            daily_rate=reservation.daily_rate,
            total_fee=reservation.total_fee,
            status=reservation.status,
            actual_return_date=reservation.actual_return_date,
            late_fee=reservation.late_fee,
            created_at=reservation.created_at,
        )
