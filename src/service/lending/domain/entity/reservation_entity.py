from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidStateError
from src.platform.logging.loguru_io import Logger
from src.service.lending.domain.enum.reservation_status import ReservationStatus
from src.service.lending.domain.fee_policy import (
    calculate_days_late,
    calculate_late_fee,
    calculate_total_fee,
    to_money,
)


@attrs.define
class Reservation:
    user_id: int
    book_external_id: int
    rental_days: int
    start_date: date
    expected_return_date: date
    daily_rate: Decimal
    total_fee: Decimal
    status: ReservationStatus = ReservationStatus.ACTIVE
    actual_return_date: Optional[date] = None
    late_fee: Optional[Decimal] = None  # Unset until the book comes back
    created_at: Optional[datetime] = None
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        book_external_id: int,
        rental_days: int,
        start_date: date,
        daily_rate: Optional[Decimal],
    ) -> 'Reservation':
        total_fee = calculate_total_fee(daily_rate=daily_rate, rental_days=rental_days)
        assert daily_rate is not None

        return cls(
            user_id=user_id,
            book_external_id=book_external_id,
            rental_days=rental_days,
            start_date=start_date,
            expected_return_date=start_date + timedelta(days=rental_days),
            daily_rate=to_money(daily_rate),
            total_fee=total_fee,
            status=ReservationStatus.ACTIVE,
            actual_return_date=None,
            late_fee=None,
            created_at=datetime.now(timezone.utc),
            id=None,
        )

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def is_past_due(self, *, today: date) -> bool:
        """Still out and past its expected return date (not the OVERDUE status)."""
        return self.is_active and self.expected_return_date < today

    @Logger.io
    def mark_as_returned(self, *, return_date: date) -> 'Reservation':
        """Late fee base is the daily rate stored at creation, not the current book price."""
        if not self.is_active:
            raise InvalidStateError(
                'Reservation has already been returned',
                reservation_id=self.id,
                status=self.status.value,
            )

        days_late = calculate_days_late(
            expected_return_date=self.expected_return_date, return_date=return_date
        )
        return attrs.evolve(
            self,
            actual_return_date=return_date,
            late_fee=calculate_late_fee(daily_rate=self.daily_rate, days_late=days_late),
            status=ReservationStatus.OVERDUE if days_late > 0 else ReservationStatus.RETURNED,
        )
