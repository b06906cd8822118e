"""
Rental and late fee rules

All amounts are ``Decimal`` quantized to two places with half-up rounding.
The late fee is a flat share of the daily rate per late day, linear in the
number of days and never compounded.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from src.platform.exception.exceptions import InvalidInputError


MONEY_QUANTUM = Decimal('0.01')
LATE_FEE_RATE = Decimal('0.15')
ZERO_FEE = Decimal('0.00')


def to_money(amount: Decimal | int | float | str) -> Decimal:
    # str() first so a float price like 15.99 does not carry binary noise
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def calculate_total_fee(*, daily_rate: Optional[Decimal], rental_days: Optional[int]) -> Decimal:
    if daily_rate is None:
        raise InvalidInputError('Daily rate is not set for this book')
    if rental_days is None or rental_days <= 0:
        raise InvalidInputError('Rental days must be positive', rental_days=rental_days)
    return to_money(Decimal(str(daily_rate)) * rental_days)


def calculate_days_late(*, expected_return_date: date, return_date: date) -> int:
    return max((return_date - expected_return_date).days, 0)


def calculate_late_fee(*, daily_rate: Decimal, days_late: int) -> Decimal:
    if days_late <= 0:
        return ZERO_FEE
    return to_money(Decimal(str(daily_rate)) * LATE_FEE_RATE * days_late)
