from enum import StrEnum


class ReservationStatus(StrEnum):
    """Reservation lifecycle status

    ACTIVE is the only non-terminal state; a return moves it to RETURNED (on
    time) or OVERDUE (after the expected return date).
    """

    ACTIVE = 'ACTIVE'
    RETURNED = 'RETURNED'
    OVERDUE = 'OVERDUE'
