"""Lending Domain Enums"""

from src.service.lending.domain.enum.reservation_status import ReservationStatus

__all__ = ['ReservationStatus']
