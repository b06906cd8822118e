"""Application layer DTOs"""

from src.service.lending.app.dto.reservation_detail import ReservationDetail

__all__ = ['ReservationDetail']
