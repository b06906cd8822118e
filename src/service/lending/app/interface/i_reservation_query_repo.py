from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.domain.enum.reservation_status import ReservationStatus


class IReservationQueryRepo(ABC):
    """Repository interface for reservation read operations"""

    @abstractmethod
    async def get_by_id(self, *, reservation_id: int) -> Optional[ReservationDetail]:
        pass

    @abstractmethod
    async def list_all(self) -> List[ReservationDetail]:
        pass

    @abstractmethod
    async def list_by_user_id(self, *, user_id: int) -> List[ReservationDetail]:
        pass

    @abstractmethod
    async def list_by_status(self, *, status: ReservationStatus) -> List[ReservationDetail]:
        pass

    @abstractmethod
    async def list_overdue(self, *, today: date) -> List[ReservationDetail]:
        """Reservations still ACTIVE whose expected return date is before ``today``"""
        pass
