"""
Reservation Command Repository Interface

Used inside a unit of work by the create and return use cases.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.lending.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def save(self, *, reservation: Reservation) -> Reservation:
        """
        Insert a new reservation (id is None) or update an existing one

        Returns:
            Persisted reservation, with its id assigned on first save
        """
        pass
