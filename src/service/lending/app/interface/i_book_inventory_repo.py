"""
Book Inventory Repository Interface

Lending only reads books and moves their availability counters; catalog
management lives elsewhere.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.lending.domain.entity.book_entity import BookEntity


class IBookInventoryRepo(ABC):
    @abstractmethod
    async def find_by_external_id(self, *, external_id: int) -> Optional[BookEntity]:
        pass

    @abstractmethod
    async def decrease_available_quantity(self, *, external_id: int) -> None:
        """
        Take one copy out of the available pool

        Raises:
            InvalidStateError: If no copy is available
        """
        pass

    @abstractmethod
    async def increase_available_quantity(self, *, external_id: int) -> None:
        """
        Put one copy back into the available pool

        Raises:
            InvalidStateError: If every copy in stock is already available
        """
        pass
