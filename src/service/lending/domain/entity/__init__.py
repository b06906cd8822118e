"""Lending Domain Entities"""

from src.service.lending.domain.entity.book_entity import BookEntity
from src.service.lending.domain.entity.reservation_entity import Reservation
from src.service.lending.domain.entity.user_entity import UserEntity

__all__ = ['BookEntity', 'Reservation', 'UserEntity']
