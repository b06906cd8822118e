"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.lending.driven_adapter.model.book_model import BookModel
from src.service.lending.driven_adapter.model.reservation_model import ReservationModel
from src.service.lending.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookModel',
    'ReservationModel',
    'UserModel',
]
