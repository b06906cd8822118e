"""Application layer interfaces (Ports)"""

from src.service.lending.app.interface.i_book_inventory_repo import IBookInventoryRepo
from src.service.lending.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.lending.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.lending.app.interface.i_user_directory_repo import IUserDirectoryRepo

__all__ = [
    'IBookInventoryRepo',
    'IReservationCommandRepo',
    'IReservationQueryRepo',
    'IUserDirectoryRepo',
]
