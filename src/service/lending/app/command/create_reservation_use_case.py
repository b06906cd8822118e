from datetime import date
from typing import Self

from fastapi import Depends
from opentelemetry import trace

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import InvalidStateError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.domain.entity.reservation_entity import Reservation


class CreateReservationUseCase:
    """
    Reserve one copy of a book for a user

    Flow:
    1. Resolve user and book (Fail Fast on unknown ids)
    2. Check the book has an available copy
    3. Price the rental from the book's daily rate
    4. Save the ACTIVE reservation, then take one copy out of inventory
    5. Commit both writes in one transaction

    Nothing is written when any check fails.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_reservation(
        self,
        *,
        user_id: int,
        book_external_id: int,
        rental_days: int,
        start_date: date,
    ) -> ReservationDetail:
        """
        Raises:
            NotFoundError: Unknown user or book
            InvalidStateError: No copy of the book is available
            InvalidInputError: Non-positive rental days or book without a price
        """
        with self.tracer.start_as_current_span(
            'use_case.create_reservation',
            attributes={'user.id': user_id, 'book.external_id': book_external_id},
        ):
            async with self.uow:
                user = await self.uow.user_directory_repo.get_user_entity(user_id=user_id)

                book = await self.uow.book_inventory_repo.find_by_external_id(
                    external_id=book_external_id
                )
                if not book:
                    raise NotFoundError('Book not found', book_external_id=book_external_id)

                if not book.is_available:
                    raise InvalidStateError(
                        'No copies available to reserve',
                        book_external_id=book_external_id,
                        available_quantity=book.available_quantity,
                    )

                reservation = Reservation.create(
                    user_id=user_id,
                    book_external_id=book_external_id,
                    rental_days=rental_days,
                    start_date=start_date,
                    daily_rate=book.price,
                )

                saved = await self.uow.reservation_command_repo.save(reservation=reservation)
                await self.uow.book_inventory_repo.decrease_available_quantity(
                    external_id=book_external_id
                )
                await self.uow.commit()

            Logger.base.info(
                f'📚 [CREATE-RESERVATION] Reservation {saved.id} for user {user_id}, '
                f'book {book_external_id}, total fee {saved.total_fee}'
            )
            return ReservationDetail.from_reservation(saved, user=user, book=book)
