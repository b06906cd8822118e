from datetime import date
from typing import Self

from fastapi import Depends
from opentelemetry import trace

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.domain.enum.reservation_status import ReservationStatus


class ReturnBookUseCase:
    """
    Record the return of a reserved book.

    A return after the expected date is charged a late fee and finalizes the
    reservation as OVERDUE; otherwise it is RETURNED with a zero late fee.
    The copy goes back into inventory in the same transaction.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def return_book(self, *, reservation_id: int, return_date: date) -> ReservationDetail:
        with self.tracer.start_as_current_span(
            'use_case.return_book', attributes={'reservation.id': reservation_id}
        ):
            async with self.uow:
                reservation = await self.uow.reservation_command_repo.get_by_id(
                    reservation_id=reservation_id
                )
                if not reservation:
                    raise NotFoundError('Reservation not found', reservation_id=reservation_id)

                # Raises InvalidStateError unless still ACTIVE
                returned = reservation.mark_as_returned(return_date=return_date)

                book = await self.uow.book_inventory_repo.find_by_external_id(
                    external_id=reservation.book_external_id
                )
                if not book:
                    raise NotFoundError(
                        'Book not found', book_external_id=reservation.book_external_id
                    )
                user = await self.uow.user_directory_repo.get_user_entity(
                    user_id=reservation.user_id
                )

                saved = await self.uow.reservation_command_repo.save(reservation=returned)
                await self.uow.book_inventory_repo.increase_available_quantity(
                    external_id=saved.book_external_id
                )
                await self.uow.commit()

            if saved.status == ReservationStatus.OVERDUE:
                Logger.base.warning(
                    f'⏰ [RETURN-BOOK] Reservation {saved.id} returned late, '
                    f'late fee {saved.late_fee}'
                )
            else:
                Logger.base.info(f'✅ [RETURN-BOOK] Reservation {saved.id} returned on time')

            return ReservationDetail.from_reservation(saved, user=user, book=book)
