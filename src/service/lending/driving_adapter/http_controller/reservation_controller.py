from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.lending.app.command.create_reservation_use_case import CreateReservationUseCase
from src.service.lending.app.command.return_book_use_case import ReturnBookUseCase
from src.service.lending.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.lending.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.lending.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationCreateRequest,
    ReservationResponse,
    ReturnBookRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationCreateRequest,
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.create_reservation(
        user_id=request.user_id,
        book_external_id=request.book_external_id,
        rental_days=request.rental_days,
        start_date=request.start_date,
    )
    return ReservationResponse.model_validate(reservation)


@router.post('/{reservation_id}/return', status_code=status.HTTP_200_OK)
@Logger.io
async def return_book(
    reservation_id: int,
    request: ReturnBookRequest,
    use_case: ReturnBookUseCase = Depends(ReturnBookUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.return_book(
        reservation_id=reservation_id, return_date=request.return_date
    )
    return ReservationResponse.model_validate(reservation)


@router.get('', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations(
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.list_all()
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.get('/active', response_model=List[ReservationResponse])
@Logger.io
async def list_active_reservations(
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.list_active()
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.get('/overdue', response_model=List[ReservationResponse])
@Logger.io
async def list_overdue_reservations(
    today: Optional[date] = None,
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationResponse]:
    """Still-active reservations past their expected return date (``today`` defaults to now)"""
    reservations = await use_case.list_overdue(today)
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.get('/user/{user_id}', response_model=List[ReservationResponse])
@Logger.io
async def list_user_reservations(
    user_id: int,
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.list_by_user(user_id)
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.get('/{reservation_id}')
@Logger.io
async def get_reservation(
    reservation_id: int,
    use_case: GetReservationUseCase = Depends(GetReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.get_reservation(reservation_id)
    return ReservationResponse.model_validate(reservation)
