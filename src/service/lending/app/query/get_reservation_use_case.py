from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.app.interface.i_reservation_query_repo import IReservationQueryRepo


class GetReservationUseCase:
    def __init__(self, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def get_reservation(self, reservation_id: int) -> ReservationDetail:
        reservation = await self.reservation_query_repo.get_by_id(reservation_id=reservation_id)

        if not reservation:
            raise NotFoundError('Reservation not found', reservation_id=reservation_id)

        return reservation
