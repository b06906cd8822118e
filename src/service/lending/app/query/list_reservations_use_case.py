from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.dto.reservation_detail import ReservationDetail
from src.service.lending.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.lending.domain.enum.reservation_status import ReservationStatus


class ListReservationsUseCase:
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
    async def list_all(self) -> List[ReservationDetail]:
        return await self.reservation_query_repo.list_all()

    @Logger.io
    async def list_by_user(self, user_id: int) -> List[ReservationDetail]:
        return await self.reservation_query_repo.list_by_user_id(user_id=user_id)

    @Logger.io
    async def list_active(self) -> List[ReservationDetail]:
        return await self.reservation_query_repo.list_by_status(status=ReservationStatus.ACTIVE)

    @Logger.io
    async def list_overdue(self, today: Optional[date] = None) -> List[ReservationDetail]:
        """
        Reservations still out past their expected return date.

        Not the same set as status OVERDUE, which only returned reservations carry.
        """
        return await self.reservation_query_repo.list_overdue(today=today or date.today())
