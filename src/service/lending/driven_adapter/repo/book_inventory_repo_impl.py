from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import InvalidStateError
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.interface.i_book_inventory_repo import IBookInventoryRepo
from src.service.lending.domain.entity.book_entity import BookEntity
from src.service.lending.driven_adapter.model import BookModel


class BookInventoryRepoImpl(IBookInventoryRepo):
    """
    Availability counters on the book table.

    Each adjustment is a single conditional UPDATE so two concurrent
    reservations cannot both take the last copy.
    """

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_book: BookModel) -> BookEntity:
        return BookEntity(
            id=db_book.id,
            external_id=db_book.external_id,
            title=db_book.title,
            price=db_book.price,
            stock_quantity=db_book.stock_quantity,
            available_quantity=db_book.available_quantity,
        )

    @Logger.io
    async def find_by_external_id(self, *, external_id: int) -> BookEntity | None:
        result = await self.session.execute(
            select(BookModel).where(BookModel.external_id == external_id)
        )
        db_book = result.scalar_one_or_none()
        if not db_book:
            return None
        return self._to_entity(db_book)

    @Logger.io
    async def decrease_available_quantity(self, *, external_id: int) -> None:
        result = await self.session.execute(
            update(BookModel)
            .where(BookModel.external_id == external_id, BookModel.available_quantity > 0)
            .values(available_quantity=BookModel.available_quantity - 1)
        )
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            raise InvalidStateError('No copies available to reserve', book_external_id=external_id)

    @Logger.io
    async def increase_available_quantity(self, *, external_id: int) -> None:
        result = await self.session.execute(
            update(BookModel)
            .where(
                BookModel.external_id == external_id,
                BookModel.available_quantity < BookModel.stock_quantity,
            )
            .values(available_quantity=BookModel.available_quantity + 1)
        )
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            raise InvalidStateError(
                'Every copy of this book is already available', book_external_id=external_id
            )
