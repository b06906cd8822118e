from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class BookModel(Base):
    __tablename__ = 'book'
    __table_args__ = (
        CheckConstraint('available_quantity >= 0', name='ck_book_available_non_negative'),
        CheckConstraint(
            'available_quantity <= stock_quantity', name='ck_book_available_within_stock'
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    available_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self):
        return (
            f'<BookModel(external_id={self.external_id}, '
            f'available={self.available_quantity}/{self.stock_quantity})>'
        )
