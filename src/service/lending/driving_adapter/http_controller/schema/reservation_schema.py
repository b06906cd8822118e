from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.service.lending.domain.enum.reservation_status import ReservationStatus


class ReservationCreateRequest(BaseModel):
    user_id: int
    book_external_id: int
    rental_days: int
    start_date: date

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'user_id': 1,
                'book_external_id': 258027,
                'rental_days': 7,
                'start_date': '2025-01-10',
            }
        }
    )


class ReturnBookRequest(BaseModel):
    return_date: date

    model_config = ConfigDict(json_schema_extra={'example': {'return_date': '2025-01-17'}})


class ReservationResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'user_id': 1,
                'user_name': 'Juan Perez',
                'book_external_id': 258027,
                'book_title': 'The Lord of the Rings',
                'rental_days': 7,
                'start_date': '2025-01-10',
                'expected_return_date': '2025-01-17',
                'actual_return_date': None,
                'daily_rate': '15.99',
                'total_fee': '111.93',
                'late_fee': None,
                'status': 'ACTIVE',
                'created_at': '2025-01-10T10:30:00Z',
            }
        },
    )

    id: int
    user_id: int
    user_name: str
    book_external_id: int
    book_title: str
    rental_days: int
    start_date: date
    expected_return_date: date
    actual_return_date: Optional[date] = None
    daily_rate: Decimal
    total_fee: Decimal
    late_fee: Optional[Decimal] = None
    status: ReservationStatus
    created_at: Optional[datetime] = None
