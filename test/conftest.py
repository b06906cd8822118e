"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- Shared entity fixtures (a borrower, a priced book, an active reservation)

Architecture:
- Unit tests (test/**/unit/): use case tests with AsyncMock repositories
- API tests (test/**/api/): FastAPI TestClient over in-memory ports
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('POSTGRES_DB', 'lending_test_db')
    os.environ.setdefault('SERVICE_NAME', 'lending-test')


_early_setup_test_environment()

from datetime import date, datetime, timedelta, timezone  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402

from src.service.lending.domain.entity.book_entity import BookEntity  # noqa: E402
from src.service.lending.domain.entity.reservation_entity import Reservation  # noqa: E402
from src.service.lending.domain.entity.user_entity import UserEntity  # noqa: E402
from src.service.lending.domain.enum.reservation_status import ReservationStatus  # noqa: E402
from test.constants import (  # noqa: E402
    BOOK_EXTERNAL_ID,
    BOOK_PRICE,
    BOOK_TITLE,
    TEST_USER_EMAIL,
    TEST_USER_ID,
    TEST_USER_NAME,
)


@pytest.fixture
def borrower() -> UserEntity:
    return UserEntity(id=TEST_USER_ID, name=TEST_USER_NAME, email=TEST_USER_EMAIL)


@pytest.fixture
def priced_book() -> BookEntity:
    """Five of ten copies on the shelf, 15.99 per day"""
    return BookEntity(
        id=1,
        external_id=BOOK_EXTERNAL_ID,
        title=BOOK_TITLE,
        price=BOOK_PRICE,
        stock_quantity=10,
        available_quantity=5,
    )


@pytest.fixture
def start_date() -> date:
    return date(2025, 1, 10)


@pytest.fixture
def active_reservation(start_date: date) -> Reservation:
    """Seven-day rental starting on start_date, expected back on 2025-01-17"""
    return Reservation(
        id=1,
        user_id=TEST_USER_ID,
        book_external_id=BOOK_EXTERNAL_ID,
        rental_days=7,
        start_date=start_date,
        expected_return_date=start_date + timedelta(days=7),
        daily_rate=BOOK_PRICE,
        total_fee=Decimal('111.93'),
        status=ReservationStatus.ACTIVE,
        created_at=datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc),
    )
