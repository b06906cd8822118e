from decimal import Decimal
from typing import Optional

import attrs


@attrs.define
class BookEntity:
    """Catalog book as seen by lending: price and availability counters only"""

    external_id: int
    title: str = ''
    price: Optional[Decimal] = None  # Charged per rental day
    stock_quantity: int = 0
    available_quantity: int = 0
    id: Optional[int] = None

    @property
    def is_available(self) -> bool:
        return self.available_quantity > 0
