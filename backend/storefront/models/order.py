from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class OrderLine:
    """Copy of an item as it looked when the cart was ordered."""

    item_id: int
    name: str
    status: str
    image: Optional[str] = None


@dataclass(frozen=True)
class Order:
    id: int
    cart_id: int
    user_id: int
    created_at: datetime
    lines: Tuple[OrderLine, ...] = ()
