import enum
from dataclasses import dataclass
from datetime import datetime


class CartStatus(str, enum.Enum):
    ACTIVE = "active"
    ORDERED = "ordered"


@dataclass
class Cart:
    id: int
    user_id: int
    name: str
    created_at: datetime
    status: CartStatus = CartStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == CartStatus.ACTIVE
