from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from storefront.models import Order
from storefront.services.views import OrderView


class OrderLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    item_id: int
    name: str
    status: str
    image: Optional[str] = None


class OrderCartOut(BaseModel):
    id: int
    name: str
    status: str
    created_at: datetime


class OrderOut(BaseModel):
    id: int
    cart_id: int
    user_id: int
    created_at: datetime
    items: List[OrderLineOut]
    items_count: int
    cart: Optional[OrderCartOut] = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            cart_id=order.cart_id,
            user_id=order.user_id,
            created_at=order.created_at,
            items=[OrderLineOut.model_validate(l) for l in order.lines],
            items_count=len(order.lines),
        )

    @classmethod
    def from_view(cls, view: OrderView) -> "OrderOut":
        out = cls.from_order(view.order)
        if view.cart is not None:
            out.cart = OrderCartOut(
                id=view.cart.id,
                name=view.cart.name,
                status=view.cart.status.value,
                created_at=view.cart.created_at,
            )
        return out
