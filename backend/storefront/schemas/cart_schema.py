from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.item_schema import ItemOut
from storefront.services.views import CartView


class AddItemIn(BaseModel):
    item_id: int = Field(..., gt=0)


class CartLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    cart_id: int
    item_id: int


class CartLineDetailOut(CartLineOut):
    item: ItemOut


class CartOut(BaseModel):
    id: int
    user_id: int
    name: str
    status: str
    created_at: datetime
    cart_items: List[CartLineDetailOut]
    total_items: int

    @classmethod
    def from_view(cls, view: CartView) -> "CartOut":
        cart = view.cart
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            name=cart.name,
            status=cart.status.value,
            created_at=cart.created_at,
            cart_items=[CartLineDetailOut.model_validate(l) for l in view.lines],
            total_items=view.total_items,
        )


class ClearCartOut(BaseModel):
    removed: int
