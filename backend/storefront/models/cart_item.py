from dataclasses import dataclass
from typing import NamedTuple


class CartLineKey(NamedTuple):
    cart_id: int
    item_id: int


@dataclass(frozen=True)
class CartLine:
    cart_id: int
    item_id: int

    @property
    def key(self) -> CartLineKey:
        return CartLineKey(self.cart_id, self.item_id)
