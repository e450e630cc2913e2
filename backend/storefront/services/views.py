"""
Denormalised read models assembled from several collections.

The builders here take a store whose lock the caller already holds; they never
lock and never mutate. Everything they return is detached from the store.
"""
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from storefront.db import Store
from storefront.models import Cart, Item, Order, OrderLine
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.item_repo import ItemRepository


@dataclass(frozen=True)
class CartLineView:
    cart_id: int
    item_id: int
    item: Item


@dataclass(frozen=True)
class CartView:
    cart: Cart
    lines: Tuple[CartLineView, ...]

    @property
    def total_items(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class OrderView:
    order: Order
    cart: Optional[Cart]

    @property
    def lines(self) -> Tuple[OrderLine, ...]:
        return self.order.lines

    @property
    def total_items(self) -> int:
        return len(self.order.lines)


def build_cart_view(store: Store, cart: Cart) -> CartView:
    carts = CartRepository(store)
    items = ItemRepository(store)
    lines: List[CartLineView] = []
    for line in carts.lines(cart.id):
        item = items.require(line.item_id)
        lines.append(CartLineView(cart_id=line.cart_id, item_id=line.item_id, item=replace(item)))
    return CartView(cart=replace(cart), lines=tuple(lines))


def build_order_view(store: Store, order: Order) -> OrderView:
    cart = CartRepository(store).get(order.cart_id)
    return OrderView(order=order, cart=replace(cart) if cart is not None else None)
