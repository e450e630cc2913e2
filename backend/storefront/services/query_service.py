from dataclasses import replace
from typing import List, Optional, Tuple

from storefront.db import Store
from storefront.errors import NotFound
from storefront.models import Item, User
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.item_repo import ItemRepository
from storefront.repositories.order_repo import OrderRepository
from storefront.repositories.user_repo import UserRepository
from storefront.services.views import CartView, OrderView, build_cart_view, build_order_view
from storefront.utils.transactions import read_transaction

MAX_PAGE_SIZE = 100


class QueryService:
    """Read-only projections; each takes the read lock exactly once."""

    def __init__(self, store: Store):
        self.store = store
        self.user_repo = UserRepository(store)
        self.item_repo = ItemRepository(store)
        self.cart_repo = CartRepository(store)
        self.order_repo = OrderRepository(store)

    def list_items(
        self,
        q: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        size: int = 20,
    ) -> Tuple[List[Item], int]:
        if page < 1:
            raise ValueError("page must be >= 1")
        if size < 1 or size > MAX_PAGE_SIZE:
            raise ValueError(f"size must be between 1 and {MAX_PAGE_SIZE}")
        with read_transaction(self.store):
            items, total = self.item_repo.list(q=q, status=status, page=page, size=size)
            return [replace(i) for i in items], total

    def cart_view(self, cart_id: int) -> CartView:
        with read_transaction(self.store):
            return build_cart_view(self.store, self.cart_repo.require(cart_id))

    def list_carts(self) -> List[CartView]:
        with read_transaction(self.store):
            return [build_cart_view(self.store, c) for c in self.cart_repo.list()]

    def order_view(self, order_id: int, user_id: Optional[int] = None) -> OrderView:
        with read_transaction(self.store):
            order = self.order_repo.get(order_id)
            # other users' orders look absent
            if order is None or (user_id is not None and order.user_id != user_id):
                raise NotFound("Order not found")
            return build_order_view(self.store, order)

    def orders_for_user(self, user_id: int) -> List[OrderView]:
        with read_transaction(self.store):
            self.user_repo.require(user_id)
            return [build_order_view(self.store, o) for o in self.order_repo.for_user(user_id)]

    def list_orders(self) -> List[OrderView]:
        with read_transaction(self.store):
            return [build_order_view(self.store, o) for o in self.order_repo.list()]

    def list_users(self) -> List[User]:
        with read_transaction(self.store):
            return [replace(u) for u in self.user_repo.list()]
