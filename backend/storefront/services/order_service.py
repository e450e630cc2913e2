from typing import List

from storefront.db import Store
from storefront.errors import EmptyCart, NoActiveCart
from storefront.models import Order, OrderLine
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.item_repo import ItemRepository
from storefront.repositories.order_repo import OrderRepository
from storefront.repositories.user_repo import UserRepository
from storefront.services.user_service import DEFAULT_CART_NAME
from storefront.utils.logging import get_logger
from storefront.utils.transactions import write_transaction

log = get_logger(__name__)


class OrderService:
    def __init__(self, store: Store):
        self.store = store
        self.user_repo = UserRepository(store)
        self.cart_repo = CartRepository(store)
        self.item_repo = ItemRepository(store)
        self.order_repo = OrderRepository(store)

    def _snapshot(self, cart_id: int) -> List[OrderLine]:
        lines = []
        for line in self.cart_repo.lines(cart_id):
            item = self.item_repo.require(line.item_id)
            lines.append(
                OrderLine(item_id=item.id, name=item.name, status=item.status, image=item.image)
            )
        return lines

    def create_order(self, user_id: int) -> Order:
        """
        Convert the user's active cart into an order.

        1. Find the active cart (NoActiveCart if there is none)
        2. Refuse an empty cart (EmptyCart)
        3. Snapshot the lines into a new order
        4. Mark the cart ordered
        5. Give the user a fresh empty active cart
        6. Store the order

        All checks happen before the first write and the whole sequence holds the
        write lock, so readers see either the old state or the new one.
        """
        with write_transaction(self.store) as s:
            user = self.user_repo.get(user_id)
            cart = self.cart_repo.get_active_for_user(user) if user is not None else None
            if cart is None:
                raise NoActiveCart("No active cart found")

            snapshot = self._snapshot(cart.id)
            if not snapshot:
                raise EmptyCart("Cart is empty")

            order = Order(
                id=s.next_id(),
                cart_id=cart.id,
                user_id=user.id,
                created_at=s.now(),
                lines=tuple(snapshot),
            )
            self.cart_repo.mark_ordered(cart)
            new_cart = self.cart_repo.create(user.id, DEFAULT_CART_NAME)
            user.cart_id = new_cart.id
            self.cart_repo.clear_lines(cart.id)
            self.order_repo.add(order)

        log.info(
            f"Order {order.id} created for user {user_id} with {len(order.lines)} items; "
            f"cart {order.cart_id} ordered, new cart {new_cart.id}"
        )
        return order
