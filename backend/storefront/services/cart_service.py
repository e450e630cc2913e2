from dataclasses import replace

from storefront.db import Store
from storefront.errors import DuplicateLine, ItemUnavailable, NotFound
from storefront.models import Cart, CartLine, User
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.item_repo import ItemRepository
from storefront.repositories.user_repo import UserRepository
from storefront.services.catalogue_service import is_purchasable
from storefront.services.views import CartView, build_cart_view
from storefront.utils.logging import get_logger
from storefront.utils.transactions import read_transaction, write_transaction

log = get_logger(__name__)


class CartService:
    """
    Lifecycle of a user's active cart.

    Every public method is one transaction on the store; only the cart the user
    currently points at is ever read or changed here. Ordered carts are
    reachable through ``QueryService`` only.
    """

    def __init__(self, store: Store):
        self.store = store
        self.user_repo = UserRepository(store)
        self.cart_repo = CartRepository(store)
        self.item_repo = ItemRepository(store)

    def _active_cart(self, user_id: int) -> Cart:
        user: User = self.user_repo.require(user_id)
        cart = self.cart_repo.get_active_for_user(user)
        if cart is None:
            raise NotFound("Cart not found")
        return cart

    def get_active_cart(self, user_id: int) -> Cart:
        with read_transaction(self.store):
            return replace(self._active_cart(user_id))

    def add_item(self, user_id: int, item_id: int) -> CartLine:
        with write_transaction(self.store):
            cart = self._active_cart(user_id)
            item = self.item_repo.require(item_id)
            if not is_purchasable(item.status):
                raise ItemUnavailable("Item is not available")
            if self.cart_repo.get_line(cart.id, item.id) is not None:
                log.debug(f"Item {item.id} already in cart {cart.id}")
                raise DuplicateLine("Item already in cart")
            line = self.cart_repo.add_line(cart, item.id)
        log.info(f"Item {item_id} added to cart {line.cart_id} for user {user_id}")
        return line

    def remove_item(self, user_id: int, item_id: int) -> None:
        with write_transaction(self.store):
            cart = self._active_cart(user_id)
            if not self.cart_repo.remove_line(cart.id, item_id):
                raise NotFound("Item not in cart")
        log.info(f"Item {item_id} removed from cart {cart.id} for user {user_id}")

    def clear_cart(self, user_id: int) -> int:
        with write_transaction(self.store):
            cart = self._active_cart(user_id)
            removed = self.cart_repo.clear_lines(cart.id)
        log.info(f"Cleared {removed} line(s) from cart {cart.id} for user {user_id}")
        return removed

    def list_cart(self, user_id: int) -> CartView:
        with read_transaction(self.store):
            return build_cart_view(self.store, self._active_cart(user_id))
