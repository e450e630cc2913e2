from typing import List, Optional

from storefront.db import Store
from storefront.errors import NotFound
from storefront.models import Cart, CartLine, CartLineKey, CartStatus, User


class CartRepository:
    def __init__(self, store: Store):
        self.store = store

    def get(self, cart_id: int) -> Optional[Cart]:
        return self.store.carts.get(cart_id)

    def require(self, cart_id: int) -> Cart:
        cart = self.get(cart_id)
        if cart is None:
            raise NotFound("Cart not found")
        return cart

    def get_active_for_user(self, user: User) -> Optional[Cart]:
        cart = self.store.carts.get(user.cart_id)
        if cart is None or cart.user_id != user.id or not cart.is_active:
            return None
        return cart

    def create(self, user_id: int, name: str) -> Cart:
        cart = Cart(
            id=self.store.next_id(),
            user_id=user_id,
            name=name,
            status=CartStatus.ACTIVE,
            created_at=self.store.now(),
        )
        self.store.carts[cart.id] = cart
        return cart

    def mark_ordered(self, cart: Cart) -> Cart:
        cart.status = CartStatus.ORDERED
        return cart

    def list(self) -> List[Cart]:
        return sorted(self.store.carts.values(), key=lambda c: c.id)

    # lines

    def get_line(self, cart_id: int, item_id: int) -> Optional[CartLine]:
        return self.store.cart_lines.get(CartLineKey(cart_id, item_id))

    def lines(self, cart_id: int) -> List[CartLine]:
        found = [l for k, l in self.store.cart_lines.items() if k.cart_id == cart_id]
        return sorted(found, key=lambda l: l.item_id)

    def add_line(self, cart: Cart, item_id: int) -> CartLine:
        line = CartLine(cart_id=cart.id, item_id=item_id)
        self.store.cart_lines[line.key] = line
        return line

    def remove_line(self, cart_id: int, item_id: int) -> bool:
        return self.store.cart_lines.pop(CartLineKey(cart_id, item_id), None) is not None

    def clear_lines(self, cart_id: int) -> int:
        keys = [k for k in self.store.cart_lines if k.cart_id == cart_id]
        for k in keys:
            del self.store.cart_lines[k]
        return len(keys)
