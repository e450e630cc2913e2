from storefront.models.user import User
from storefront.models.item import Item
from storefront.models.cart import Cart, CartStatus
from storefront.models.cart_item import CartLine, CartLineKey
from storefront.models.order import Order, OrderLine

__all__ = [
    "User",
    "Item",
    "Cart",
    "CartStatus",
    "CartLine",
    "CartLineKey",
    "Order",
    "OrderLine",
]
