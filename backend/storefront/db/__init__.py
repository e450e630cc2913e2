from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import Request

from storefront.config import settings
from storefront.db.lock import RWLock
from storefront.db.sequence import IdSequence
from storefront.models import Cart, CartLine, CartLineKey, Item, Order, User
from storefront.utils.logging import get_logger

log = get_logger(__name__)

SEED_ITEMS = [
    {"name": "Laptop", "image": "/assets/products/laptop.jpg"},
    {"name": "Smartphone", "image": "/assets/products/smartphone.jpg"},
    {"name": "Headphones", "image": "/assets/products/headphones.jpg"},
    {"name": "Keyboard", "image": "/assets/products/keyboard.jpg"},
    {"name": "Mouse", "image": "/assets/products/mouse.jpg"},
    {"name": "Monitor", "image": "/assets/products/monitor.jpg"},
    {"name": "Tablet", "image": "/assets/products/tablet.jpg"},
    {"name": "Webcam", "image": "/assets/products/webcam.jpg"},
]


class Store:
    """
    Volatile entity store: one dict per collection plus the id sequence.

    Collections are plain dicts and carry no locking of their own; callers go
    through ``read_transaction`` / ``write_transaction`` in
    ``storefront.utils.transactions``.
    """

    def __init__(self, sequence: Optional[IdSequence] = None):
        self.users: Dict[int, User] = {}
        self.usernames: Dict[str, int] = {}
        self.items: Dict[int, Item] = {}
        self.carts: Dict[int, Cart] = {}
        self.cart_lines: Dict[CartLineKey, CartLine] = {}
        self.orders: Dict[int, Order] = {}
        self.sequence = sequence or IdSequence()
        self.lock = RWLock()

    def next_id(self) -> int:
        return self.sequence.next_id()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def counts(self) -> Dict[str, int]:
        return {
            "users": len(self.users),
            "items": len(self.items),
            "carts": len(self.carts),
            "cart_lines": len(self.cart_lines),
            "orders": len(self.orders),
        }


def init_db(store: Store) -> None:
    """
    Seed a fresh store.

    Behavior:
      - The default catalogue is created only when the store has no items.
      - The admin account (and its cart) is created only when no user holds
        ``settings.ADMIN_USERNAME``.
    Calling this again on an initialised store is a no-op.
    """
    # imported here: services import this module for Store
    from storefront.security import hash_password
    from storefront.services.catalogue_service import CatalogueService
    from storefront.services.user_service import UserService
    from storefront.errors import AlreadyExists, NotFound

    catalogue = CatalogueService(store)
    created = catalogue.seed(SEED_ITEMS)
    if created:
        log.info(f"Seeded {created} catalogue items")

    users = UserService(store)
    try:
        users.find_user_by_username(settings.ADMIN_USERNAME)
        log.info("Admin user already exists")
        return
    except NotFound:
        pass

    try:
        users.register(
            settings.ADMIN_USERNAME,
            hash_password(settings.ADMIN_PASSWORD),
            cart_name="Admin Cart",
        )
        log.info(f"Created admin user (username: {settings.ADMIN_USERNAME})")
    except AlreadyExists:
        log.info("Admin user already exists")


def get_store(request: Request) -> Store:
    return request.app.state.store
