from dataclasses import replace

from storefront.db import Store
from storefront.errors import AlreadyExists, NotFound
from storefront.models import User
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.user_repo import UserRepository, canonical_username
from storefront.utils.logging import get_logger
from storefront.utils.transactions import read_transaction, write_transaction

log = get_logger(__name__)

DEFAULT_CART_NAME = "Default Cart"


class UserService:
    def __init__(self, store: Store):
        self.store = store
        self.user_repo = UserRepository(store)
        self.cart_repo = CartRepository(store)

    def register(self, username: str, password_hash: str, cart_name: str = DEFAULT_CART_NAME) -> User:
        """
        Create a user together with its first active cart.

        Usernames are compared and stored in canonical form (trimmed, lowercase).
        """
        name = canonical_username(username)
        if not name:
            raise ValueError("Username is required")

        with write_transaction(self.store) as s:
            if self.user_repo.get_by_username(name) is not None:
                log.warning(f"Registration rejected, username taken: {name}")
                raise AlreadyExists("User already exists")

            user_id = s.next_id()
            cart = self.cart_repo.create(user_id, cart_name)
            user = self.user_repo.add(
                User(
                    id=user_id,
                    username=name,
                    password_hash=password_hash,
                    cart_id=cart.id,
                    created_at=s.now(),
                )
            )
            registered = replace(user)
        log.info(f"Registered user {registered.id} ({registered.username}) with cart {registered.cart_id}")
        return registered

    def find_user_by_username(self, username: str) -> User:
        with read_transaction(self.store):
            user = self.user_repo.get_by_username(username)
            if user is None:
                raise NotFound("User not found")
            return replace(user)

    def get_user(self, user_id: int) -> User:
        with read_transaction(self.store):
            return replace(self.user_repo.require(user_id))
