from typing import List, Optional

from storefront.db import Store
from storefront.errors import NotFound
from storefront.models import User


def canonical_username(username: str) -> str:
    return username.strip().lower()


class UserRepository:
    def __init__(self, store: Store):
        self.store = store

    def get(self, user_id: int) -> Optional[User]:
        return self.store.users.get(user_id)

    def require(self, user_id: int) -> User:
        user = self.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def get_by_username(self, username: str) -> Optional[User]:
        user_id = self.store.usernames.get(canonical_username(username))
        if user_id is None:
            return None
        return self.store.users.get(user_id)

    def add(self, user: User) -> User:
        self.store.users[user.id] = user
        self.store.usernames[user.username] = user.id
        return user

    def list(self) -> List[User]:
        return sorted(self.store.users.values(), key=lambda u: u.id)
