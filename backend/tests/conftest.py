import os

# keep bcrypt cheap in tests; must be set before storefront.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from storefront.db import Store, init_db
from storefront.security import hash_password
from storefront.services.query_service import QueryService
from storefront.services.user_service import UserService


@pytest.fixture
def store():
    s = Store()
    init_db(s)
    return s


@pytest.fixture
def alice(store):
    return UserService(store).register("alice", hash_password("alice-pass"))


@pytest.fixture
def laptop(store):
    items, _ = QueryService(store).list_items(q="Laptop")
    return items[0]
