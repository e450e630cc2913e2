from contextlib import contextmanager
from typing import Iterator

from storefront.db import Store


@contextmanager
def read_transaction(store: Store) -> Iterator[Store]:
    """
    Hold the store's shared lock for the whole block.
    Usage:
        with read_transaction(store) as s:
            ... several lookups, one consistent snapshot ...
    """
    store.lock.acquire_read()
    try:
        yield store
    finally:
        store.lock.release_read()


@contextmanager
def write_transaction(store: Store) -> Iterator[Store]:
    """
    Hold the store's exclusive lock for the whole block.
    Validate before mutating: nothing is rolled back if the block raises.
    """
    store.lock.acquire_write()
    try:
        yield store
    finally:
        store.lock.release_write()
