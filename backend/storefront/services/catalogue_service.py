from dataclasses import replace
from typing import Dict, Iterable, Optional

from storefront.config import settings
from storefront.db import Store
from storefront.models import Item
from storefront.repositories.item_repo import ItemRepository
from storefront.utils.logging import get_logger
from storefront.utils.transactions import read_transaction, write_transaction

log = get_logger(__name__)


def is_purchasable(status: str) -> bool:
    return status.lower() in {s.lower() for s in settings.PURCHASABLE_STATUSES}


class CatalogueService:
    def __init__(self, store: Store):
        self.store = store
        self.item_repo = ItemRepository(store)

    def create_item(self, name: str, status: Optional[str] = None, image: Optional[str] = None) -> Item:
        name = (name or "").strip()
        if not name:
            raise ValueError("Item name is required")
        # unspecified status means purchasable
        status = (status or "").strip() or settings.DEFAULT_ITEM_STATUS
        with write_transaction(self.store):
            item = replace(self.item_repo.create(name, status, image))
        log.info(f"Item created: {item.name} (ID: {item.id})")
        return item

    def get_item(self, item_id: int) -> Item:
        with read_transaction(self.store):
            return replace(self.item_repo.require(item_id))

    def set_item_status(self, item_id: int, status: str) -> Item:
        status = (status or "").strip()
        if not status:
            raise ValueError("Status is required")
        with write_transaction(self.store):
            item = replace(self.item_repo.set_status(self.item_repo.require(item_id), status))
        log.info(f"Item {item.id} status set to {status}")
        return item

    def seed(self, entries: Iterable[Dict]) -> int:
        """Create ``entries`` only if the catalogue is empty; return how many were made."""
        with write_transaction(self.store) as s:
            if s.items:
                return 0
            created = 0
            for ent in entries:
                self.item_repo.create(
                    ent["name"],
                    ent.get("status") or settings.DEFAULT_ITEM_STATUS,
                    ent.get("image"),
                )
                created += 1
            return created
