from typing import List, Optional, Tuple

from storefront.db import Store
from storefront.errors import NotFound
from storefront.models import Item


class ItemRepository:
    def __init__(self, store: Store):
        self.store = store

    def get(self, item_id: int) -> Optional[Item]:
        return self.store.items.get(item_id)

    def require(self, item_id: int) -> Item:
        item = self.get(item_id)
        if item is None:
            raise NotFound("Item not found")
        return item

    def list(
        self,
        q: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        size: int = 20,
    ) -> Tuple[List[Item], int]:
        """
        Filter by case-insensitive substring of ``name`` and case-insensitive
        ``status``, ordered by id. Returns the requested page and the total match
        count.
        """
        items = sorted(self.store.items.values(), key=lambda i: i.id)
        if q:
            needle = q.lower()
            items = [i for i in items if needle in i.name.lower()]
        if status:
            wanted = status.lower()
            items = [i for i in items if i.status.lower() == wanted]
        total = len(items)
        offset = (page - 1) * size
        return items[offset : offset + size], total

    def create(self, name: str, status: str, image: Optional[str] = None) -> Item:
        item = Item(
            id=self.store.next_id(),
            name=name,
            status=status,
            image=image,
            created_at=self.store.now(),
        )
        self.store.items[item.id] = item
        return item

    def set_status(self, item: Item, status: str) -> Item:
        item.status = status
        return item
