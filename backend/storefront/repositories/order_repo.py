from typing import List, Optional

from storefront.db import Store
from storefront.models import Order


def _newest_first(orders):
    return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)


class OrderRepository:
    def __init__(self, store: Store):
        self.store = store

    def get(self, order_id: int) -> Optional[Order]:
        return self.store.orders.get(order_id)

    def add(self, order: Order) -> Order:
        self.store.orders[order.id] = order
        return order

    def for_user(self, user_id: int) -> List[Order]:
        return _newest_first(o for o in self.store.orders.values() if o.user_id == user_id)

    def list(self) -> List[Order]:
        return _newest_first(self.store.orders.values())
