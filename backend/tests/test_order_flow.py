import pytest
from fastapi.testclient import TestClient

from storefront.db import Store, init_db
from storefront.errors import EmptyCart, NoActiveCart, NotFound
from storefront.main import create_app
from storefront.services.cart_service import CartService
from storefront.services.catalogue_service import CatalogueService
from storefront.services.order_service import OrderService
from storefront.services.query_service import QueryService


def _item(store, name):
    return next(i for i in store.items.values() if i.name == name)


def test_checkout_scenario(store, alice, laptop):
    carts = CartService(store)
    orders = OrderService(store)

    c1 = carts.get_active_cart(alice.id)
    carts.add_item(alice.id, laptop.id)
    assert carts.list_cart(alice.id).total_items == 1

    o1 = orders.create_order(alice.id)
    assert o1.cart_id == c1.id
    assert o1.user_id == alice.id
    assert [l.name for l in o1.lines] == ["Laptop"]

    assert store.carts[c1.id].status.value == "ordered"
    c2 = carts.get_active_cart(alice.id)
    assert c2.id != c1.id
    assert carts.list_cart(alice.id).total_items == 0
    assert store.users[alice.id].cart_id == c2.id

    with pytest.raises(EmptyCart):
        orders.create_order(alice.id)


def test_order_snapshots_all_lines(store, alice):
    carts = CartService(store)
    names = ["Laptop", "Mouse", "Monitor", "Webcam"]
    for name in names:
        carts.add_item(alice.id, _item(store, name).id)

    order = OrderService(store).create_order(alice.id)
    assert len(order.lines) == 4
    assert sorted(l.name for l in order.lines) == sorted(names)
    # lines of the ordered cart are gone, the snapshot keeps them
    assert not any(k.cart_id == order.cart_id for k in store.cart_lines)


def test_empty_cart_order_changes_nothing(store, alice):
    before = store.counts()
    cart_id = store.users[alice.id].cart_id
    next_id = store.sequence.peek()

    with pytest.raises(EmptyCart):
        OrderService(store).create_order(alice.id)

    assert store.counts() == before
    assert store.carts[cart_id].status.value == "active"
    assert store.users[alice.id].cart_id == cart_id
    assert store.sequence.peek() == next_id


def test_order_without_active_cart(store, alice):
    # corrupt the user's pointer to simulate a missing active cart
    store.users[alice.id].cart_id = 0
    before = store.counts()
    with pytest.raises(NoActiveCart):
        OrderService(store).create_order(alice.id)
    assert store.counts() == before


def test_order_for_unknown_user(store):
    with pytest.raises(NoActiveCart):
        OrderService(store).create_order(424242)


def test_snapshot_survives_item_changes(store, alice, laptop):
    CartService(store).add_item(alice.id, laptop.id)
    order = OrderService(store).create_order(alice.id)

    CatalogueService(store).set_item_status(laptop.id, "discontinued")

    view = QueryService(store).order_view(order.id, user_id=alice.id)
    assert view.lines[0].status == "active"
    assert view.cart.status.value == "ordered"


def test_orders_for_user_newest_first(store, alice):
    carts = CartService(store)
    orders = OrderService(store)
    created = []
    for name in ("Laptop", "Tablet", "Keyboard"):
        carts.add_item(alice.id, _item(store, name).id)
        created.append(orders.create_order(alice.id).id)

    listed = [v.order.id for v in QueryService(store).orders_for_user(alice.id)]
    assert listed == list(reversed(created))


def test_order_view_hides_other_users_orders(store, alice, laptop):
    from storefront.security import hash_password
    from storefront.services.user_service import UserService

    bob = UserService(store).register("bob", hash_password("bob-pass"))
    CartService(store).add_item(alice.id, laptop.id)
    order = OrderService(store).create_order(alice.id)

    with pytest.raises(NotFound):
        QueryService(store).order_view(order.id, user_id=bob.id)
    assert QueryService(store).order_view(order.id).order.id == order.id


def test_single_active_cart_per_user_after_many_orders(store, alice):
    carts = CartService(store)
    orders = OrderService(store)
    for name in ("Laptop", "Mouse", "Tablet"):
        carts.add_item(alice.id, _item(store, name).id)
        orders.create_order(alice.id)

    mine = [c for c in store.carts.values() if c.user_id == alice.id]
    assert len(mine) == 4
    assert sum(1 for c in mine if c.is_active) == 1


# HTTP

_store = Store()
init_db(_store)
client = TestClient(create_app(_store, seed=False))


def _auth(username):
    client.post("/api/users", json={"username": username, "password": "secret-pass"})
    res = client.post("/api/users/login", json={"username": username, "password": "secret-pass"})
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


def test_checkout_over_http():
    headers = _auth("order-user-1")
    client.post("/api/cart/items", json={"item_id": 1}, headers=headers)
    client.post("/api/cart/items", json={"item_id": 5}, headers=headers)

    r = client.post("/api/orders", headers=headers)
    assert r.status_code == 201
    body = r.json()
    assert body["items_count"] == 2
    order_id = body["id"]

    r = client.post("/api/orders", headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Cart is empty"

    r = client.get("/api/orders", headers=headers)
    assert r.status_code == 200
    assert [o["id"] for o in r.json()] == [order_id]
    assert r.json()[0]["cart"]["status"] == "ordered"

    r = client.get(f"/api/orders/{order_id}", headers=headers)
    assert r.status_code == 200
    assert {i["name"] for i in r.json()["items"]} == {"Laptop", "Mouse"}


def test_cannot_read_someone_elses_order():
    owner = _auth("order-user-2")
    other = _auth("order-user-3")
    client.post("/api/cart/items", json={"item_id": 2}, headers=owner)
    order_id = client.post("/api/orders", headers=owner).json()["id"]

    r = client.get(f"/api/orders/{order_id}", headers=other)
    assert r.status_code == 404
