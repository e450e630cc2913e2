import pytest
from fastapi.testclient import TestClient

from storefront.db import Store, init_db
from storefront.errors import DuplicateLine, ItemUnavailable, NotFound
from storefront.main import create_app
from storefront.services.cart_service import CartService
from storefront.services.catalogue_service import CatalogueService
from storefront.services.order_service import OrderService


def test_registration_provisions_active_cart(store, alice):
    cart = CartService(store).get_active_cart(alice.id)
    assert cart.id == alice.cart_id
    assert cart.user_id == alice.id
    assert cart.status.value == "active"
    assert cart.name == "Default Cart"


def test_get_active_cart_unknown_user(store):
    with pytest.raises(NotFound):
        CartService(store).get_active_cart(99999)


def test_add_item(store, alice, laptop):
    svc = CartService(store)
    line = svc.add_item(alice.id, laptop.id)
    assert line.cart_id == alice.cart_id
    assert line.item_id == laptop.id

    view = svc.list_cart(alice.id)
    assert view.total_items == 1
    assert view.lines[0].item.name == "Laptop"


def test_add_missing_item(store, alice):
    with pytest.raises(NotFound):
        CartService(store).add_item(alice.id, 99999)
    assert store.cart_lines == {}


def test_add_unavailable_item(store, alice):
    item = CatalogueService(store).create_item("Broken Phone", status="discontinued")
    with pytest.raises(ItemUnavailable):
        CartService(store).add_item(alice.id, item.id)
    assert store.cart_lines == {}


def test_available_status_is_purchasable(store, alice):
    item = CatalogueService(store).create_item("Cable", status="Available")
    CartService(store).add_item(alice.id, item.id)
    assert CartService(store).list_cart(alice.id).total_items == 1


def test_add_duplicate_item(store, alice, laptop):
    svc = CartService(store)
    svc.add_item(alice.id, laptop.id)
    with pytest.raises(DuplicateLine):
        svc.add_item(alice.id, laptop.id)
    assert svc.list_cart(alice.id).total_items == 1


def test_remove_item(store, alice, laptop):
    svc = CartService(store)
    svc.add_item(alice.id, laptop.id)
    svc.remove_item(alice.id, laptop.id)
    assert svc.list_cart(alice.id).total_items == 0
    with pytest.raises(NotFound):
        svc.remove_item(alice.id, laptop.id)


def test_clear_cart_is_idempotent(store, alice):
    svc = CartService(store)
    for name in ("Laptop", "Mouse", "Webcam"):
        item = next(i for i in store.items.values() if i.name == name)
        svc.add_item(alice.id, item.id)

    assert svc.clear_cart(alice.id) == 3
    assert svc.clear_cart(alice.id) == 0
    assert svc.list_cart(alice.id).total_items == 0


def test_clear_cart_leaves_other_carts_alone(store, alice, laptop):
    admin_id = next(u.id for u in store.users.values() if u.username == "admin")
    svc = CartService(store)
    svc.add_item(alice.id, laptop.id)
    svc.add_item(admin_id, laptop.id)

    svc.clear_cart(alice.id)
    assert svc.list_cart(admin_id).total_items == 1


def test_ordered_cart_is_not_addressable(store, alice, laptop):
    svc = CartService(store)
    svc.add_item(alice.id, laptop.id)
    old_cart_id = svc.get_active_cart(alice.id).id
    OrderService(store).create_order(alice.id)

    # the same item lands in the new cart, never in the ordered one
    line = svc.add_item(alice.id, laptop.id)
    assert line.cart_id != old_cart_id
    assert store.carts[old_cart_id].status.value == "ordered"
    assert svc.clear_cart(alice.id) == 1


def test_cart_view_is_detached(store, alice, laptop):
    svc = CartService(store)
    svc.add_item(alice.id, laptop.id)
    view = svc.list_cart(alice.id)
    CatalogueService(store).set_item_status(laptop.id, "sold-out")
    assert view.lines[0].item.status == "active"


# HTTP

_store = Store()
init_db(_store)
client = TestClient(create_app(_store, seed=False))


def _auth(username):
    client.post("/api/users", json={"username": username, "password": "secret-pass"})
    res = client.post("/api/users/login", json={"username": username, "password": "secret-pass"})
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


def test_cart_requires_auth():
    res = client.get("/api/cart")
    assert res.status_code == 401


def test_add_item_to_cart():
    headers = _auth("cart-user-1")
    res = client.post("/api/cart/items", json={"item_id": 1}, headers=headers)
    assert res.status_code == 201
    assert res.json()["item_id"] == 1

    res = client.post("/api/cart/items", json={"item_id": 1}, headers=headers)
    assert res.status_code == 409
    assert res.json()["detail"] == "Item already in cart"


def test_add_unknown_item_to_cart():
    headers = _auth("cart-user-2")
    res = client.post("/api/cart/items", json={"item_id": 424242}, headers=headers)
    assert res.status_code == 404


def test_get_cart():
    headers = _auth("cart-user-3")
    client.post("/api/cart/items", json={"item_id": 2}, headers=headers)
    res = client.get("/api/cart", headers=headers)
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "active"
    assert body["total_items"] == 1
    assert body["cart_items"][0]["item"]["name"] == "Smartphone"


def test_remove_and_clear_cart():
    headers = _auth("cart-user-4")
    client.post("/api/cart/items", json={"item_id": 3}, headers=headers)
    client.post("/api/cart/items", json={"item_id": 4}, headers=headers)

    res = client.delete("/api/cart/items/3", headers=headers)
    assert res.status_code == 204
    res = client.delete("/api/cart/items/3", headers=headers)
    assert res.status_code == 404

    res = client.delete("/api/cart/items", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"removed": 1}
    res = client.delete("/api/cart/items", headers=headers)
    assert res.json() == {"removed": 0}
