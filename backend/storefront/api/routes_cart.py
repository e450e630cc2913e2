from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_current_user
from storefront.api.errors import to_http
from storefront.db import Store, get_store
from storefront.errors import StoreError
from storefront.models import User
from storefront.schemas.cart_schema import AddItemIn, CartLineOut, CartOut, ClearCartOut
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=CartOut, summary="Get my cart")
def get_cart(store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        return CartOut.from_view(CartService(store).list_cart(user.id))
    except StoreError as e:
        raise to_http(e)


@router.post("/items", response_model=CartLineOut, status_code=status.HTTP_201_CREATED, summary="Add item to cart")
def add_item(payload: AddItemIn, store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        return CartService(store).add_item(user.id, payload.item_id)
    except StoreError as e:
        raise to_http(e)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove item")
def remove_item(item_id: int, store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        CartService(store).remove_item(user.id, item_id)
    except StoreError as e:
        raise to_http(e)


@router.delete("/items", response_model=ClearCartOut, summary="Clear cart")
def clear_cart(store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        return ClearCartOut(removed=CartService(store).clear_cart(user.id))
    except StoreError as e:
        raise to_http(e)
