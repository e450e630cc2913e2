from typing import List

from fastapi import APIRouter, Depends

from storefront.api.deps import require_admin
from storefront.api.errors import to_http
from storefront.db import Store, get_store
from storefront.errors import NotFound
from storefront.schemas.cart_schema import CartOut
from storefront.schemas.item_schema import ItemOut, ItemStatusIn
from storefront.schemas.order_schema import OrderOut
from storefront.schemas.user_schema import UserOut
from storefront.services.catalogue_service import CatalogueService
from storefront.services.query_service import QueryService

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=List[UserOut], summary="List users")
def list_users(store: Store = Depends(get_store)):
    return QueryService(store).list_users()


@router.get("/carts", response_model=List[CartOut], summary="List all carts with their lines")
def list_carts(store: Store = Depends(get_store)):
    return [CartOut.from_view(v) for v in QueryService(store).list_carts()]


@router.get("/carts/{cart_id}", response_model=CartOut, summary="Get cart by id")
def get_cart(cart_id: int, store: Store = Depends(get_store)):
    try:
        return CartOut.from_view(QueryService(store).cart_view(cart_id))
    except NotFound as e:
        raise to_http(e)


@router.get("/orders", response_model=List[OrderOut], summary="All orders, newest first")
def list_orders(store: Store = Depends(get_store)):
    return [OrderOut.from_view(v) for v in QueryService(store).list_orders()]


@router.patch("/items/{item_id}", response_model=ItemOut, summary="Change item status")
def set_item_status(item_id: int, payload: ItemStatusIn, store: Store = Depends(get_store)):
    try:
        return CatalogueService(store).set_item_status(item_id, payload.status)
    except (NotFound, ValueError) as e:
        raise to_http(e)
