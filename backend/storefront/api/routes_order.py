from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_current_user
from storefront.api.errors import to_http
from storefront.db import Store, get_store
from storefront.errors import StoreError
from storefront.models import User
from storefront.schemas.order_schema import OrderOut
from storefront.services.order_service import OrderService
from storefront.services.query_service import QueryService

router = APIRouter(tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED, summary="Create order (checkout)")
def create_order(store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        return OrderOut.from_order(OrderService(store).create_order(user.id))
    except StoreError as e:
        raise to_http(e)


@router.get("", response_model=List[OrderOut], summary="My orders, newest first")
def list_my_orders(store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        return [OrderOut.from_view(v) for v in QueryService(store).orders_for_user(user.id)]
    except StoreError as e:
        raise to_http(e)


@router.get("/{order_id}", response_model=OrderOut, summary="Get one of my orders")
def get_order(order_id: int, store: Store = Depends(get_store), user: User = Depends(get_current_user)):
    try:
        return OrderOut.from_view(QueryService(store).order_view(order_id, user_id=user.id))
    except StoreError as e:
        raise to_http(e)
