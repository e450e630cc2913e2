from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from storefront.api.deps import get_current_user
from storefront.api.errors import to_http
from storefront.db import Store, get_store
from storefront.errors import NotFound
from storefront.schemas.item_schema import ItemIn, ItemOut, ItemPage
from storefront.services.catalogue_service import CatalogueService
from storefront.services.query_service import MAX_PAGE_SIZE, QueryService

router = APIRouter(tags=["catalogue"])


@router.get("", response_model=ItemPage, summary="List items")
def list_items(
    q: Optional[str] = Query(None, description="substring of the item name"),
    status_filter: Optional[str] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=MAX_PAGE_SIZE),
    store: Store = Depends(get_store),
):
    items, total = QueryService(store).list_items(q=q, status=status_filter, page=page, size=size)
    return ItemPage(
        items=[ItemOut.model_validate(i) for i in items],
        total=total,
        page=page,
        size=size,
        pages=(total + size - 1) // size,
    )


@router.get("/{item_id}", response_model=ItemOut, summary="Get item")
def get_item(item_id: int, store: Store = Depends(get_store)):
    try:
        return CatalogueService(store).get_item(item_id)
    except NotFound as e:
        raise to_http(e)


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED, summary="Create item")
def create_item(payload: ItemIn, store: Store = Depends(get_store), _user=Depends(get_current_user)):
    try:
        return CatalogueService(store).create_item(payload.name, payload.status, payload.image)
    except ValueError as e:
        raise to_http(e)
