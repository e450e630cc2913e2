from fastapi import APIRouter, Depends

from storefront.db import Store, get_store
from storefront.utils.transactions import read_transaction

router = APIRouter()


@router.get("/health", tags=["health"])
def health(store: Store = Depends(get_store)):
    with read_transaction(store) as s:
        counts = s.counts()
    return {
        "status": "ok",
        "store": "memory",
        "counts": counts,
    }
