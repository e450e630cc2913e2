from fastapi import HTTPException, status

from storefront.errors import (
    AlreadyExists,
    EmptyCart,
    Forbidden,
    ItemUnavailable,
    NoActiveCart,
    NotFound,
    StoreError,
    Unauthorized,
)

_STATUS = [
    (NotFound, status.HTTP_404_NOT_FOUND),
    (AlreadyExists, status.HTTP_409_CONFLICT),
    (ItemUnavailable, status.HTTP_400_BAD_REQUEST),
    (EmptyCart, status.HTTP_400_BAD_REQUEST),
    (NoActiveCart, status.HTTP_400_BAD_REQUEST),
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (Forbidden, status.HTTP_403_FORBIDDEN),
]


def to_http(exc: Exception) -> HTTPException:
    """Map a core failure (or a ValueError from input checks) to an HTTPException."""
    if isinstance(exc, StoreError):
        for exc_type, code in _STATUS:
            if isinstance(exc, exc_type):
                return HTTPException(status_code=code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
