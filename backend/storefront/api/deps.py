from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.api.errors import to_http
from storefront.config import settings
from storefront.db import Store, get_store
from storefront.errors import Forbidden, NotFound, Unauthorized
from storefront.models import User
from storefront.repositories.user_repo import canonical_username
from storefront.security import decode_access_token
from storefront.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    store: Store = Depends(get_store),
) -> User:
    if credentials is None:
        raise _credentials_exception("User not authenticated")
    try:
        user_id = decode_access_token(credentials.credentials)
        return UserService(store).get_user(user_id)
    except (Unauthorized, NotFound):
        raise _credentials_exception()


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.username != canonical_username(settings.ADMIN_USERNAME):
        raise to_http(Forbidden("Admin access required"))
    return current_user
