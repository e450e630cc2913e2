from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.deps import get_current_user
from storefront.api.errors import to_http
from storefront.db import Store, get_store
from storefront.errors import AlreadyExists, NotFound
from storefront.models import User
from storefront.repositories.user_repo import canonical_username
from storefront.schemas.user_schema import LoginOut, UserCreate, UserLogin, UserOut
from storefront.security import create_access_token, hash_password, verify_password
from storefront.services.user_service import UserService
from storefront.utils.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, summary="Register")
def register(payload: UserCreate, store: Store = Depends(get_store)):
    try:
        password_hash = hash_password(payload.password)
        return UserService(store).register(payload.username, password_hash)
    except (AlreadyExists, ValueError) as e:
        raise to_http(e)


@router.post("/login", response_model=LoginOut, summary="Log in and get a bearer token")
def login(payload: UserLogin, store: Store = Depends(get_store)):
    try:
        user = UserService(store).find_user_by_username(payload.username)
    except NotFound:
        user = None
    if user is None or not verify_password(payload.password, user.password_hash):
        log.info(f"Failed login for user: {canonical_username(payload.username)}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    token = create_access_token(user.id, user.username)
    log.info(f"Successful login for user: {user.username}")
    return LoginOut(access_token=token, user=UserOut.model_validate(user))


@router.get("/me", response_model=UserOut, summary="My profile")
def me(user: User = Depends(get_current_user)):
    return user
