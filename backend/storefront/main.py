from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.health import router as health_router
from storefront.api.routes_admin import router as admin_router
from storefront.api.routes_cart import router as cart_router
from storefront.api.routes_catalogue import router as catalogue_router
from storefront.api.routes_order import router as order_router
from storefront.api.routes_users import router as users_router
from storefront.config import settings
from storefront.db import Store, init_db
from storefront.utils.logging import get_logger

log = get_logger(__name__)


def create_app(store: Optional[Store] = None, seed: Optional[bool] = None) -> FastAPI:
    """
    Build the API around ``store`` (a fresh one if omitted). The store lives on
    ``app.state.store`` for the lifetime of the app.
    """
    seed = settings.SEED_ON_STARTUP if seed is None else seed

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # startup
        if seed:
            init_db(app.state.store)
        log.info(f"In-memory store ready: {app.state.store.counts()}")
        yield

    app = FastAPI(title="Storefront - Backend", version="0.1.0", lifespan=lifespan)
    app.state.store = store if store is not None else Store()

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        log.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api", tags=["health"])

    app.include_router(users_router, tags=["users"])

    app.include_router(catalogue_router, prefix="/api/items", tags=["catalogue"])

    app.include_router(cart_router, tags=["cart"])

    app.include_router(order_router, prefix="/api/orders", tags=["orders"])

    app.include_router(admin_router, tags=["admin"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
