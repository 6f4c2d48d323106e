# storefront/main.py
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from storefront.api.errors import register_exception_handlers
from storefront.api.routers import auth, cart, health, items, spa
from storefront.data.seed import seed
from storefront.data.store import JsonStore
from storefront.utils import settings
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: JsonStore = app.state.store
    logger.info(f"Initializing data store in {store.data_dir}")
    store.init()

    if app.state.seed_catalog:
        seed(store)

    if settings.JWT_SECRET == settings.DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET not set, using insecure default signing key")

    yield


def create_app(
    data_dir: str | None = None,
    public_dir: str | None = None,
    seed_catalog: bool | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.store = JsonStore(data_dir or settings.DATA_DIR)
    app.state.public_dir = public_dir or settings.PUBLIC_DIR
    app.state.seed_catalog = settings.SEED_CATALOG if seed_catalog is None else seed_catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed:.1f} ms")
        return response

    register_exception_handlers(app)

    # Include routers, spa na koncu (catch-all)
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(items.router)
    app.include_router(cart.router)
    app.include_router(spa.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
