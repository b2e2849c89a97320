# storefront/main.py
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi import FastAPI
import uvicorn

from storefront.core.config import Settings, get_settings
from storefront.core.errors import register_exception_handlers
from storefront.dependencies import get_product_repo

# Routers
from storefront.routers.products import router as products_router
from storefront.routers.cart import router as cart_router
from storefront.routers.checkout import router as checkout_router
from storefront.routers.health import router as health_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Seed the catalog and report its size.

    Shutdown:
      - Nothing to clean up; carts live only in memory.
    """
    logger.info(f"Startup: catalog loaded with {get_product_repo().count()} products")
    yield
    logger.info("Shutdown: in-memory carts discarded")


def create_app(settings: Settings) -> FastAPI:
    """
    Build the ASGI app for the given settings.

    The module-level `app` uses the environment settings; tests build
    their own with a different STATIC_DIR.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # --- CORS configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API prefix, e.g. /api
    app.include_router(products_router, prefix=settings.API_PREFIX)
    app.include_router(cart_router, prefix=settings.API_PREFIX)
    app.include_router(checkout_router, prefix=settings.API_PREFIX)
    app.include_router(health_router, prefix=settings.API_PREFIX)

    # Storefront UI; mounted last so API routes win
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info(f"Static dir '{static_dir}' not found, serving API only")

    return app


app = create_app(settings)


def run() -> None:
    """Start the API with uvicorn on HOST:PORT."""
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
