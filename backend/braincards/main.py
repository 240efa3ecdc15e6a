"""
Brain Cards Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routes;
       the module-level `app` is what uvicorn serves.
Who:   uvicorn (`uvicorn braincards.main:app`, or `python -m braincards`).

Lifecycle:
    Startup:
    1. Initialize logging
    2. Ensure the category store exists (created empty if missing; fatal on failure)
    3. Print the endpoint banner (skipped when ENVIRONMENT=test)

    Shutdown:
    1. Log shutdown (the store keeps no open handles)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from braincards import __version__
from braincards.config import settings
from braincards.exceptions import BrainCardsError, StorageError
from braincards.middleware.cors import CORS_HEADERS, PermissiveCORSMiddleware
from braincards.middleware.logging import RequestLoggingMiddleware
from braincards.middleware.request_id import RequestIDMiddleware, request_id_var
from braincards.routes import categories, health
from braincards.services.category_service import get_category_service

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] braincards.main: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def log_banner() -> None:
    """Tell the operator where the server listens and what it serves."""
    prefix = settings.api_prefix
    logger.info("Brain Cards server is running at http://localhost:%d", settings.port)
    logger.info("Press CTRL+C to stop the server")
    logger.info("Available methods:")
    logger.info("GET  %s/category      - list categories", prefix)
    logger.info("GET  %s/category/{id} - get the pairs of one category", prefix)
    logger.info(
        "POST %s/category      - add a category "
        "{title: string, pairs?: [[string, string], ...]}",
        prefix,
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()

    provider = app.dependency_overrides.get(get_category_service, get_category_service)
    store = provider().store
    try:
        created = await store.ensure_exists()
    except StorageError as e:
        logger.critical("Cannot initialize category store: %s | Context: %s", e.message, e.context)
        raise
    if created is not None:
        logger.info("Initialized empty category store at %s", store.describe())
    else:
        logger.info("Using category store at %s", store.describe())

    if not settings.is_test:
        log_banner()

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Brain Cards server shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Render everything that escapes a route handler as {"message": ...}.

    Handler hierarchy:
        HTTPException    → its own status (404 unknown path, 405 wrong method)
        BrainCardsError  → 500 Server Error
        Exception        → 500 Server Error (logged with traceback)

    The Exception handler runs in Starlette's outermost ServerErrorMiddleware,
    outside PermissiveCORSMiddleware, so it stamps the CORS headers itself.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(BrainCardsError)
    async def handle_app_error(request: Request, exc: BrainCardsError):
        rid = request_id_var.get("")
        logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"message": "Server Error"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "Server Error"},
            headers=dict(CORS_HEADERS),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble the FastAPI application: middleware, handlers, routes."""
    app = FastAPI(
        title="Brain Cards API",
        description=(
            "Stores word/definition card categories in a JSON file. "
            "Create a category, list categories, fetch one category with its pairs."
        ),
        version=__version__,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=None,
        openapi_url=f"{settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes
    app.add_middleware(PermissiveCORSMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(categories.router)
    app.include_router(health.router)

    return app


app = create_app()
