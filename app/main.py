"""FastAPI application factory — entry point for ShelfWise."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.store import SqlStoreAdapter
from app.api.dependencies import get_store
from app.api.routes.books import router as books_router
from app.api.routes.intelligence import router as intel_router
from app.api.routes.inventory import router as inventory_router
from app.config import settings
from app.domain.errors import LibraryError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    logger.info("ShelfWise starting up...")
    logger.info("Storage backend: %s", settings.storage_backend.value)
    logger.info("Loan period: %d days", settings.loan_period_days)
    store = get_store()
    if isinstance(store, SqlStoreAdapter):
        await store.create_schema()
    yield
    if isinstance(store, SqlStoreAdapter):
        await store.dispose()
    logger.info("ShelfWise shutting down...")


async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title=settings.app_name,
        description="Library catalog with borrowing, reservations and recommendations",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ─────────────────────────────────────
    application.add_exception_handler(LibraryError, library_error_handler)

    # ── Routes ─────────────────────────────────────
    application.include_router(books_router)
    application.include_router(inventory_router)
    application.include_router(intel_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "shelfwise"}

    return application


app = create_app()
