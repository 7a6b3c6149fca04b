"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.routes import books_router, health_router
from src.api.schemas.books import ApiInfo
from src.config import Settings, get_settings
from src.core.books.store import BookStore
from src.core.errors import BookNotFoundError
from src.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

API_ENDPOINTS = {
    "GET /api/books": "Get all books",
    "GET /api/books/:id": "Get a specific book by ID",
    "POST /api/books": "Add a new book",
    "PUT /api/books/:id": "Update a book by ID",
    "DELETE /api/books/:id": "Delete a book by ID",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    setup_logging(debug=app.state.settings.debug)
    logger.info("Books API starting", books=len(app.state.book_store))
    yield
    logger.info("Books API stopped")


async def book_not_found_handler(request: Request, exc: BookNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(settings: Settings | None = None, store: BookStore | None = None) -> FastAPI:
    """
    Build the application.

    Each app owns exactly one BookStore, created here unless one is passed in,
    and handed to the routes through ``app.state``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory CRUD API for books",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.book_store = store if store is not None else BookStore(seed=settings.seed_books)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics, one registry per app so several apps can coexist
    if settings.metrics_enabled:
        Instrumentator(registry=CollectorRegistry()).instrument(app).expose(app, endpoint="/metrics")

    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(books_router)

    @app.get("/", response_model=ApiInfo)
    async def root() -> ApiInfo:
        """API information endpoint."""
        return ApiInfo(message="Welcome to the Books API", endpoints=API_ENDPOINTS)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
