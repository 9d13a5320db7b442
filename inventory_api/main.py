"""Product Inventory API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from inventory_api.api.categories import router as categories_router
from inventory_api.api.health import router as health_router
from inventory_api.api.middleware import setup_middleware
from inventory_api.api.products import router as products_router
from inventory_api.api.seed import router as seed_router
from inventory_api.domain.exceptions import (
    DuplicateNameError,
    InventoryError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from inventory_api.infrastructure.config import settings
from inventory_api.infrastructure.database import create_tables, dispose_engine
from inventory_api.infrastructure.logging_config import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    logger.info(
        "Starting Product Inventory API",
        version=settings.api_version,
        debug=settings.debug,
    )

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database schema ready")

    yield

    # Shutdown
    logger.info("Shutting down Product Inventory API")
    await dispose_engine()


app = FastAPI(
    title="Product Inventory API",
    description="Product inventory with search, category filters and pagination",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)
app.include_router(products_router)
app.include_router(seed_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


ERROR_STATUS: dict[type[InventoryError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateNameError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StoreUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict] | None = None,
) -> JSONResponse:
    """Build an error response in the standard format."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(InventoryError)
async def inventory_exception_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """Map inventory errors to HTTP responses."""
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    if status_code >= 500:
        logger.error(
            "Inventory operation failed",
            path=request.url.path,
            method=request.method,
            error_code=exc.error_code,
            error=exc.message,
        )
        return error_response(
            request,
            status_code,
            exc.error_code,
            "The inventory store is currently unavailable",
        )

    details = []
    if isinstance(exc, ValidationError):
        details = [e.to_dict() for e in exc.errors]

    return error_response(request, status_code, exc.error_code, exc.message, details)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 with field details."""
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body") or None,
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Validation failed",
        details,
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return error_response(request, exc.status_code, error_code, message, details)
