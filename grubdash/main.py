"""
FastAPI Application Entry Point

GrubDash API - dishes and delivery orders held in memory.

Endpoints:
    - GET/POST /dishes, GET/PUT /dishes/{dish_id}
    - GET/POST /orders, GET/PUT/DELETE /orders/{order_id}
    - GET /health: Store counts
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.core.config import Settings, get_settings, setup_logging
from grubdash.core.exceptions import GrubDashError
from grubdash.database import Datastore, init_db
from grubdash.routes import dishes_router, orders_router
from grubdash.schemas import HealthResponse
from grubdash.services import DishService, OrderService

logger = logging.getLogger(__name__)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

async def grubdash_error_handler(request: Request, exc: GrubDashError) -> JSONResponse:
    """Render pipeline failures as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors like any other."""
    errors = exc.errors()
    message = "Request body must be a JSON object with an object-valued data field"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()))
        message = f"Invalid request body at {location}: {errors[0].get('msg')}"
    logger.info(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"error": message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


def make_exception_handler(settings: Settings):
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc) if settings.debug else "An unexpected error occurred",
            },
        )

    return global_exception_handler


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(settings: Optional[Settings] = None, datastore: Optional[Datastore] = None) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        datastore: Pre-built stores; loaded from the seed files when omitted

    Returns:
        FastAPI: Application with its own dish and order stores
    """
    settings = settings or get_settings()
    setup_logging(settings=settings)

    datastore = datastore if datastore is not None else init_db(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {settings.app_name}")
        logger.info(f"   Version: {settings.app_version}")
        logger.info(f"   Environment: {settings.env_mode.value}")
        logger.info(f"   Debug: {settings.debug}")
        logger.info(f"   Dishes: {len(datastore.dishes)}  Orders: {len(datastore.orders)}")
        logger.info("=" * 60)

        yield

        logger.info("Shutting down, in-memory records are discarded")

    app = FastAPI(
        title=settings.app_name,
        description="Dishes and delivery orders with validated CRUD endpoints.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    app.state.settings = settings
    app.state.datastore = datastore
    app.state.dish_service = DishService(datastore.dishes)
    app.state.order_service = OrderService(datastore.orders)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GrubDashError, grubdash_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, make_exception_handler(settings))

    app.include_router(dishes_router)
    app.include_router(orders_router)

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """API root with navigation links."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "environment": settings.env_mode.value,
            "dishes": "/dishes",
            "orders": "/orders",
            "health": "/health",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="System Health Check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="operational",
            dishes=len(datastore.dishes),
            orders=len(datastore.orders),
            timestamp=datetime.now(),
        )

    return app


def run() -> None:
    """
    Serve the API with uvicorn on the configured host and port.

    The application is built by uvicorn through the factory, so importing
    this module never loads seed data.
    """
    settings = get_settings()
    uvicorn.run(
        "grubdash.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )

