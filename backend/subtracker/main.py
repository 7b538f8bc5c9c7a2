"""
SubTracker Backend: FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers.
Who:   Called by uvicorn to start the server (uvicorn subtracker.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌─────────────┐  │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS (*)    │  │
    │  └──────────┘ └──────────┘ └──────┘ └─────────────┘  │
    │                                                      │
    │  Routes:                                             │
    │  ┌────────────────┐ ┌───────────┐ ┌──────────────┐   │
    │  │ /subscriptions │ │ /payments │ │ GET /health  │   │
    │  └────────────────┘ └───────────┘ └──────────────┘   │
    │                                                      │
    │  Exception Handlers:                                 │
    │  ┌────────────────────────────────────────────────┐  │
    │  │ DatabaseError→500 │ SubTrackerError→500 │ *→500│  │
    │  └────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the listening address
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from subtracker import __version__
from subtracker.config import settings
from subtracker.database import dispose_engine
from subtracker.exceptions import DatabaseError, SubTrackerError
from subtracker.middleware.logging import RequestLoggingMiddleware
from subtracker.middleware.request_id import RequestIDMiddleware, request_id_var
from subtracker.routes import health, payments, subscriptions
from subtracker.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("SubTracker Backend %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("SubTracker Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        DatabaseError           → 500 (generic message, context logged)
        SubTrackerError (base)  → 500
        Exception (fallback)    → 500

    Request body shape errors keep FastAPI's default 422 response.

    Every body here follows ErrorResponse and carries X-Request-ID. The
    catch-all response is built by ServerErrorMiddleware, outside
    RequestIDMiddleware, so the header has to be set on the response itself.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Store failure: generic message to the client, details logged server-side."""
        rid = _request_id(request)
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(
            rid, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(SubTrackerError)
    async def handle_app_error(request: Request, exc: SubTrackerError):
        rid = _request_id(request)
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(rid, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all. The stack trace is logged, never returned."""
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error_response(
            rid,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


def _request_id(request: Request) -> str:
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _error_response(rid: str, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, request_id=rid)
    return JSONResponse(
        status_code=500,
        content=body.model_dump(),
        headers={"X-Request-ID": rid} if rid else None,
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="SubTracker API",
        description=(
            "Track recurring subscriptions, confirm payments, and see total "
            "spending per subscription."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → GZip → CORS

    # Any origin; no credentials, since the API has no session or auth
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(subscriptions.router)
    app.include_router(payments.router)
    app.include_router(health.router)

    return app


app = create_app()
