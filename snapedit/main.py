"""
SnapEdit Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, error rendering
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn snapedit.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌──────────────┐  │
    │  │ POST /_actions/<actionName>  │ │ GET /health  │  │
    │  └──────────────────────────────┘ └──────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ BAD_REQUEST→400 │ UNAUTHORIZED→401 │         │   │
    │  │ NOT_FOUND→404   │ anything else→500          │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from snapedit import __version__
from snapedit.config import settings
from snapedit.database import dispose_engine
from snapedit.exceptions import SnapEditError, ValidationError
from snapedit.middleware.logging import RequestLoggingMiddleware
from snapedit.middleware.request_id import RequestIDMiddleware, request_id_var
from snapedit.routes import health, projects, screenshot_edits, screenshots

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and validate configuration.
    Shutdown: dispose the database engine.

    The schema itself is owned by Alembic (`alembic upgrade head`), not
    created here.
    """
    setup_logging()
    logger.info("SnapEdit Backend %s starting up (%s)", __version__, settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        raise

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("SnapEdit Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "") or request_id_var.get("")


def _error_body(request: Request, exc: SnapEditError) -> dict:
    body = {
        "error": exc.code,
        "message": exc.message,
        "request_id": _request_id(request),
    }
    if isinstance(exc, ValidationError):
        body["details"] = {"issues": jsonable_encoder(exc.issues)}
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        SnapEditError (and subclasses) → its own status code and error code
        RequestValidationError         → 400 BAD_REQUEST with pydantic issues
        Exception (fallback)           → 500 INTERNAL_SERVER_ERROR

    Persistence failures reach the fallback handler: they are logged with a
    stack trace and rendered as a generic 500.
    """

    @app.exception_handler(SnapEditError)
    async def handle_action_error(request: Request, exc: SnapEditError):
        """Render an action failure with its machine-readable code."""
        logger.info(
            "[%s] %s: %s | Context: %s",
            _request_id(request), exc.code, exc.message, exc.context,
        )
        return JSONResponse(status_code=exc.status_code, content=_error_body(request, exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Input failed its declared shape or a refinement such as the empty-update check."""
        error = ValidationError(message="Input validation failed.", issues=list(exc.errors()))
        logger.info("[%s] Validation error: %d issue(s)", _request_id(request), len(error.issues))
        return JSONResponse(status_code=error.status_code, content=_error_body(request, error))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500 in the response, full stack trace in the log."""
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="SnapEdit API",
        description=(
            "Owner-scoped storage for screenshot projects, screenshots and their "
            "edit history. Each operation is a named action: POST /_actions/<name>."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(projects.router)
    app.include_router(screenshots.router)
    app.include_router(screenshot_edits.router)
    app.include_router(health.router)

    return app


# uvicorn expects `snapedit.main:app` to be importable
app = create_app()
