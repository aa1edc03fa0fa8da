"""
Web App — FastAPI Application Factory
======================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by web_app.server (or directly: uvicorn web_app.main:app).
When:  Once at import; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:                                        │
    │  ┌──────────────────┐                               │
    │  │  Request Logging │                               │
    │  └──────────────────┘                               │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────┐ ┌──────────┐ ┌────────┐ ┌───────┐        │
    │  │ GET / │ │ /healthz │ │ /ready │ │ /ping │        │
    │  └───────┘ └──────────┘ └────────┘ └───────┘        │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐  │
    │  │ 404/405→404 text │ other HTTP→JSON │ Exc→500 │  │
    │  └──────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Log version and mode
    3. In debug mode, log the route table

    Shutdown:
    1. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from web_app import __version__
from web_app.config import settings
from web_app.middleware.logging import RequestLoggingMiddleware
from web_app.routes import health, ping, welcome

logger = logging.getLogger(__name__)

# Body of every 404, including method mismatches on known paths
NOT_FOUND_BODY = "404 page not found"

# Mounted in this order by create_app()
ROUTERS = (welcome.router, health.router, ping.router)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    What:    Sets up logging with a consistent format across all modules.
    How:     Configures the root logger with a stdout StreamHandler.
    When:    Called by server.main() before binding, and again on lifespan
             startup when the app is served by a bare uvicorn command.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,  # Override any existing logging config
    )

    # The app writes its own access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    if settings.is_test:
        logging.getLogger("web_app.access").setLevel(logging.WARNING)


def log_routes(routers: Iterable[APIRouter] = ROUTERS) -> None:
    """
    Log one line per registered route: `GET /ping --> ping`.

    Walks the routers themselves: FastAPI may wrap included routers in
    `app.routes`, so the flattened app table does not always hold APIRoutes.
    """
    for router in routers:
        for route in router.routes:
            if not isinstance(route, APIRoute):
                continue
            for method in sorted(route.methods):
                logger.info("%-6s %-10s --> %s", method, route.path, route.name)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    How:     AsyncContextManager: code before yield runs on startup,
             code after yield runs on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Web App %s starting up (mode=%s)", __version__, settings.mode)

    if settings.is_debug:
        log_routes()

    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        HTTPException 404/405  → 404 text/plain "404 page not found"
        HTTPException (other)  → its own status, JSON error body
        Exception (fallback)   → 500 JSON, traceback logged server-side

    Method mismatches are reported as 404 rather than 405: a route is a
    (method, path) pair, so POST / is simply an unknown route.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "http_error",
                "message": exc.detail,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Stack trace is logged server-side ONLY (never in the response).
        """
        logger.error(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.

    Docs endpoints and trailing-slash redirects are switched off: only the
    four registered paths answer, everything else is a 404.
    """
    app = FastAPI(
        title="Web App",
        description="Minimal HTTP service: welcome message, probes and ping.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    app.add_middleware(RequestLoggingMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for router in ROUTERS:
        app.include_router(router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `web_app.main:app` to be importable
app = create_app()
