"""
SalesDesk API — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Imported by uvicorn (uvicorn salesdesk.main:app) and by the
       `salesdesk` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────────┐ ┌────────────┐   │
    │  │  Request ID  │→│  Access Log  │→│    CORS    │   │
    │  └──────────────┘ └──────────────┘ └────────────┘   │
    │                                                     │
    │  Routes:                                            │
    │  /api/customers[/{code}]  /api/orders  /api/agents  │
    │  /health  /openapi.json  /api-docs                  │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation/BadRequest→400 │ NotFound→404 │         │
    │  Conflict→409 │ Database/unexpected→500             │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, open the connection pool, log URLs
    Shutdown: drain the connection pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salesdesk import __version__
from salesdesk.config import settings
from salesdesk.database import Database
from salesdesk.exceptions import (
    BadRequestError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from salesdesk.middleware.logging import RequestLoggingMiddleware, logger as access_logger
from salesdesk.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from salesdesk.openapi import API_DESCRIPTION, OPENAPI_TAGS, SWAGGER_UI_PARAMETERS, install_openapi
from salesdesk.routes import agents, customers, health, orders

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (container runtimes collect it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's; engine echo is opt-in via DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Create the Database (bounded pool) and attach it to app.state
        3. Log the listening, Swagger UI and OpenAPI URLs
    Shutdown:
        1. Dispose the pool (close every pooled connection)
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("SalesDesk API %s starting up...", __version__)

    database = Database.from_settings(settings)
    app.state.database = database
    url = settings.sqlalchemy_url
    logger.info(
        "Database pool: %s (pool_size=%d)",
        url.render_as_string(hide_password=True),
        settings.db_pool_size,
    )

    base = f"http://{settings.backend_host}:{settings.backend_port}"
    logger.info("API listening at %s", base)
    logger.info("Swagger UI: %s%s", base, app.docs_url)
    logger.info("OpenAPI JSON: %s%s", base, app.openapi_url)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("SalesDesk API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler table:
        ValidationError  → 400 {"errors": [...]}
        BadRequestError  → 400 {"error": message}
        NotFoundError    → 404 {"error": "Not found"}
        ConflictError    → 409 {"error": "CUST_CODE already exists"}
        DatabaseError    → 500 {"error": "Internal Server Error"}
        Exception        → 500 {"error": "Internal Server Error"}

    5xx responses never carry driver messages or stack traces; those are
    logged server-side with the request ID.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.info("[%s] Validation failed: %s", rid, exc.message)
        return JSONResponse(status_code=400, content={"errors": exc.errors})

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(request: Request, exc: BadRequestError):
        rid = request_id_var.get("")
        logger.info("[%s] Bad request: %s", rid, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        logger.info("[%s] Conflict: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=409, content={"error": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all: generic 500 to the client, full traceback to the log.

        Starlette runs this handler outside the middleware chain, so the
        request ID header and the access line are produced here.
        """
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        access_logger.error(
            "%s %s 500 [%s] unhandled %s",
            request.method,
            request.url.path,
            rid,
            type(exc).__name__,
        )
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY, headers=headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: FastAPI instance with middleware, handlers, routes and the
             OpenAPI builder installed. The database pool is opened by the
             lifespan, not here, so importing the module has no side effects.
    """
    app = FastAPI(
        title="SalesDesk API",
        description=API_DESCRIPTION,
        version=__version__,
        openapi_tags=OPENAPI_TAGS,
        docs_url="/api-docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(customers.router)
    app.include_router(orders.router)
    app.include_router(agents.router)
    app.include_router(health.router)

    install_openapi(app)
    return app


app = create_app()


def run() -> None:
    """Console-script entry point: serve the app with uvicorn."""
    uvicorn.run(
        "salesdesk.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
