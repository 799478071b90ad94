"""FastAPI application factory.

There is no module-level app instance; each call builds its own ledger
client. Serve with:
    uvicorn --factory ticketmint.api.app:create_app --port 3001
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ticketmint import __version__
from ticketmint.config import Settings, get_settings
from ticketmint.ledger.base import LedgerBackend
from ticketmint.ledger.factory import create_ledger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Ledger backend: {app.state.ledger!r}")
    yield
    # Shutdown
    await app.state.ledger.close()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {success: false, error}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors (400), not 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": message},
    )


def create_app(
    settings: Optional[Settings] = None,
    ledger: Optional[LedgerBackend] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached process settings)
        ledger: Ledger backend to inject (defaults to one built from settings)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Ticketmint API",
        description="NFT event ticket relay for the Hedera testnet",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # One ledger client and credential pair per process, shared by all requests
    app.state.settings = settings
    app.state.ledger = ledger or create_ledger(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register routes
    from ticketmint.api.routes import health
    from ticketmint.web.controllers import tickets_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(tickets_router)

    return app

