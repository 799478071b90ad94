"""Health check endpoints."""

from fastapi import APIRouter, Request

from ticketmint import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "ticketmint"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration and ledger info."""
    settings = request.app.state.settings
    ledger = request.app.state.ledger
    ledger_ok = await ledger.health_check()
    return {
        "status": "healthy" if ledger_ok else "degraded",
        "service": "ticketmint",
        "version": __version__,
        "ledger": {
            "backend": ledger.backend_type.value,
            "operator": ledger.operator_account_id,
            "healthy": ledger_ok,
        },
        "config": settings.get_safe_dict(),
    }
