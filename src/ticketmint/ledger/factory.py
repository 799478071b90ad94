"""Ledger backend factory.

Creates the ledger backend selected by LEDGER_BACKEND. The caller owns
the returned instance; the API keeps exactly one per process and injects
it into request handlers.
"""

import logging
from typing import Optional

from ticketmint.config import Settings, get_settings
from ticketmint.ledger.base import LedgerBackend, LedgerBackendType, LedgerConfigError

logger = logging.getLogger(__name__)


def get_backend_type(settings: Settings) -> LedgerBackendType:
    """Resolve the configured backend type.

    Raises:
        LedgerConfigError: If LEDGER_BACKEND names an unknown backend
    """
    try:
        return LedgerBackendType(settings.ledger_backend.lower())
    except ValueError:
        raise LedgerConfigError(f"Unknown ledger backend: {settings.ledger_backend}")


def create_ledger(settings: Optional[Settings] = None) -> LedgerBackend:
    """Create the configured ledger backend.

    Args:
        settings: Settings to use (defaults to the cached process settings)

    Returns:
        LedgerBackend instance

    Raises:
        LedgerConfigError: If the backend cannot be configured
    """
    settings = settings or get_settings()
    backend_type = get_backend_type(settings)
    logger.info(f"Initializing {backend_type.value} ledger backend")

    if backend_type == LedgerBackendType.HEDERA:
        if not settings.has_operator:
            raise LedgerConfigError("OPERATOR_ID and OPERATOR_KEY are required for the hedera backend")

        from ticketmint.ledger.hedera import HederaLedger
        return HederaLedger(
            operator_id=settings.operator_id,
            operator_key=settings.operator_key,
            network=settings.ledger_network,
        )

    from ticketmint.ledger.dryrun import DRYRUN_OPERATOR_ID, DryRunLedger
    return DryRunLedger(
        operator_account_id=settings.operator_id or DRYRUN_OPERATOR_ID,
        token_base=settings.dryrun_token_base,
    )
