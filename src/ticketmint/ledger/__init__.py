"""Ledger backends for ticket collections.

Provides:
- DryRunLedger: In-memory simulation for development and tests
- HederaLedger: Hedera network through the hiero SDK
"""

from ticketmint.ledger.base import (
    EntityIdError,
    LedgerBackend,
    LedgerConfigError,
    LedgerError,
    MintReceipt,
)
from ticketmint.ledger.dryrun import DryRunLedger
from ticketmint.ledger.factory import create_ledger

__all__ = [
    "EntityIdError",
    "LedgerBackend",
    "LedgerConfigError",
    "LedgerError",
    "MintReceipt",
    "DryRunLedger",
    "create_ledger",
]
