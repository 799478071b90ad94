"""Client side of the ticket dApp.

- TicketApiClient: HTTP calls to the relay
- SnapWallet: wallet capability (accounts + snap signing)
- TicketController: page state and the mint -> transfer -> verify flow
"""

from ticketmint.client.api import TicketApiClient, TicketApiError
from ticketmint.client.controller import TicketController
from ticketmint.client.wallet import (
    HEDERA_SNAP_ID,
    SnapWallet,
    WalletCapability,
    WalletError,
    WalletProvider,
)

__all__ = [
    "TicketApiClient",
    "TicketApiError",
    "TicketController",
    "HEDERA_SNAP_ID",
    "SnapWallet",
    "WalletCapability",
    "WalletError",
    "WalletProvider",
]
