"""Wallet capability for client-side signing.

The wallet is an external agent (a browser extension plus the Hedera
signing snap) that holds user keys. This module only describes how the
client talks to it:

- request account access
- sign serialized transaction bytes through the snap's custom method

SECURITY: nothing here ever sees a private key or seed phrase.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

logger = logging.getLogger(__name__)

HEDERA_SNAP_ID = "npm:@hashgraph/hedera-snap"


class WalletError(Exception):
    """Raised when the wallet is absent, locked or rejects a request."""
    pass


class WalletProvider(ABC):
    """EIP-1193 style provider injected by the host environment."""

    @abstractmethod
    async def request(self, method: str, params: Optional[Any] = None) -> Any:
        """Send one JSON-RPC style request to the wallet."""
        pass


class WalletCapability(ABC):
    """What the ticket controller needs from a wallet."""

    @abstractmethod
    async def request_accounts(self) -> list[str]:
        """Ask the user for account access.

        Returns:
            Account identifiers, the active one first
        """
        pass

    @abstractmethod
    async def invoke_signing(self, transaction_b64: str) -> Any:
        """Ask the wallet to sign base64-encoded transaction bytes.

        Returns:
            Whatever the wallet returns for the signed transaction
        """
        pass


class SnapWallet(WalletCapability):
    """Wallet capability backed by a provider with the Hedera snap.

    Connecting checks the installed snaps (wallet_getSnaps), prompts for
    installation if the snap is absent (wallet_requestSnaps) and then
    requests accounts (eth_requestAccounts). Signing goes through
    wallet_invokeSnap -> signTransaction.
    """

    def __init__(self, provider: Optional[WalletProvider], snap_id: str = HEDERA_SNAP_ID):
        self.provider = provider
        self.snap_id = snap_id

    async def _request(self, method: str, params: Optional[Any] = None) -> Any:
        if self.provider is None:
            raise WalletError("MetaMask provider not found. Ensure MetaMask is installed.")
        try:
            return await self.provider.request(method, params)
        except WalletError:
            raise
        except Exception as e:
            raise WalletError(str(e) or f"{method} rejected") from e

    async def ensure_snap(self) -> bool:
        """Install the signing snap if it is missing.

        Returns:
            True if the snap had to be installed
        """
        snaps = await self._request("wallet_getSnaps") or {}
        if self.snap_id in snaps:
            return False

        result = await self._request("wallet_requestSnaps", {self.snap_id: {}})
        logger.info(f"Hedera Snap installed: {result}")
        return True

    async def request_accounts(self) -> list[str]:
        await self.ensure_snap()
        accounts = await self._request("eth_requestAccounts")
        if not accounts:
            raise WalletError("Wallet returned no accounts")
        logger.info(f"Connected wallet account: {accounts[0]}")
        return list(accounts)

    async def invoke_signing(self, transaction_b64: str) -> Any:
        return await self._request(
            "wallet_invokeSnap",
            {
                "snapId": self.snap_id,
                "request": {
                    "method": "signTransaction",
                    "params": {"transaction": transaction_b64},
                },
            },
        )
