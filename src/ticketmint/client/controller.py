"""Ticket controller: form state and the mint -> transfer -> verify flow.

Mirrors what the browser page does. Each action clears the previous
error, and any failure ends the action with a page-level error string.
There is no retry or reconnection; the user re-triggers the action.
"""

import base64
import logging
from typing import Any, Optional

from ticketmint.client.api import TicketApiClient, TicketApiError
from ticketmint.client.wallet import WalletCapability, WalletError
from ticketmint.web.contracts.tickets import Ticket

logger = logging.getLogger(__name__)

# Sent when verifying without a connected wallet account
PLACEHOLDER_ACCOUNT_ID = "0.0.xxxx"

CONNECT_ERROR = "Failed to initialize MetaMask. Ensure MetaMask with Hedera Snap is installed."
TRANSFER_PRECONDITION_ERROR = "Please connect MetaMask and provide a buyer account ID"
TRANSFER_STARTED = "Ticket transfer initiated. Check MetaMask for confirmation."


class TicketController:
    """Holds page state and drives the relay API and the wallet."""

    def __init__(self, api: TicketApiClient, wallet: Optional[WalletCapability] = None):
        self.api = api
        self.wallet = wallet

        # Form input
        self.event_details = ""
        self.seat_number = ""
        self.buyer_account_id = ""

        # Results
        self.ticket: Optional[Ticket] = None
        self.account: Optional[str] = None
        self.signed_transaction: Any = None
        self.transfer_result = ""
        self.verification_result = ""
        self.error = ""

    @property
    def can_mint(self) -> bool:
        return bool(self.event_details and self.seat_number)

    @property
    def can_transfer(self) -> bool:
        return bool(self.ticket and self.buyer_account_id and self.account)

    @property
    def can_verify(self) -> bool:
        return self.ticket is not None

    async def connect_wallet(self) -> Optional[str]:
        """Install the signing snap if needed and request account access."""
        if self.wallet is None:
            self.error = CONNECT_ERROR
            return None
        try:
            accounts = await self.wallet.request_accounts()
        except WalletError as e:
            logger.error(f"Error initializing wallet: {e}")
            self.error = CONNECT_ERROR
            return None

        self.account = accounts[0]
        return self.account

    async def mint_ticket(self) -> Optional[Ticket]:
        self.error = ""
        try:
            self.ticket = await self.api.mint_ticket(self.event_details, self.seat_number)
        except TicketApiError as e:
            logger.error(f"Error minting ticket: {e}")
            self.error = str(e)
            return None
        return self.ticket

    async def transfer_ticket(self) -> Any:
        """Prepare the transfer on the server and have the wallet sign it."""
        self.error = ""
        if not self.ticket or not self.buyer_account_id or self.wallet is None or not self.account:
            self.error = TRANSFER_PRECONDITION_ERROR
            return None

        try:
            prepared = await self.api.prepare_transfer(
                self.ticket.token_id,
                self.ticket.serial_number,
                self.buyer_account_id,
            )
            encoded = base64.b64encode(bytes(prepared.transaction_bytes)).decode("ascii")
            signed = await self.wallet.invoke_signing(encoded)
        except (TicketApiError, WalletError) as e:
            logger.error(f"Error transferring ticket: {e}")
            self.error = str(e) or "Transaction failed. Check MetaMask."
            return None

        self.signed_transaction = signed
        self.transfer_result = TRANSFER_STARTED
        logger.info(f"Signed transaction: {signed!r}")
        return signed

    async def verify_ticket(self) -> Optional[str]:
        self.error = ""
        if self.ticket is None:
            self.error = "Mint a ticket first"
            return None

        try:
            self.verification_result = await self.api.verify_ticket(
                self.ticket.token_id,
                self.ticket.serial_number,
                self.account or PLACEHOLDER_ACCOUNT_ID,
            )
        except TicketApiError as e:
            logger.error(f"Error verifying ticket: {e}")
            self.error = str(e)
            return None
        return self.verification_result

    async def run(self) -> bool:
        """Run mint, transfer (when a wallet account is connected) and verify.

        Returns:
            True if every attempted step succeeded
        """
        if await self.mint_ticket() is None:
            return False
        if self.account and self.buyer_account_id:
            if await self.transfer_ticket() is None:
                return False
        return await self.verify_ticket() is not None
