"""Ticket service: mint, transfer preparation and verification.

Holds the request rules of the relay. All ledger work is delegated to the
injected LedgerBackend; this service never signs or submits transfers.
"""

import json
import logging
from typing import Optional

from ticketmint.config import Settings, get_settings
from ticketmint.ledger.base import LedgerBackend, MintReceipt
from ticketmint.ledger.entity_id import parse_serial_number

logger = logging.getLogger(__name__)


class MissingFieldsError(ValueError):
    """Raised when a required request field is missing or empty."""
    pass


class TicketOperationError(Exception):
    """Raised when a ledger call behind a ticket operation fails."""
    pass


class TicketService:
    """Relay between the HTTP API and the ledger backend.

    Every mint creates a brand-new token collection; there is no
    event-to-collection mapping and no deduplication of identical mints.
    """

    def __init__(self, ledger: LedgerBackend, settings: Optional[Settings] = None):
        self.ledger = ledger
        self.settings = settings or get_settings()

    @staticmethod
    def build_metadata(event_details: str, seat_number: str) -> bytes:
        """Encode ticket metadata stored on the minted serial."""
        return json.dumps({"event": event_details, "seat": seat_number}).encode("utf-8")

    async def mint_ticket(self, event_details: Optional[str], seat_number: Optional[str]) -> MintReceipt:
        """Create a collection and mint one ticket into it.

        Raises:
            MissingFieldsError: If either input is missing or empty
            TicketOperationError: If any ledger call fails
        """
        if not event_details or not seat_number:
            raise MissingFieldsError("Event details and seat number are required")

        metadata = self.build_metadata(event_details, seat_number)
        try:
            receipt = await self.ledger.mint_ticket(
                name=self.settings.token_name,
                symbol=self.settings.token_symbol,
                metadata=metadata,
            )
        except Exception as e:
            raise TicketOperationError(f"Failed to mint ticket: {e}") from e

        logger.info(f"Minted ticket {receipt.token_id}#{receipt.serial_number} seat={seat_number}")
        return receipt

    async def prepare_transfer(
        self,
        token_id: Optional[str],
        serial_number: Optional[str],
        buyer_account_id: Optional[str],
    ) -> bytes:
        """Build an unsigned operator-to-buyer transfer of one ticket.

        Returns:
            Serialized transaction bytes for the buyer's wallet to sign

        Raises:
            MissingFieldsError: If any input is missing or empty
            TicketOperationError: If an identifier is malformed or the SDK fails
        """
        if not token_id or not serial_number or not buyer_account_id:
            raise MissingFieldsError("Token ID, serial number, and buyer account ID are required")

        try:
            serial = parse_serial_number(serial_number)
            transaction_bytes = await self.ledger.build_nft_transfer(
                token_id=token_id,
                serial_number=serial,
                receiver_account_id=buyer_account_id,
            )
        except Exception as e:
            raise TicketOperationError(f"Failed to prepare transfer: {e}") from e

        logger.info(
            f"Prepared transfer of {token_id}#{serial} to {buyer_account_id} "
            f"({len(transaction_bytes)} bytes, unsigned)"
        )
        return transaction_bytes

    async def verify_ticket(
        self,
        token_id: Optional[str],
        serial_number: Optional[str],
        user_account_id: Optional[str],
    ) -> str:
        """Report ticket ownership.

        STUB: always reports success. No ledger state is queried and the
        user account is not compared with the current holder.

        Raises:
            MissingFieldsError: If any input is missing or empty
        """
        if not token_id or not serial_number or not user_account_id:
            raise MissingFieldsError("Token ID, serial number, and user account ID are required")

        logger.warning(
            f"Mock verification for {token_id}#{serial_number} (account {user_account_id}); "
            "ledger state not checked"
        )
        return f"Ownership verified for Token ID: {token_id}, Serial: {serial_number} (mock)"
