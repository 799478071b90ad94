"""Dry-run ledger backend (no network access).

Simulates token creation and minting in memory so the relay can be
exercised without operator credentials or testnet funds.
"""

import json
import logging
from itertools import count

from ticketmint.ledger.base import (
    LedgerBackend,
    LedgerBackendType,
    LedgerError,
)
from ticketmint.ledger.entity_id import EntityId

logger = logging.getLogger(__name__)

DRYRUN_OPERATOR_ID = "0.0.2"
DRYRUN_PREFIX = b"DRYRUN:"


class DryRunLedger(LedgerBackend):
    """Simulated ledger that hands out sequential token IDs."""

    def __init__(self, operator_account_id: str = DRYRUN_OPERATOR_ID, token_base: int = 5000000):
        operator = EntityId.parse(operator_account_id, "account")
        super().__init__(LedgerBackendType.DRYRUN, str(operator))
        self._token_numbers = count(token_base)
        # token_id -> {"name", "symbol", "serials": {serial: metadata}}
        self._collections: dict[str, dict] = {}

    async def create_nft_collection(self, name: str, symbol: str) -> str:
        token_id = f"0.0.{next(self._token_numbers)}"
        self._collections[token_id] = {"name": name, "symbol": symbol, "serials": {}}
        logger.info(f"[dryrun] Created collection {token_id} ({symbol})")
        return token_id

    async def mint_nft(self, token_id: str, metadata: bytes) -> str:
        collection = self._collections.get(str(EntityId.parse(token_id, "token")))
        if collection is None:
            raise LedgerError(f"INVALID_TOKEN_ID: {token_id}")

        serial = len(collection["serials"]) + 1
        collection["serials"][serial] = metadata
        logger.info(f"[dryrun] Minted {token_id} serial {serial}")
        return str(serial)

    async def build_nft_transfer(
        self,
        token_id: str,
        serial_number: int,
        receiver_account_id: str,
    ) -> bytes:
        token = EntityId.parse(token_id, "token")
        receiver = EntityId.parse(receiver_account_id, "account")

        body = {
            "type": "TransferTransaction",
            "nftTransfers": [
                {
                    "tokenId": str(token),
                    "serialNumber": serial_number,
                    "sender": self.operator_account_id,
                    "receiver": str(receiver),
                    "isApproval": True,
                }
            ],
            "signed": False,
        }
        return DRYRUN_PREFIX + json.dumps(body, sort_keys=True).encode("utf-8")

    def get_metadata(self, token_id: str, serial_number: int) -> bytes:
        """Return metadata stored on a simulated serial."""
        return self._collections[token_id]["serials"][serial_number]
