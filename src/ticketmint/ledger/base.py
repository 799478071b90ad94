"""Base interfaces for ledger backends.

Ticket flow against the ledger:
1. Create a non-fungible token collection owned by the operator
2. Mint one serial into it with JSON metadata
3. Build an unsigned NFT transfer for the buyer's wallet to sign

The backend never signs or submits transfers on behalf of users.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class LedgerBackendType(str, Enum):
    """Type of ledger backend."""
    DRYRUN = "dryrun"   # In-process simulation, no network access
    HEDERA = "hedera"   # Hedera network through the hiero SDK


@dataclass
class MintReceipt:
    """Identifiers of a freshly minted NFT.

    Attributes:
        token_id: Collection token ID (shard.realm.num)
        serial_number: Serial of the minted unit within the collection
    """
    token_id: str
    serial_number: str


class LedgerBackend(ABC):
    """Abstract base class for ledger backends.

    One instance holds the operator credentials and the network client,
    and is shared by every request the process serves.
    """

    def __init__(self, backend_type: LedgerBackendType, operator_account_id: str):
        self.backend_type = backend_type
        self.operator_account_id = operator_account_id

    @abstractmethod
    async def create_nft_collection(self, name: str, symbol: str) -> str:
        """Create a new non-fungible token collection.

        The operator account is treasury, admin key and supply key.

        Args:
            name: Collection name
            symbol: Collection symbol

        Returns:
            Token ID of the new collection
        """
        pass

    @abstractmethod
    async def mint_nft(self, token_id: str, metadata: bytes) -> str:
        """Mint one NFT into an existing collection.

        Args:
            token_id: Collection token ID
            metadata: Raw metadata stored on the serial

        Returns:
            Serial number of the minted NFT
        """
        pass

    @abstractmethod
    async def build_nft_transfer(
        self,
        token_id: str,
        serial_number: int,
        receiver_account_id: str,
    ) -> bytes:
        """Build an unsigned transfer of one NFT from the operator.

        Args:
            token_id: Collection token ID
            serial_number: Serial to transfer
            receiver_account_id: Account that receives the NFT

        Returns:
            Serialized, unsigned transaction bytes
        """
        pass

    async def mint_ticket(self, name: str, symbol: str, metadata: bytes) -> MintReceipt:
        """Create a collection and mint a single serial into it."""
        token_id = await self.create_nft_collection(name, symbol)
        try:
            serial = await self.mint_nft(token_id, metadata)
        except Exception:
            logger.warning(f"Collection {token_id} created but mint failed; left in place")
            raise
        return MintReceipt(token_id=token_id, serial_number=serial)

    async def health_check(self) -> bool:
        """Check if the ledger backend is available."""
        return True

    async def close(self) -> None:
        """Release network resources."""
        return None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(type={self.backend_type.value}, "
            f"operator={self.operator_account_id})"
        )


class LedgerError(Exception):
    """Exception raised when a ledger operation fails."""
    pass


class LedgerConfigError(LedgerError):
    """Exception raised when the ledger backend is misconfigured."""
    pass


class EntityIdError(LedgerError, ValueError):
    """Exception raised when an account or token ID cannot be parsed."""
    pass
