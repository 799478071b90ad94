"""Hedera ledger backend.

Uses the hiero Python SDK (``hiero-sdk-python``) to create token
collections, mint NFTs and build unsigned transfers on a Hedera network.

Setup:
1. Create a testnet account at https://portal.hedera.com
2. Set OPERATOR_ID and OPERATOR_KEY environment variables
3. Set LEDGER_BACKEND=hedera
4. Install the SDK: pip install "ticketmint[hedera]"

The SDK is synchronous; every network call runs in the default executor
so request handlers never block the event loop.
"""

import asyncio
import logging

from ticketmint.ledger.base import (
    LedgerBackend,
    LedgerBackendType,
    LedgerConfigError,
    LedgerError,
)
from ticketmint.ledger.entity_id import EntityId

logger = logging.getLogger(__name__)


def _load_sdk():
    """Import the hiero SDK on first use."""
    try:
        import hiero_sdk_python
    except ImportError as e:
        raise LedgerConfigError(
            "hiero-sdk-python not installed. Install with: pip install 'ticketmint[hedera]'"
        ) from e
    return hiero_sdk_python


class HederaLedger(LedgerBackend):
    """Hedera network backend.

    A single SDK client, configured with the operator account, is created
    at construction and reused for every call. The operator is treasury,
    admin and supply key for every collection it creates.
    """

    def __init__(self, operator_id: str, operator_key: str, network: str = "testnet"):
        """Initialize the SDK client.

        Args:
            operator_id: Operator account ID (shard.realm.num)
            operator_key: Operator private key string
            network: Network name (testnet, previewnet, mainnet)
        """
        sdk = _load_sdk()
        super().__init__(LedgerBackendType.HEDERA, str(EntityId.parse(operator_id, "account")))
        self._sdk = sdk
        self.network = network
        self._operator_id = sdk.AccountId.from_string(operator_id)
        self._operator_key = sdk.PrivateKey.from_string(operator_key)
        self._client = sdk.Client(sdk.Network(network=network))
        self._client.set_operator(self._operator_id, self._operator_key)
        logger.info(f"Hedera client ready on {network} (operator {operator_id})")

    async def _run(self, func):
        """Run a blocking SDK call in the thread pool."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func)

    def _check_receipt(self, receipt, action: str):
        sdk = self._sdk
        if receipt.status != sdk.ResponseCode.SUCCESS:
            status = sdk.ResponseCode(receipt.status).name
            raise LedgerError(f"{action} failed with status {status}")
        return receipt

    async def create_nft_collection(self, name: str, symbol: str) -> str:
        sdk = self._sdk

        def create():
            tx = (
                sdk.TokenCreateTransaction()
                .set_token_name(name)
                .set_token_symbol(symbol)
                .set_token_type(sdk.TokenType.NON_FUNGIBLE_UNIQUE)
                .set_decimals(0)
                .set_initial_supply(0)
                .set_treasury_account_id(self._operator_id)
                .set_admin_key(self._operator_key)
                .set_supply_key(self._operator_key)
                .freeze_with(self._client)
                .sign(self._operator_key)
            )
            return self._check_receipt(tx.execute(self._client), "Token create")

        receipt = await self._run(create)
        token_id = str(receipt.token_id)
        logger.info(f"Created collection {token_id} ({symbol})")
        return token_id

    async def mint_nft(self, token_id: str, metadata: bytes) -> str:
        sdk = self._sdk

        def mint():
            tx = (
                sdk.TokenMintTransaction()
                .set_token_id(sdk.TokenId.from_string(token_id))
                .set_metadata([metadata])
                .freeze_with(self._client)
                .sign(self._operator_key)
            )
            return self._check_receipt(tx.execute(self._client), "Token mint")

        receipt = await self._run(mint)
        serial = str(receipt.serial_numbers[0])
        logger.info(f"Minted {token_id} serial {serial}")
        return serial

    async def build_nft_transfer(
        self,
        token_id: str,
        serial_number: int,
        receiver_account_id: str,
    ) -> bytes:
        sdk = self._sdk
        # Validate syntax up front so both backends report the same error
        EntityId.parse(token_id, "token")
        EntityId.parse(receiver_account_id, "account")

        def build():
            nft_id = sdk.NftId(sdk.TokenId.from_string(token_id), serial_number)
            tx = (
                sdk.TransferTransaction()
                .add_nft_transfer(
                    nft_id,
                    self._operator_id,
                    sdk.AccountId.from_string(receiver_account_id),
                    True,
                )
                .freeze_with(self._client)
            )
            return tx.to_bytes()

        return await self._run(build)

    async def close(self) -> None:
        await self._run(self._client.close)
