"""ticketmint - NFT event ticket relay for the Hedera testnet."""

__version__ = "0.1.0"
