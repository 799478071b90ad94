"""Application configuration using pydantic-settings.

Operator credentials for the ledger network are read from the environment
(or a local .env file) once at process start.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Ledger operator
    # ======================
    operator_id: Optional[str] = Field(
        default=None, description="Operator account ID (e.g. 0.0.1234)"
    )
    operator_key: Optional[str] = Field(
        default=None, description="Operator private key (DER or hex string)"
    )

    # ======================
    # Ledger backend
    # ======================
    ledger_backend: str = Field(
        default="dryrun", description="Ledger backend: dryrun or hedera"
    )
    ledger_network: str = Field(
        default="testnet", description="Ledger network name (testnet, previewnet, mainnet)"
    )
    dryrun_token_base: int = Field(
        default=5000000, description="First token number handed out by the dry-run ledger"
    )

    # ======================
    # Ticket collection
    # ======================
    token_name: str = Field(default="EventTicket", description="NFT collection name")
    token_symbol: str = Field(default="ETICKET", description="NFT collection symbol")

    # ======================
    # API
    # ======================
    api_host: str = Field(default="127.0.0.1", description="API server host")
    api_port: int = Field(default=3001, description="API server port")
    cors_origins: str = Field(
        default="*", description="Comma-separated list of allowed CORS origins"
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    @property
    def allowed_origins(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def has_operator(self) -> bool:
        """Check if operator credentials are configured."""
        return bool(self.operator_id and self.operator_key)

    @property
    def is_dry_run(self) -> bool:
        return self.ledger_backend.lower() == "dryrun"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "ledger": {
                "backend": self.ledger_backend,
                "network": self.ledger_network,
                "operator_id": self.operator_id or "(not set)",
                "operator_key": "***" if self.operator_key else "(not set)",
            },
            "collection": {
                "name": self.token_name,
                "symbol": self.token_symbol,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
