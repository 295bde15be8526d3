"""
Collection Configuration

Centralized settings for deploying a Cryptic Punks ledger.
Collection parameters load from environment variables (prefixed PUNKS_)
or a .env file in the project root.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Get the project root directory (two levels up from src/punks_offchain/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CollectionSettings(BaseSettings):
    """
    Construction parameters for the mint ledger

    Every field can be overridden with an environment variable, e.g.
    PUNKS_MAX_SUPPLY=500 or PUNKS_MINT_DATE=1905357600.
    """

    # ============================================================================
    # Collection parameters
    # ============================================================================

    name: str = "Cryptic Punks"
    symbol: str = "CP"
    cost: int = Field(default=0, ge=0)  # Lovelace per token
    max_supply: int = Field(default=1000, gt=0)
    mint_date: int = 0  # POSIX seconds when minting opens
    base_uri: str = "ipfs://IPFS-IMAGE-METADATA-CID/"
    not_revealed_uri: str = "ipfs://IPFS-HIDDEN-METADATA-CID/hidden.json"

    # ============================================================================
    # Environment settings
    # ============================================================================

    network: str = "testnet"  # testnet or mainnet
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PUNKS_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("network")
    @classmethod
    def check_network(cls, value: str) -> str:
        value = value.lower()
        if value not in ("testnet", "mainnet"):
            raise ValueError("network must be 'testnet' or 'mainnet'")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value

    @property
    def is_mainnet(self) -> bool:
        """Check if configured for mainnet"""
        return self.network == "mainnet"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging for scripts and interactive use

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
