"""
Cryptic Punks Off-chain Library

Mint ledger for a fixed-supply, time-gated NFT collection, together with
the configuration, identities and metadata helpers around it.
"""

from .clock import ManualClock, SystemClock
from .config import CollectionSettings, configure_logging
from .errors import (
    InsufficientPayment,
    LedgerError,
    MintingPaused,
    MintWindowClosed,
    QuantityOutOfRange,
    SupplyExceeded,
    TokenNotFound,
    Unauthorized,
)
from .ledger import MintReceipt, TokenMintLedger, Transfer
from .metadata import asset_name, prepare_mint_metadata
from .wallet import CardanoWallet, identity_of


__all__ = [
    "TokenMintLedger",
    "MintReceipt",
    "Transfer",
    "CollectionSettings",
    "configure_logging",
    "CardanoWallet",
    "identity_of",
    "asset_name",
    "prepare_mint_metadata",
    "ManualClock",
    "SystemClock",
    "LedgerError",
    "Unauthorized",
    "MintWindowClosed",
    "MintingPaused",
    "QuantityOutOfRange",
    "SupplyExceeded",
    "InsufficientPayment",
    "TokenNotFound",
]
