"""
Token Metadata Utilities

Prepares CIP-25 (label 721) metadata for freshly minted tokens so a mint
transaction can carry each token's name and metadata URI.

Reference:
- CIP-25: https://cips.cardano.org/cips/cip25/
"""

from typing import Any, Dict, List, Union

import pycardano as pc

from .ledger import MintReceipt, TokenMintLedger


CIP25_LABEL = 721
CIP25_VERSION = "1.0"
MAX_METADATA_STRING_BYTES = 64


def split_metadata_string(text: str, max_bytes: int = MAX_METADATA_STRING_BYTES) -> Union[str, List[str]]:
    """
    Split a string into chunks that fit the metadata string limit

    Args:
        text: String to store in metadata
        max_bytes: Maximum bytes per chunk (default 64)

    Returns:
        The string itself when short enough, otherwise a list of chunks
    """
    if len(text.encode("utf-8")) <= max_bytes:
        return text

    chunks = []
    current = ""
    for char in text:
        if len((current + char).encode("utf-8")) > max_bytes:
            chunks.append(current)
            current = char
        else:
            current += char
    if current:
        chunks.append(current)
    return chunks


def asset_name(symbol: str, token_id: int) -> str:
    """On-chain asset name of a token, e.g. CP1"""
    return f"{symbol}{token_id}"


def build_token_metadata(ledger: TokenMintLedger, token_id: int) -> Dict[str, Any]:
    """
    Build the CIP-25 entry of one token

    Args:
        ledger: Collection ledger
        token_id: Minted token id

    Returns:
        Metadata dictionary for the token
    """
    uri = ledger.token_uri(token_id)
    return {
        "name": split_metadata_string(f"{ledger.name} #{token_id}"),
        "image": split_metadata_string(uri),
        "collection": split_metadata_string(ledger.name),
        "revealed": "true" if ledger.is_revealed else "false",
    }


def prepare_mint_metadata(
    ledger: TokenMintLedger, receipt: MintReceipt, policy_id: Union[pc.ScriptHash, str]
) -> pc.AuxiliaryData:
    """
    Prepare CIP-25 metadata for the tokens of a mint

    Args:
        ledger: Collection ledger the receipt came from
        receipt: Receipt returned by TokenMintLedger.mint
        policy_id: Minting policy id (ScriptHash or hex string)

    Returns:
        AuxiliaryData ready to attach to the mint transaction
    """
    if isinstance(policy_id, pc.ScriptHash):
        policy_hex = policy_id.payload.hex()
    else:
        policy_hex = policy_id

    tokens = {
        asset_name(ledger.symbol, token_id): build_token_metadata(ledger, token_id)
        for token_id in receipt.token_ids
    }
    metadata = {
        CIP25_LABEL: {
            policy_hex: tokens,
            "version": CIP25_VERSION,
        }
    }

    alonzo_metadata = pc.AlonzoMetadata(metadata=pc.Metadata(metadata))
    return pc.AuxiliaryData(alonzo_metadata)
