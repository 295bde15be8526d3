"""
Tests for CIP-25 metadata of minted tokens
"""

import pycardano as pc
import pytest

from punks_offchain import TokenMintLedger, asset_name, prepare_mint_metadata
from punks_offchain.metadata import split_metadata_string

from .helpers import GENESIS, IPFS_HIDDEN_IMAGE_METADATA_URI, IPFS_IMAGE_METADATA_URI, SYMBOL


POLICY_ID = "b" * 56


class TestMintMetadata:
    @pytest.fixture(autouse=True)
    def setup_mint(self, ledger, deployer, user):
        ledger.set_max_mint_amount(2, caller=deployer)
        self.ledger = ledger
        self.receipt = ledger.mint(2, sender=user)

    def _tokens(self, auxiliary_data: pc.AuxiliaryData) -> dict:
        return auxiliary_data.data.metadata[721][POLICY_ID]

    def test_one_entry_per_minted_token(self):
        metadata = prepare_mint_metadata(self.ledger, self.receipt, POLICY_ID)

        tokens = self._tokens(metadata)
        assert set(tokens) == {"CP1", "CP2"}
        assert tokens["CP1"]["name"] == "Cryptic Punks #1"
        assert tokens["CP2"]["image"] == f"{IPFS_IMAGE_METADATA_URI}2.json"
        assert metadata.data.metadata[721]["version"] == "1.0"

    def test_hidden_uri_while_unrevealed(self, deployer):
        self.ledger.set_is_revealed(False, caller=deployer)
        metadata = prepare_mint_metadata(self.ledger, self.receipt, POLICY_ID)

        tokens = self._tokens(metadata)
        assert tokens["CP1"]["image"] == IPFS_HIDDEN_IMAGE_METADATA_URI
        assert tokens["CP1"]["revealed"] == "false"

    def test_accepts_script_hash(self):
        policy_id = pc.ScriptHash(bytes.fromhex(POLICY_ID))
        metadata = prepare_mint_metadata(self.ledger, self.receipt, policy_id)

        assert "CP1" in self._tokens(metadata)

    def test_serializes(self):
        metadata = prepare_mint_metadata(self.ledger, self.receipt, POLICY_ID)
        assert len(metadata.to_cbor_hex()) > 0

    def test_image_carries_no_media_type(self):
        tokens = self._tokens(prepare_mint_metadata(self.ledger, self.receipt, POLICY_ID))
        assert "mediaType" not in tokens["CP1"]


class TestMetadataEdgeCases:
    def _deploy(self, name: str, symbol: str, clock, deployer) -> TokenMintLedger:
        return TokenMintLedger(
            name,
            symbol,
            0,
            10,
            GENESIS,
            IPFS_IMAGE_METADATA_URI,
            IPFS_HIDDEN_IMAGE_METADATA_URI,
            owner=deployer,
            clock=clock,
        )

    def test_long_collection_name_is_split(self, clock, deployer, user):
        name = "N" * 70
        ledger = self._deploy(name, SYMBOL, clock, deployer)
        receipt = ledger.mint(1, sender=user)

        metadata = prepare_mint_metadata(ledger, receipt, POLICY_ID)

        token = metadata.data.metadata[721][POLICY_ID]["CP1"]
        assert "".join(token["name"]) == f"{name} #1"
        assert "".join(token["collection"]) == name
        assert all(len(chunk.encode("utf-8")) <= 64 for chunk in token["name"])
        assert len(metadata.to_cbor_hex()) > 0

    def test_numeric_keys_stay_strings(self, clock, deployer, user):
        policy_id = "1" * 56
        ledger = self._deploy("Cryptic Punks", "", clock, deployer)
        receipt = ledger.mint(1, sender=user)

        metadata = prepare_mint_metadata(ledger, receipt, policy_id)

        assert set(metadata.data.metadata.keys()) == {721}
        assert policy_id in metadata.data.metadata[721]
        assert set(metadata.data.metadata[721][policy_id]) == {"1"}


class TestMetadataHelpers:
    def test_asset_name(self):
        assert asset_name("CP", 42) == "CP42"

    def test_short_strings_are_kept(self):
        assert split_metadata_string("ipfs://CID/1.json") == "ipfs://CID/1.json"

    def test_long_strings_are_split(self):
        uri = "ipfs://" + "x" * 150
        chunks = split_metadata_string(uri)

        assert isinstance(chunks, list)
        assert "".join(chunks) == uri
        assert all(len(chunk.encode("utf-8")) <= 64 for chunk in chunks)

