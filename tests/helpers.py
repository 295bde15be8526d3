"""
Shared test data for the ledger tests
"""

import pycardano as pc


NAME = "Cryptic Punks"
SYMBOL = "CP"
COST = 0
MAX_SUPPLY = 1000
IPFS_IMAGE_METADATA_URI = "ipfs://IPFS-IMAGE-METADATA-CID/"
IPFS_HIDDEN_IMAGE_METADATA_URI = "ipfs://IPFS-HIDDEN-METADATA-CID/hidden.json"

GENESIS = 1_700_000_000  # Clock start for every test
MAY_17_2030 = 1_905_271_200  # 2030-05-17 18:00:00 UTC

ONE_ADA = 1_000_000

# (setter, new value, DatumCollection field it writes)
SETTER_CASES = [
    ("set_cost", ONE_ADA, "cost"),
    ("set_is_paused", True, "is_paused"),
    ("set_is_revealed", False, "is_revealed"),
    ("set_max_mint_amount", 5, "max_mint_amount"),
    ("set_not_revealed_uri", "ipfs://other/", "not_revealed_uri"),
    ("set_base_uri", "ipfs://other/", "base_uri"),
    ("set_base_extension", ".example", "base_extension"),
]


def make_address() -> pc.Address:
    """Fresh testnet enterprise address"""
    signing_key = pc.PaymentSigningKey.generate()
    return pc.Address(
        payment_part=signing_key.to_verification_key().hash(),
        network=pc.Network.TESTNET,
    )
