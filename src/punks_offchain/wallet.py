"""
Wallet Identities

Derives the addresses that own tokens and administer the collection.
The ledger keys every balance by the bech32 form of an address.
"""

from typing import Any, Dict, Union

import pycardano as pc


def cardano_network(network: str) -> pc.Network:
    """Map a network name to the PyCardano network"""
    return pc.Network.MAINNET if network == "mainnet" else pc.Network.TESTNET


def identity_of(address: Union[pc.Address, str]) -> str:
    """
    Normalize an address to the identity the ledger stores

    Args:
        address: PyCardano address or bech32 string

    Returns:
        Bech32 address string
    """
    if isinstance(address, pc.Address):
        return str(address)
    if isinstance(address, str):
        return str(pc.Address.from_primitive(address))
    raise TypeError(f"expected a Cardano address, got {type(address).__name__}")


class CardanoWallet:
    """Key and address derivation for a single collection participant"""

    def __init__(self, wallet_mnemonic: str, network: str = "testnet"):
        """
        Initialize wallet from mnemonic

        Args:
            wallet_mnemonic: BIP39 mnemonic phrase
            network: Network type ("testnet" or "mainnet")
        """
        self.network = network
        self.cardano_network = cardano_network(network)

        self.wallet = pc.crypto.bip32.HDWallet.from_mnemonic(wallet_mnemonic)

        # Derive main payment key
        self.payment_key = self.wallet.derive_from_path("m/1852'/1815'/0'/0/0")
        self.payment_skey = pc.ExtendedSigningKey.from_hdwallet(self.payment_key)

        self.enterprise_address = pc.Address(
            payment_part=self.payment_skey.to_verification_key().hash(),
            network=self.cardano_network,
        )

    @classmethod
    def generate(cls, network: str = "testnet") -> "CardanoWallet":
        """Create a wallet from a freshly generated mnemonic"""
        return cls(pc.crypto.bip32.HDWallet.generate_mnemonic(), network)

    @property
    def address(self) -> pc.Address:
        return self.enterprise_address

    @property
    def identity(self) -> str:
        """Bech32 identity used as the ledger key for this wallet"""
        return identity_of(self.enterprise_address)

    @property
    def payment_key_hash(self) -> pc.VerificationKeyHash:
        return self.payment_skey.to_verification_key().hash()

    def get_wallet_info(self) -> Dict[str, Any]:
        """
        Get wallet information

        Returns:
            Dictionary containing network, address and key hash
        """
        return {
            "network": self.network,
            "enterprise_address": str(self.enterprise_address),
            "payment_key_hash": self.payment_key_hash.payload.hex(),
        }
