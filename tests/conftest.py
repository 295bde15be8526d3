"""
Pytest configuration for ledger tests

Fixtures for deploying Cryptic Punks ledgers against a manual clock.
"""

import pytest

from punks_offchain import ManualClock, TokenMintLedger

from .helpers import (
    COST,
    GENESIS,
    IPFS_HIDDEN_IMAGE_METADATA_URI,
    IPFS_IMAGE_METADATA_URI,
    MAX_SUPPLY,
    NAME,
    SYMBOL,
    make_address,
)


@pytest.fixture
def clock():
    return ManualClock(GENESIS)


@pytest.fixture
def deployer():
    """Address that deploys and owns the collection"""
    return make_address()


@pytest.fixture
def user():
    return make_address()


@pytest.fixture
def deploy(clock, deployer):
    """Factory deploying a ledger with the default collection parameters"""

    def _deploy(mint_date: int = GENESIS, cost: int = COST, max_supply: int = MAX_SUPPLY):
        return TokenMintLedger(
            NAME,
            SYMBOL,
            cost,
            max_supply,
            mint_date,
            IPFS_IMAGE_METADATA_URI,
            IPFS_HIDDEN_IMAGE_METADATA_URI,
            owner=deployer,
            clock=clock,
        )

    return _deploy


@pytest.fixture
def ledger(deploy):
    """Ledger whose mint window is already open"""
    return deploy()
