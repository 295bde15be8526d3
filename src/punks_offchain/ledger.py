"""
Token Mint Ledger

Fixed-supply, time-gated NFT collection state.
Handles minting, owner-only configuration and metadata URI resolution.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

import pycardano as pc

from punks_contracts.types import (
    DEFAULT_BASE_EXTENSION,
    DEFAULT_MAX_MINT_AMOUNT,
    DatumCollection,
    from_bool_data,
    to_bool_data,
)

from .clock import SystemClock
from .config import CollectionSettings
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
from .wallet import identity_of


logger = logging.getLogger(__name__)

Identity = Union[pc.Address, str]


@dataclass(frozen=True)
class Transfer:
    """Ownership change of a single token; from_address is None for mints"""

    from_address: Optional[str]
    to_address: str
    token_id: int


@dataclass(frozen=True)
class MintReceipt:
    """Result of a successful mint"""

    sender: str
    payment: int
    token_ids: List[int] = field(default_factory=list)
    logs: List[Transfer] = field(default_factory=list)


class TokenMintLedger:
    """
    Ledger for a fixed-supply NFT collection with a timed mint opening

    Token ids start at 1 and increase by one per minted token. Every
    operation validates all of its preconditions before touching state, so a
    rejected call never leaves a partial mint or a half-applied update.
    """

    def __init__(
        self,
        name: str,
        symbol: str,
        cost: int,
        max_supply: int,
        mint_date: int,
        base_uri: str,
        not_revealed_uri: str,
        owner: Identity,
        clock=None,
    ):
        """
        Deploy a new collection

        Args:
            name: Collection name
            symbol: Collection symbol
            cost: Price per token in lovelace
            max_supply: Maximum number of tokens that can ever exist
            mint_date: POSIX timestamp (seconds) when minting opens
            base_uri: Prefix for revealed token URIs
            not_revealed_uri: URI returned for every token while unrevealed
            owner: Deploying identity, sole authority for setters
            clock: Time source with a now() method (system clock by default)
        """
        if max_supply <= 0:
            raise ValueError("max_supply must be positive")
        if cost < 0:
            raise ValueError("cost cannot be negative")

        self._clock = clock or SystemClock()
        self._owner = identity_of(owner)

        self._name = name
        self._symbol = symbol
        self._cost = cost
        self._max_supply = max_supply
        self._max_mint_amount = DEFAULT_MAX_MINT_AMOUNT
        self._base_uri = base_uri
        self._not_revealed_uri = not_revealed_uri
        self._base_extension = DEFAULT_BASE_EXTENSION.decode()
        self._is_paused = False
        self._is_revealed = True

        self._time_deployed = self._clock.now()
        # A mint date in the past opens minting immediately
        self._allow_minting_after = max(0, mint_date - self._time_deployed)

        self._token_owners: List[str] = []
        self._treasury = 0

        logger.info(
            f"Deployed {name} ({symbol}): max supply {max_supply}, "
            f"minting opens in {self._allow_minting_after}s"
        )

    @classmethod
    def from_settings(cls, settings: CollectionSettings, owner: Identity, clock=None) -> "TokenMintLedger":
        """Deploy a collection from loaded settings"""
        return cls(
            settings.name,
            settings.symbol,
            settings.cost,
            settings.max_supply,
            settings.mint_date,
            settings.base_uri,
            settings.not_revealed_uri,
            owner=owner,
            clock=clock,
        )

    # ============================================================================
    # Read accessors
    # ============================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def cost(self) -> int:
        return self._cost

    @property
    def max_supply(self) -> int:
        return self._max_supply

    @property
    def max_mint_amount(self) -> int:
        return self._max_mint_amount

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def not_revealed_uri(self) -> str:
        return self._not_revealed_uri

    @property
    def base_extension(self) -> str:
        return self._base_extension

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def is_revealed(self) -> bool:
        return self._is_revealed

    @property
    def time_deployed(self) -> int:
        return self._time_deployed

    @property
    def allow_minting_after(self) -> int:
        return self._allow_minting_after

    @property
    def total_supply(self) -> int:
        return len(self._token_owners)

    @property
    def treasury(self) -> int:
        """Lovelace paid in by mints and not yet withdrawn"""
        return self._treasury

    @property
    def mint_opens_at(self) -> int:
        return self._time_deployed + self._allow_minting_after

    def get_seconds_until_minting(self) -> int:
        """Seconds left before minting opens, 0 once it is open"""
        return max(0, self.mint_opens_at - self._clock.now())

    def is_mint_open(self) -> bool:
        return self._clock.now() >= self.mint_opens_at

    def balance_of(self, address: Identity) -> int:
        owner = identity_of(address)
        return sum(1 for token_owner in self._token_owners if token_owner == owner)

    def wallet_of_owner(self, address: Identity) -> List[int]:
        """
        List the tokens held by an address

        Args:
            address: Owner address

        Returns:
            Token ids in ascending order, empty if the address owns nothing
        """
        owner = identity_of(address)
        return [
            token_id
            for token_id, token_owner in enumerate(self._token_owners, start=1)
            if token_owner == owner
        ]

    def owner_of(self, token_id: int) -> str:
        self._require_token(token_id)
        return self._token_owners[token_id - 1]

    def token_uri(self, token_id: int) -> str:
        """
        Resolve the metadata URI of a token

        Args:
            token_id: Id of a minted token

        Returns:
            The hidden URI while the collection is unrevealed, otherwise
            base URI + token id + base extension

        Raises:
            TokenNotFound: If the token has not been minted
        """
        self._require_token(token_id)

        if not self._is_revealed:
            return self._not_revealed_uri

        if not self._base_uri:
            return ""
        return f"{self._base_uri}{token_id}{self._base_extension}"

    # ============================================================================
    # Minting
    # ============================================================================

    def mint(self, quantity: int, sender: Identity, payment: int = 0) -> MintReceipt:
        """
        Mint new tokens to the sender

        Args:
            quantity: Number of tokens to mint
            sender: Address receiving the tokens
            payment: Lovelace sent along with the request

        Returns:
            MintReceipt with one Transfer log per minted token

        Raises:
            MintWindowClosed: Before the mint date
            MintingPaused: While the owner has paused minting
            QuantityOutOfRange: Quantity is 0 or above max_mint_amount
            SupplyExceeded: The mint would pass max_supply
            InsufficientPayment: Payment below cost * quantity
        """
        recipient = identity_of(sender)

        if not self.is_mint_open():
            raise self._rejected(
                MintWindowClosed(f"minting opens in {self.get_seconds_until_minting()}s")
            )
        if self._is_paused:
            raise self._rejected(MintingPaused())
        if quantity < 1 or quantity > self._max_mint_amount:
            raise self._rejected(
                QuantityOutOfRange(f"mint amount must be between 1 and {self._max_mint_amount}, got {quantity}")
            )
        if self.total_supply + quantity > self._max_supply:
            raise self._rejected(
                SupplyExceeded(f"only {self._max_supply - self.total_supply} tokens left")
            )
        required = self._cost * quantity
        if payment < required:
            raise self._rejected(InsufficientPayment(f"required {required} lovelace, got {payment}"))

        first_id = self.total_supply + 1
        token_ids = list(range(first_id, first_id + quantity))
        self._token_owners.extend([recipient] * quantity)
        self._treasury += payment

        logger.info(f"Minted tokens {token_ids} to {recipient} for {payment} lovelace")

        return MintReceipt(
            sender=recipient,
            payment=payment,
            token_ids=token_ids,
            logs=[Transfer(None, recipient, token_id) for token_id in token_ids],
        )

    # ============================================================================
    # Owner-only setters
    # ============================================================================

    def set_cost(self, amount: int, caller: Identity) -> None:
        self._only_owner(caller)
        if amount < 0:
            raise ValueError("cost cannot be negative")
        self._cost = amount
        logger.info(f"Cost set to {amount} lovelace")

    def set_is_paused(self, paused: bool, caller: Identity) -> None:
        self._only_owner(caller)
        self._is_paused = bool(paused)
        logger.info(f"Pause state set to {self._is_paused}")

    def set_is_revealed(self, revealed: bool, caller: Identity) -> None:
        self._only_owner(caller)
        self._is_revealed = bool(revealed)
        logger.info(f"Reveal state set to {self._is_revealed}")

    def set_max_mint_amount(self, amount: int, caller: Identity) -> None:
        self._only_owner(caller)
        if amount < 1:
            raise ValueError("max mint amount must be at least 1")
        self._max_mint_amount = amount
        logger.info(f"Max mint amount set to {amount}")

    def set_not_revealed_uri(self, uri: str, caller: Identity) -> None:
        self._only_owner(caller)
        self._not_revealed_uri = uri
        logger.info(f"Not revealed URI set to {uri}")

    def set_base_uri(self, uri: str, caller: Identity) -> None:
        self._only_owner(caller)
        self._base_uri = uri
        logger.info(f"Base URI set to {uri}")

    def set_base_extension(self, extension: str, caller: Identity) -> None:
        self._only_owner(caller)
        self._base_extension = extension
        logger.info(f"Base extension set to {extension}")

    def withdraw(self, caller: Identity) -> int:
        """
        Pay out the treasury to the owner

        Returns:
            Lovelace withdrawn
        """
        self._only_owner(caller)
        amount = self._treasury
        self._treasury = 0
        logger.info(f"Withdrew {amount} lovelace to {self._owner}")
        return amount

    def transfer_ownership(self, new_owner: Identity, caller: Identity) -> None:
        self._only_owner(caller)
        previous = self._owner
        self._owner = identity_of(new_owner)
        logger.info(f"Ownership transferred from {previous} to {self._owner}")

    # ============================================================================
    # Snapshot
    # ============================================================================

    def to_datum(self) -> DatumCollection:
        """Capture the full ledger state as an on-chain datum"""
        return DatumCollection(
            name=self._name.encode(),
            symbol=self._symbol.encode(),
            owner=self._owner.encode(),
            cost=self._cost,
            max_supply=self._max_supply,
            max_mint_amount=self._max_mint_amount,
            base_uri=self._base_uri.encode(),
            not_revealed_uri=self._not_revealed_uri.encode(),
            base_extension=self._base_extension.encode(),
            is_paused=to_bool_data(self._is_paused),
            is_revealed=to_bool_data(self._is_revealed),
            time_deployed=self._time_deployed,
            allow_minting_after=self._allow_minting_after,
            treasury=self._treasury,
            token_owners=[token_owner.encode() for token_owner in self._token_owners],
        )

    @classmethod
    def from_datum(cls, datum: DatumCollection, clock=None) -> "TokenMintLedger":
        """
        Restore a ledger from a datum produced by to_datum

        Args:
            datum: Collection datum
            clock: Time source for the restored ledger

        Returns:
            Ledger with identical state, including the original deployment time
        """
        ledger = cls.__new__(cls)
        ledger._clock = clock or SystemClock()
        ledger._owner = datum.owner.decode()
        ledger._name = datum.name.decode()
        ledger._symbol = datum.symbol.decode()
        ledger._cost = datum.cost
        ledger._max_supply = datum.max_supply
        ledger._max_mint_amount = datum.max_mint_amount
        ledger._base_uri = datum.base_uri.decode()
        ledger._not_revealed_uri = datum.not_revealed_uri.decode()
        ledger._base_extension = datum.base_extension.decode()
        ledger._is_paused = from_bool_data(datum.is_paused)
        ledger._is_revealed = from_bool_data(datum.is_revealed)
        ledger._time_deployed = datum.time_deployed
        ledger._allow_minting_after = datum.allow_minting_after
        ledger._token_owners = [token_owner.decode() for token_owner in datum.token_owners]
        ledger._treasury = datum.treasury
        return ledger

    # ============================================================================
    # Internal checks
    # ============================================================================

    def _only_owner(self, caller: Identity) -> None:
        if identity_of(caller) != self._owner:
            raise self._rejected(Unauthorized())

    def _require_token(self, token_id: int) -> None:
        if not 1 <= token_id <= self.total_supply:
            raise self._rejected(TokenNotFound(f"token {token_id} does not exist"))

    def _rejected(self, error: LedgerError) -> LedgerError:
        logger.warning(f"{type(error).__name__}: {error}")
        return error
