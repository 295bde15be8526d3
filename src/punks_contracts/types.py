from opshin.prelude import *


# Constants
DEFAULT_BASE_EXTENSION = b".json"
DEFAULT_MAX_MINT_AMOUNT = 1

@dataclass()
class DatumCollection(PlutusData):
    CONSTR_ID = 0
    name: bytes  # Collection name (utf-8)
    symbol: bytes  # Collection symbol (utf-8)
    owner: bytes  # Bech32 address of the collection owner (utf-8)
    cost: int  # Cost per token in lovelace
    max_supply: int  # Hard cap on minted tokens
    max_mint_amount: int  # Max tokens per mint call
    base_uri: bytes  # Metadata URI prefix, e.g. ipfs://CID/
    not_revealed_uri: bytes  # Placeholder URI served while unrevealed
    base_extension: bytes  # Suffix appended to revealed URIs
    is_paused: Union[TrueData, FalseData]
    is_revealed: Union[TrueData, FalseData]
    time_deployed: int  # POSIX seconds
    allow_minting_after: int  # Seconds from deployment until minting opens
    treasury: int  # Lovelace collected from mints and not yet withdrawn
    token_owners: List[bytes]  # Owner of token id i + 1 at index i


def to_bool_data(value: bool) -> Union[TrueData, FalseData]:
    if value:
        return TrueData()
    return FalseData()


def from_bool_data(value: Union[TrueData, FalseData]) -> bool:
    return isinstance(value, TrueData)
