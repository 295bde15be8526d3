"""
Ledger Errors

Rejection reasons raised by the mint ledger. Every failed operation raises
exactly one of these and leaves the ledger state untouched.
"""


class LedgerError(Exception):
    """Base class for all ledger rejections"""

    reason = "operation rejected"

    def __init__(self, message: str = None):
        super().__init__(message or self.reason)


class Unauthorized(LedgerError):
    """Caller is not the collection owner"""

    reason = "caller is not the owner"


class MintWindowClosed(LedgerError):
    """Minting attempted before the mint date"""

    reason = "minting not allowed yet"


class MintingPaused(LedgerError):
    reason = "minting is paused"


class QuantityOutOfRange(LedgerError):
    """Quantity is zero or above the batch limit"""

    reason = "mint amount out of range"


class SupplyExceeded(LedgerError):
    reason = "max supply exceeded"


class InsufficientPayment(LedgerError):
    reason = "insufficient payment"


class TokenNotFound(LedgerError):
    """Query for a token id that was never minted"""

    reason = "nonexistent token"
