"""Error classes for exchange issuance quoting.

Quote failures are atomic: an operation either returns a full result or
raises one of these. Nothing here is caught inside the quoting engine.
"""


class IssuanceError(Exception):
    """Base error for issuance quoting."""

    pass


class QuoteMathError(IssuanceError, ArithmeticError):
    """Base class for fixed-point arithmetic errors."""

    pass


class DivisionByZero(QuoteMathError):
    """Division by zero in a fixed-point operation."""

    pass


class InvalidInputsError(IssuanceError, ValueError):
    """An input, output or basket amount is zero or negative.

    Mirrors the contract revert "ExchangeIssuance: INVALID INPUTS".
    """

    pass


class InvalidCompositionError(IssuanceError):
    """Basket cannot be quoted: unknown basket, no non-zero unit, or an external position."""

    pass


class QuoteUnavailableError(IssuanceError):
    """The exchange cannot price the requested pair (missing pool, no liquidity)."""

    def __init__(self, message: str, token_in: str | None = None, token_out: str | None = None):
        super().__init__(message)
        self.token_in = token_in
        self.token_out = token_out


class SlippageError(IssuanceError):
    """Quoted amount falls outside the caller's bound."""

    pass


class InsufficientOutputError(SlippageError):
    """Quoted output is below the caller's minimum."""

    pass


class ExcessiveInputError(SlippageError):
    """Quoted cost exceeds the caller's maximum input."""

    pass
