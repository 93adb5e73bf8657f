"""Base classes for AMM math and exchange quote sources."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class AMM(ABC):
    """Abstract base class for AMM pricing math.

    Implementations may extend the base method signatures with additional
    optional parameters. For example, UniswapV2 adds a fee_multiplier
    parameter to support pools with different fee tiers.
    """

    @abstractmethod
    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate output amount for a given input.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount
        """
        ...

    @abstractmethod
    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate required input for a desired output.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount
        """
        ...


@runtime_checkable
class ExchangeQuoteSource(Protocol):
    """Protocol for exchange quote providers.

    The quoting engine treats implementations as opaque oracles: fee
    deduction and rounding are defined here, not by the caller. Both methods
    raise QuoteUnavailableError when the pair cannot be priced.
    """

    def quote_amount_out(self, amount_in: int, token_in: str, token_out: str) -> int:
        """Amount of token_out received for exactly amount_in of token_in."""
        ...

    def quote_amount_in(self, amount_out: int, token_in: str, token_out: str) -> int:
        """Amount of token_in required to receive exactly amount_out of token_out."""
        ...
