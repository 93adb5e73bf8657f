"""UniswapV2 AMM implementation.

UniswapV2 uses the constant product formula: x * y = k
With a 0.3% fee on input amounts (forks such as Sushiswap use the same
formula, some with a different fee).
"""

from __future__ import annotations

from dataclasses import dataclass

from exchange_issuance.amm.base import AMM
from exchange_issuance.constants import DEFAULT_FEE_BPS, FEE_DENOMINATOR
from exchange_issuance.errors import QuoteUnavailableError
from exchange_issuance.models.types import normalize_address


@dataclass
class UniswapV2Pool:
    """Represents a UniswapV2 liquidity pool."""

    token0: str
    token1: str
    reserve0: int
    reserve1: int
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = DEFAULT_FEE_BPS
    address: str | None = None

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for AMM math (10000 - fee_bps).

        For 30 bps (0.3%), this returns 9970.
        Used in the formula: amount_in_with_fee = amount_in * fee_multiplier / 10000
        """
        return FEE_DENOMINATOR - self.fee_bps

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == normalize_address(self.token0):
            return self.reserve0, self.reserve1
        elif token_in_norm == normalize_address(self.token1):
            return self.reserve1, self.reserve0
        else:
            raise ValueError(f"Token {token_in} not in pool")

    def get_token_out(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == normalize_address(self.token0):
            return self.token1
        elif token_in_norm == normalize_address(self.token1):
            return self.token0
        else:
            raise ValueError(f"Token {token_in} not in pool")


def make_pool(
    token_a: str,
    token_b: str,
    reserve_a: int,
    reserve_b: int,
    fee_bps: int = DEFAULT_FEE_BPS,
    address: str | None = None,
) -> UniswapV2Pool:
    """Build a pool in canonical token order (UniswapV2 sorts by address bytes)."""
    token0 = normalize_address(token_a)
    token1 = normalize_address(token_b)
    if token0 == token1:
        raise ValueError(f"Pool tokens must differ, got {token_a} twice")
    if not 0 <= fee_bps < FEE_DENOMINATOR:
        raise ValueError(f"fee_bps must be in [0, {FEE_DENOMINATOR}), got {fee_bps}")

    reserve0, reserve1 = reserve_a, reserve_b
    if bytes.fromhex(token0[2:]) > bytes.fromhex(token1[2:]):
        token0, token1 = token1, token0
        reserve0, reserve1 = reserve1, reserve0

    return UniswapV2Pool(
        token0=token0,
        token1=token1,
        reserve0=reserve0,
        reserve1=reserve1,
        fee_bps=fee_bps,
        address=normalize_address(address) if address else None,
    )


class UniswapV2(AMM):
    """UniswapV2 AMM math, matching UniswapV2Library.getAmountOut/getAmountIn.

    Formula: amount_out = (amount_in * 997 * reserve_out) / (reserve_in * 1000 + amount_in * 997)

    The 997/1000 factor accounts for the 0.3% fee. Where the library reverts,
    these methods raise QuoteUnavailableError.
    """

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = 9970,
    ) -> int:
        """Calculate output amount using constant product formula.

        Formula: amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)

        Raises:
            QuoteUnavailableError: If amount_in is zero or a reserve is empty
        """
        if amount_in <= 0:
            raise QuoteUnavailableError(f"Insufficient input amount: {amount_in}")
        if reserve_in <= 0 or reserve_out <= 0:
            raise QuoteUnavailableError(
                f"Insufficient liquidity: reserves ({reserve_in}, {reserve_out})"
            )

        amount_in_with_fee = amount_in * fee_multiplier
        numerator = amount_in_with_fee * reserve_out
        denominator = reserve_in * FEE_DENOMINATOR + amount_in_with_fee

        return numerator // denominator

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = 9970,
    ) -> int:
        """Calculate required input for desired output.

        Formula: amount_in = (res_in * out * 10000) / ((res_out - out) * fee) + 1

        Raises:
            QuoteUnavailableError: If amount_out is zero, a reserve is empty,
                or amount_out would drain the output reserve
        """
        if amount_out <= 0:
            raise QuoteUnavailableError(f"Insufficient output amount: {amount_out}")
        if reserve_in <= 0 or reserve_out <= 0:
            raise QuoteUnavailableError(
                f"Insufficient liquidity: reserves ({reserve_in}, {reserve_out})"
            )
        if amount_out >= reserve_out:
            raise QuoteUnavailableError(
                f"Insufficient liquidity: {amount_out} out of reserve {reserve_out}"
            )

        numerator = reserve_in * amount_out * FEE_DENOMINATOR
        denominator = (reserve_out - amount_out) * fee_multiplier

        return numerator // denominator + 1

    def quote_exact_input(self, pool: UniswapV2Pool, token_in: str, amount_in: int) -> int:
        """Output of a swap through pool for exactly amount_in of token_in."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        return self.get_amount_out(amount_in, reserve_in, reserve_out, pool.fee_multiplier)

    def quote_exact_output(self, pool: UniswapV2Pool, token_in: str, amount_out: int) -> int:
        """Input of token_in a swap through pool needs to return exactly amount_out."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        return self.get_amount_in(amount_out, reserve_in, reserve_out, pool.fee_multiplier)


# Singleton instance
uniswap_v2 = UniswapV2()


__all__ = [
    "UniswapV2Pool",
    "UniswapV2",
    "make_pool",
    "uniswap_v2",
]
