"""Exchange quote sources backed by constant-product pools.

ConstantProductQuoter models one venue (a UniswapV2 router and its pairs).
BestPriceQuoter aggregates venues and, per request, picks the venue that
gives the most output for an exact input or asks the least input for an
exact output.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from exchange_issuance.amm.uniswap_v2 import UniswapV2, UniswapV2Pool, uniswap_v2
from exchange_issuance.errors import QuoteUnavailableError
from exchange_issuance.models.types import normalize_address

logger = structlog.get_logger()


class ConstantProductQuoter:
    """Direct-pair quotes over a registry of UniswapV2-style pools.

    Quotes follow the router's getAmountsOut/getAmountsIn for a two-token
    path [token_in, token_out].

    Args:
        name: Venue label used in logs (e.g. "uniswap", "sushiswap")
        pools: Initial pools. A later pool for the same pair replaces an earlier one.
        amm: AMM math implementation. Defaults to the UniswapV2 singleton.
    """

    def __init__(
        self,
        name: str = "uniswap",
        pools: Iterable[UniswapV2Pool] | None = None,
        amm: UniswapV2 | None = None,
    ) -> None:
        self.name = name
        self.amm = amm if amm is not None else uniswap_v2
        self._pools: dict[frozenset[str], UniswapV2Pool] = {}

        if pools:
            for pool in pools:
                self.add_pool(pool)

    def add_pool(self, pool: UniswapV2Pool) -> None:
        """Add a pool, replacing any existing pool for the same pair."""
        token0_norm = normalize_address(pool.token0)
        token1_norm = normalize_address(pool.token1)
        pair_key = frozenset([token0_norm, token1_norm])
        if pair_key in self._pools:
            logger.debug(
                "pool_replaced",
                venue=self.name,
                token0=token0_norm[-8:],
                token1=token1_norm[-8:],
            )
        self._pools[pair_key] = pool

    def get_pool(self, token_a: str, token_b: str) -> UniswapV2Pool | None:
        """Get the pool for a token pair (order independent), or None."""
        pair_key = frozenset([normalize_address(token_a), normalize_address(token_b)])
        return self._pools.get(pair_key)

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    def _require_pool(self, token_in: str, token_out: str) -> UniswapV2Pool:
        pool = self.get_pool(token_in, token_out)
        if pool is None:
            raise QuoteUnavailableError(
                f"No {self.name} pool for {token_in} -> {token_out}",
                token_in=token_in,
                token_out=token_out,
            )
        return pool

    def quote_amount_out(self, amount_in: int, token_in: str, token_out: str) -> int:
        pool = self._require_pool(token_in, token_out)
        try:
            return self.amm.quote_exact_input(pool, token_in, amount_in)
        except QuoteUnavailableError as err:
            raise QuoteUnavailableError(
                f"{self.name}: {err}", token_in=token_in, token_out=token_out
            ) from err

    def quote_amount_in(self, amount_out: int, token_in: str, token_out: str) -> int:
        pool = self._require_pool(token_in, token_out)
        try:
            return self.amm.quote_exact_output(pool, token_in, amount_out)
        except QuoteUnavailableError as err:
            raise QuoteUnavailableError(
                f"{self.name}: {err}", token_in=token_in, token_out=token_out
            ) from err


class BestPriceQuoter:
    """Best quote across several venues.

    quote_amount_out returns the largest output any venue offers and
    quote_amount_in the smallest input any venue asks. Venues that cannot
    price the pair are skipped; if none can, QuoteUnavailableError is raised.
    On ties the earlier venue wins.
    """

    def __init__(self, venues: Sequence[ConstantProductQuoter]) -> None:
        if not venues:
            raise ValueError("BestPriceQuoter requires at least one venue")
        self.venues = tuple(venues)

    def quote_amount_out(self, amount_in: int, token_in: str, token_out: str) -> int:
        best_output: int | None = None
        best_venue: str | None = None

        for venue in self.venues:
            try:
                output = venue.quote_amount_out(amount_in, token_in, token_out)
            except QuoteUnavailableError as err:
                logger.debug("venue_quote_unavailable", venue=venue.name, reason=str(err))
                continue
            if best_output is None or output > best_output:
                best_output = output
                best_venue = venue.name

        if best_output is None:
            raise QuoteUnavailableError(
                f"No venue can price {amount_in} {token_in} -> {token_out}",
                token_in=token_in,
                token_out=token_out,
            )

        logger.debug("best_amount_out", venue=best_venue, amount_in=amount_in, amount_out=best_output)
        return best_output

    def quote_amount_in(self, amount_out: int, token_in: str, token_out: str) -> int:
        best_input: int | None = None
        best_venue: str | None = None

        for venue in self.venues:
            try:
                required = venue.quote_amount_in(amount_out, token_in, token_out)
            except QuoteUnavailableError as err:
                logger.debug("venue_quote_unavailable", venue=venue.name, reason=str(err))
                continue
            if best_input is None or required < best_input:
                best_input = required
                best_venue = venue.name

        if best_input is None:
            raise QuoteUnavailableError(
                f"No venue can deliver {amount_out} {token_out} for {token_in}",
                token_in=token_in,
                token_out=token_out,
            )

        logger.debug("best_amount_in", venue=best_venue, amount_out=amount_out, amount_in=best_input)
        return best_input
