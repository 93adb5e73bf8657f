"""Pydantic models for already-fetched on-chain state.

An IssuanceSnapshot holds everything a quote reads: basket compositions
(SetToken.getComponents / getDefaultPositionRealUnit) and the reserves of
every WETH pair on each venue (UniswapV2Pair.getReserves). Quoting from a
snapshot never touches the network, so every step of a quote sees the same
state.
"""

from __future__ import annotations

from dataclasses import replace

from pydantic import BaseModel, Field, field_validator, model_validator

from exchange_issuance.amm.quoters import BestPriceQuoter, ConstantProductQuoter
from exchange_issuance.amm.uniswap_v2 import make_pool
from exchange_issuance.basket.composition import StaticBasketSource
from exchange_issuance.config import DEFAULT_CONFIG, QuoterConfig
from exchange_issuance.constants import FEE_DENOMINATOR, WETH
from exchange_issuance.models.types import Address, Int256, Uint256, normalize_address


class ComponentPosition(BaseModel):
    """A component and its default position real unit.

    Units are signed on-chain (int256); negative values are rejected later
    by the quoting engine as external positions.
    """

    token: Address
    unit: Int256


class BasketState(BaseModel):
    """Basket token address and its ordered components."""

    address: Address
    components: list[ComponentPosition] = Field(default_factory=list)


class PairState(BaseModel):
    """Reserves of a constant-product pair."""

    token0: Address
    token1: Address
    reserve0: Uint256
    reserve1: Uint256
    # None means the snapshot omitted the fee; the quoter config supplies it
    fee_bps: int | None = Field(default=None, alias="feeBps", ge=0, lt=FEE_DENOMINATOR)
    address: Address | None = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def check_distinct_tokens(self) -> PairState:
        if normalize_address(self.token0) == normalize_address(self.token1):
            raise ValueError(f"Pair tokens must differ, got {self.token0} twice")
        return self


class VenueState(BaseModel):
    """All pairs of one exchange venue."""

    name: str
    pairs: list[PairState] = Field(default_factory=list)


class IssuanceSnapshot(BaseModel):
    """Everything needed to quote baskets without further RPC calls."""

    weth: Address = WETH
    baskets: list[BasketState] = Field(default_factory=list)
    venues: list[VenueState] = Field(default_factory=list)

    @field_validator("venues")
    @classmethod
    def require_unique_venue_names(cls, venues: list[VenueState]) -> list[VenueState]:
        names = [v.name for v in venues]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate venue names: {names}")
        return venues

    def config(self, base: QuoterConfig | None = None) -> QuoterConfig:
        """Quoter config using this snapshot's WETH address.

        Every other field (placeholder, default fee) comes from base.
        """
        base = base if base is not None else DEFAULT_CONFIG
        return replace(base, weth=normalize_address(self.weth))

    def basket_source(self) -> StaticBasketSource:
        """Composition source over the snapshot's baskets."""
        return StaticBasketSource(
            {b.address: [(c.token, c.unit) for c in b.components] for b in self.baskets}
        )

    def venue_quoters(self, config: QuoterConfig | None = None) -> list[ConstantProductQuoter]:
        """One constant-product quoter per venue, in snapshot order.

        Pairs without a feeBps use config.default_fee_bps.
        """
        config = config if config is not None else DEFAULT_CONFIG
        return [
            ConstantProductQuoter(
                name=venue.name,
                pools=[
                    make_pool(
                        pair.token0,
                        pair.token1,
                        pair.reserve0,
                        pair.reserve1,
                        fee_bps=pair.fee_bps if pair.fee_bps is not None else config.default_fee_bps,
                        address=pair.address,
                    )
                    for pair in venue.pairs
                ],
            )
            for venue in self.venues
        ]

    def exchange(self, config: QuoterConfig | None = None) -> BestPriceQuoter:
        """Best-price quote source across every venue in the snapshot.

        Raises:
            ValueError: If the snapshot has no venues
        """
        return BestPriceQuoter(self.venue_quoters(config))
