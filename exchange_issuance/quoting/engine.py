"""Basket quoting engine.

Predicts the amounts an exchange issuance contract produces when it issues
or redeems a basket by swapping every component against WETH. Each public
method snapshots the basket composition once, then runs pure integer math
over that snapshot and the exchange's quotes:

- issue_set_for_exact_eth / issue_set_for_exact_token: exact input, basket out
- issue_exact_set_from_eth / issue_exact_set_from_token: exact basket, cost in
- redeem_exact_set_for_eth / redeem_exact_set_for_token: exact basket, proceeds out
"""

from __future__ import annotations

from functools import reduce

import structlog

from exchange_issuance.amm.base import ExchangeQuoteSource
from exchange_issuance.basket.composition import (
    BasketComponent,
    BasketCompositionSource,
    fetch_composition,
)
from exchange_issuance.config import DEFAULT_CONFIG, QuoterConfig
from exchange_issuance.errors import (
    ExcessiveInputError,
    InsufficientOutputError,
    InvalidInputsError,
)
from exchange_issuance.math.precise import min_value, precise_div, precise_mul
from exchange_issuance.models.types import normalize_address
from exchange_issuance.quoting.results import (
    ComponentLeg,
    IssueExactQuote,
    IssueQuote,
    RedeemQuote,
)

logger = structlog.get_logger()


def _require_positive(amount: int, name: str) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise TypeError(f"{name} must be int, got {type(amount).__name__}")
    if amount <= 0:
        raise InvalidInputsError(f"Invalid inputs: {name} must be positive, got {amount}")


class BasketQuoter:
    """Quotes issuance and redemption of baskets through an exchange.

    Args:
        exchange: Quote source for component <-> WETH swaps
        baskets: Source of basket components and per-unit quantities
        config: Quoter configuration (WETH address, native placeholder).
                Defaults to DEFAULT_CONFIG.
    """

    def __init__(
        self,
        exchange: ExchangeQuoteSource,
        baskets: BasketCompositionSource,
        config: QuoterConfig | None = None,
    ) -> None:
        self.exchange = exchange
        self.baskets = baskets
        self.config = config if config is not None else DEFAULT_CONFIG

    @property
    def weth(self) -> str:
        return normalize_address(self.config.weth)

    def _active_components(self, basket: str) -> tuple[BasketComponent, ...]:
        return fetch_composition(self.baskets, basket).validate()

    # --- Core algorithms ---

    def _issue_for_eth(
        self, components: tuple[BasketComponent, ...], amount_eth: int
    ) -> tuple[int, tuple[ComponentLeg, ...]]:
        """Maximum basket amount amount_eth buys when split across components.

        WETH is split in proportion to each component's cost for one whole
        basket unit. The basket amount is limited by the component that
        buys the fewest basket units with its share.
        """
        weth = self.weth
        unit_costs = [self.exchange.quote_amount_in(c.unit, weth, c.token) for c in components]
        total_unit_cost = sum(unit_costs)

        candidates = []
        legs = []
        for component, unit_cost in zip(components, unit_costs):
            eth_share = amount_eth * unit_cost // total_unit_cost
            component_out = self.exchange.quote_amount_out(eth_share, weth, component.token)
            candidates.append(precise_div(component_out, component.unit))
            legs.append(
                ComponentLeg(
                    token=component.token,
                    unit=component.unit,
                    eth_amount=eth_share,
                    component_amount=component_out,
                )
            )

        return reduce(min_value, candidates), tuple(legs)

    def _eth_cost_for_set(
        self, components: tuple[BasketComponent, ...], amount_set: int
    ) -> tuple[int, tuple[ComponentLeg, ...]]:
        """WETH needed to buy every component of amount_set basket tokens."""
        weth = self.weth
        total = 0
        legs = []
        for component in components:
            required = precise_mul(amount_set, component.unit)
            eth_cost = self.exchange.quote_amount_in(required, weth, component.token)
            total += eth_cost
            legs.append(
                ComponentLeg(
                    token=component.token,
                    unit=component.unit,
                    eth_amount=eth_cost,
                    component_amount=required,
                )
            )
        return total, tuple(legs)

    def _eth_proceeds_for_set(
        self, components: tuple[BasketComponent, ...], amount_set: int
    ) -> tuple[int, tuple[ComponentLeg, ...]]:
        """WETH received for selling every component of amount_set basket tokens."""
        weth = self.weth
        total = 0
        legs = []
        for component in components:
            released = precise_mul(amount_set, component.unit)
            eth_out = self.exchange.quote_amount_out(released, component.token, weth)
            total += eth_out
            legs.append(
                ComponentLeg(
                    token=component.token,
                    unit=component.unit,
                    eth_amount=eth_out,
                    component_amount=released,
                )
            )
        return total, tuple(legs)

    def _to_eth(self, token: str, amount: int) -> int:
        if self.config.is_native(token):
            return amount
        return self.exchange.quote_amount_out(amount, token, self.weth)

    def _from_eth(self, token: str, amount_eth: int) -> int:
        if self.config.is_native(token):
            return amount_eth
        return self.exchange.quote_amount_out(amount_eth, self.weth, token)

    # --- Issuance ---

    def issue_set_for_exact_eth(
        self, basket: str, amount_eth_in: int, min_set_receive: int = 0
    ) -> IssueQuote:
        """Basket tokens issued for exactly amount_eth_in of ETH.

        Raises:
            InvalidInputsError: If amount_eth_in is not positive
            InvalidCompositionError: If the basket cannot be quoted
            QuoteUnavailableError: If a component cannot be priced
            InsufficientOutputError: If the result is below min_set_receive
        """
        return self._issue_set_for_exact_input(
            basket, self.config.eth_placeholder, amount_eth_in, min_set_receive
        )

    def issue_set_for_exact_token(
        self, basket: str, input_token: str, amount_input: int, min_set_receive: int = 0
    ) -> IssueQuote:
        """Basket tokens issued for exactly amount_input of input_token.

        The input is first swapped to WETH, then split as in
        issue_set_for_exact_eth. WETH input skips the swap.
        """
        return self._issue_set_for_exact_input(basket, input_token, amount_input, min_set_receive)

    def _issue_set_for_exact_input(
        self, basket: str, input_token: str, amount_input: int, min_set_receive: int
    ) -> IssueQuote:
        _require_positive(amount_input, "amount_input")
        components = self._active_components(basket)

        amount_eth = self._to_eth(input_token, amount_input)
        amount_set, legs = self._issue_for_eth(components, amount_eth)

        if amount_set < min_set_receive:
            raise InsufficientOutputError(
                f"Insufficient output amount: {amount_set} < min {min_set_receive}"
            )

        logger.debug(
            "issue_quote_computed",
            basket=normalize_address(basket),
            input_token=normalize_address(input_token),
            amount_input=amount_input,
            amount_eth=amount_eth,
            amount_set=amount_set,
        )
        return IssueQuote(
            basket=normalize_address(basket),
            input_token=normalize_address(input_token),
            amount_input=amount_input,
            amount_eth=amount_eth,
            amount_set=amount_set,
            legs=legs,
        )

    def issue_exact_set_from_eth(
        self, basket: str, amount_set: int, max_eth_in: int | None = None
    ) -> IssueExactQuote:
        """ETH cost of issuing exactly amount_set basket tokens.

        When max_eth_in is given, the quote carries the refund the caller
        gets back (max_eth_in - cost).

        Raises:
            InvalidInputsError: If amount_set or max_eth_in is not positive
            ExcessiveInputError: If the cost exceeds max_eth_in
        """
        _require_positive(amount_set, "amount_set")
        if max_eth_in is not None:
            _require_positive(max_eth_in, "max_eth_in")
        components = self._active_components(basket)

        cost, legs = self._eth_cost_for_set(components, amount_set)
        refund = None
        if max_eth_in is not None:
            refund = self._refund(max_eth_in, cost)

        logger.debug(
            "issue_exact_quote_computed",
            basket=normalize_address(basket),
            amount_set=amount_set,
            amount_eth_cost=cost,
            refund=refund,
        )
        return IssueExactQuote(
            basket=normalize_address(basket),
            input_token=normalize_address(self.config.eth_placeholder),
            amount_set=amount_set,
            amount_eth_cost=cost,
            max_amount_input=max_eth_in,
            max_eth_value=max_eth_in,
            refund=refund,
            legs=legs,
        )

    def issue_exact_set_from_token(
        self, basket: str, input_token: str, amount_set: int, max_amount_input: int
    ) -> IssueExactQuote:
        """Cost and ETH refund for issuing exactly amount_set from input_token.

        The contract swaps all of max_amount_input to WETH, buys the
        components and refunds the leftover WETH as ETH.

        Raises:
            InvalidInputsError: If amount_set or max_amount_input is not positive
            ExcessiveInputError: If the input's WETH value does not cover the cost
        """
        _require_positive(amount_set, "amount_set")
        _require_positive(max_amount_input, "max_amount_input")
        components = self._active_components(basket)

        max_eth_value = self._to_eth(input_token, max_amount_input)
        cost, legs = self._eth_cost_for_set(components, amount_set)
        refund = self._refund(max_eth_value, cost)

        logger.debug(
            "issue_exact_quote_computed",
            basket=normalize_address(basket),
            input_token=normalize_address(input_token),
            amount_set=amount_set,
            amount_eth_cost=cost,
            refund=refund,
        )
        return IssueExactQuote(
            basket=normalize_address(basket),
            input_token=normalize_address(input_token),
            amount_set=amount_set,
            amount_eth_cost=cost,
            max_amount_input=max_amount_input,
            max_eth_value=max_eth_value,
            refund=refund,
            legs=legs,
        )

    @staticmethod
    def _refund(max_eth_value: int, cost: int) -> int:
        if cost > max_eth_value:
            raise ExcessiveInputError(
                f"Insufficient input amount: cost {cost} exceeds max {max_eth_value}"
            )
        return max_eth_value - cost

    # --- Redemption ---

    def redeem_exact_set_for_eth(
        self, basket: str, amount_set: int, min_eth_receive: int = 0
    ) -> RedeemQuote:
        """ETH received for redeeming exactly amount_set basket tokens.

        Raises:
            InvalidInputsError: If amount_set is not positive
            InsufficientOutputError: If the proceeds are below min_eth_receive
        """
        return self._redeem_exact_set(
            basket, self.config.eth_placeholder, amount_set, min_eth_receive
        )

    def redeem_exact_set_for_token(
        self, basket: str, output_token: str, amount_set: int, min_output_receive: int = 0
    ) -> RedeemQuote:
        """output_token received for redeeming exactly amount_set basket tokens.

        Component proceeds are summed in WETH and then swapped once to
        output_token. WETH output skips the final swap.
        """
        return self._redeem_exact_set(basket, output_token, amount_set, min_output_receive)

    def _redeem_exact_set(
        self, basket: str, output_token: str, amount_set: int, min_output_receive: int
    ) -> RedeemQuote:
        _require_positive(amount_set, "amount_set")
        components = self._active_components(basket)

        amount_eth, legs = self._eth_proceeds_for_set(components, amount_set)
        amount_output = self._from_eth(output_token, amount_eth)

        if amount_output < min_output_receive:
            raise InsufficientOutputError(
                f"Insufficient output amount: {amount_output} < min {min_output_receive}"
            )

        logger.debug(
            "redeem_quote_computed",
            basket=normalize_address(basket),
            output_token=normalize_address(output_token),
            amount_set=amount_set,
            amount_eth=amount_eth,
            amount_output=amount_output,
        )
        return RedeemQuote(
            basket=normalize_address(basket),
            output_token=normalize_address(output_token),
            amount_set=amount_set,
            amount_eth=amount_eth,
            amount_output=amount_output,
            legs=legs,
        )
