"""Quote result types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentLeg:
    """One component's share of a quote.

    Attributes:
        token: Component token address
        unit: Per-unit quantity used for this quote
        eth_amount: WETH spent on (issue) or received for (redeem) the component
        component_amount: Component amount bought (issue) or sold (redeem)
    """

    token: str
    unit: int
    eth_amount: int
    component_amount: int


@dataclass(frozen=True)
class IssueQuote:
    """Basket tokens obtainable for an exact input.

    amount_eth is the WETH value of the input after any token -> WETH swap;
    for native input it equals amount_input.
    """

    basket: str
    input_token: str
    amount_input: int
    amount_eth: int
    amount_set: int
    legs: tuple[ComponentLeg, ...] = ()


@dataclass(frozen=True)
class IssueExactQuote:
    """Cost of issuing an exact basket amount.

    Attributes:
        amount_eth_cost: WETH needed to buy every component
        max_eth_value: WETH value of the caller's maximum input, if one was given
        refund: max_eth_value - amount_eth_cost, returned to the caller as ETH
    """

    basket: str
    input_token: str
    amount_set: int
    amount_eth_cost: int
    max_amount_input: int | None = None
    max_eth_value: int | None = None
    refund: int | None = None
    legs: tuple[ComponentLeg, ...] = ()


@dataclass(frozen=True)
class RedeemQuote:
    """Output received for redeeming an exact basket amount.

    amount_eth is the WETH proceeds from selling every component;
    amount_output is the same value expressed in output_token.
    """

    basket: str
    output_token: str
    amount_set: int
    amount_eth: int
    amount_output: int
    legs: tuple[ComponentLeg, ...] = ()
