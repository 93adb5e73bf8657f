"""Test helpers module for shared test utilities.

- constants: Token addresses, basket addresses and common amounts
- factories: Mock exchange, basket source and venue factories
"""

from tests.helpers.constants import (
    BASKET,
    DAI,
    DAI_UNIT,
    EMPTY_BASKET,
    ETH,
    UNIT,
    USDC,
    WBTC,
    WBTC_UNIT,
    WETH,
    ether,
)
from tests.helpers.factories import (
    MockExchange,
    make_basket_source,
    make_mock_exchange,
    make_uniswap_venue,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "ETH",
    "BASKET",
    "EMPTY_BASKET",
    "UNIT",
    "DAI_UNIT",
    "WBTC_UNIT",
    "ether",
    # Factories
    "MockExchange",
    "make_mock_exchange",
    "make_basket_source",
    "make_uniswap_venue",
]
