"""AMM math and exchange quote sources."""

from exchange_issuance.amm.base import AMM, ExchangeQuoteSource
from exchange_issuance.amm.quoters import BestPriceQuoter, ConstantProductQuoter
from exchange_issuance.amm.uniswap_v2 import UniswapV2, UniswapV2Pool, make_pool, uniswap_v2

__all__ = [
    # Base classes
    "AMM",
    "ExchangeQuoteSource",
    # UniswapV2
    "UniswapV2",
    "UniswapV2Pool",
    "make_pool",
    "uniswap_v2",
    # Quote sources
    "ConstantProductQuoter",
    "BestPriceQuoter",
]
