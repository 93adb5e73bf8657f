"""Exchange Issuance quoter - off-chain prediction of basket issuance and redemption."""

from exchange_issuance.amm import BestPriceQuoter, ConstantProductQuoter, ExchangeQuoteSource
from exchange_issuance.basket import BasketCompositionSource, StaticBasketSource
from exchange_issuance.config import DEFAULT_CONFIG, QuoterConfig
from exchange_issuance.models.snapshot import IssuanceSnapshot
from exchange_issuance.quoting import BasketQuoter, IssueExactQuote, IssueQuote, RedeemQuote

__version__ = "0.1.0"
__all__ = [
    "BasketQuoter",
    "IssueQuote",
    "IssueExactQuote",
    "RedeemQuote",
    "ExchangeQuoteSource",
    "ConstantProductQuoter",
    "BestPriceQuoter",
    "BasketCompositionSource",
    "StaticBasketSource",
    "IssuanceSnapshot",
    "QuoterConfig",
    "DEFAULT_CONFIG",
    "__version__",
]
