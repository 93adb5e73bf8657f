"""Basket quoting engine and result types."""

from exchange_issuance.quoting.engine import BasketQuoter
from exchange_issuance.quoting.results import (
    ComponentLeg,
    IssueExactQuote,
    IssueQuote,
    RedeemQuote,
)

__all__ = [
    "BasketQuoter",
    "ComponentLeg",
    "IssueQuote",
    "IssueExactQuote",
    "RedeemQuote",
]
