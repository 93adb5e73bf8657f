"""Basket composition snapshots and sources."""

from exchange_issuance.basket.composition import (
    BasketComponent,
    BasketComposition,
    BasketCompositionSource,
    StaticBasketSource,
    fetch_composition,
)

__all__ = [
    "BasketComponent",
    "BasketComposition",
    "BasketCompositionSource",
    "StaticBasketSource",
    "fetch_composition",
]
