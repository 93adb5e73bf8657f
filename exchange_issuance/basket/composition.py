"""Basket (Set token) composition snapshots and sources.

A composition is read once per quote and never mutated, so every step of a
quote sees the same units even when the source is backed by live RPC calls.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import structlog

from exchange_issuance.errors import InvalidCompositionError
from exchange_issuance.models.types import normalize_address

logger = structlog.get_logger()


@dataclass(frozen=True)
class BasketComponent:
    """One basket component and its default position real unit.

    Attributes:
        token: Component token address (lowercase)
        unit: Raw component amount held per 1e18 basket units
    """

    token: str
    unit: int


@dataclass(frozen=True)
class BasketComposition:
    """Immutable snapshot of a basket's components, in on-chain order."""

    basket: str
    components: tuple[BasketComponent, ...]

    @property
    def active_components(self) -> tuple[BasketComponent, ...]:
        """Components with a non-zero unit, order preserved."""
        return tuple(c for c in self.components if c.unit != 0)

    def validate(self) -> tuple[BasketComponent, ...]:
        """Check the basket can be quoted and return its active components.

        Zero-unit components are skipped. Negative units are external
        positions, which exchange issuance does not support.

        Raises:
            InvalidCompositionError: If the basket has no components, an
                external position, or no component with a non-zero unit
        """
        if not self.components:
            raise InvalidCompositionError(f"Basket {self.basket} has no components")

        for component in self.components:
            if component.unit < 0:
                raise InvalidCompositionError(
                    f"External positions not allowed: {component.token} has unit {component.unit}"
                )

        active = self.active_components
        if not active:
            raise InvalidCompositionError(f"Basket {self.basket} has no component with a non-zero unit")

        if len(active) < len(self.components):
            logger.warning(
                "zero_unit_components_skipped",
                basket=self.basket,
                skipped=[c.token for c in self.components if c.unit == 0],
            )
        return active


@runtime_checkable
class BasketCompositionSource(Protocol):
    """Protocol for reading basket composition (e.g. SetToken view calls)."""

    def get_components(self, basket: str) -> Sequence[str]:
        """Ordered component addresses of basket."""
        ...

    def get_per_unit_quantity(self, basket: str, component: str) -> int:
        """Default position real unit of component in basket."""
        ...


class StaticBasketSource:
    """In-memory composition source keyed by basket address.

    Args:
        baskets: Mapping of basket address to ordered (token, unit) pairs
    """

    def __init__(self, baskets: Mapping[str, Sequence[tuple[str, int]]] | None = None) -> None:
        self._baskets: dict[str, tuple[BasketComponent, ...]] = {}
        if baskets:
            for basket, positions in baskets.items():
                self.set_basket(basket, positions)

    def set_basket(self, basket: str, positions: Sequence[tuple[str, int]]) -> None:
        """Register (or replace) a basket's components."""
        self._baskets[normalize_address(basket)] = tuple(
            BasketComponent(token=normalize_address(token), unit=unit) for token, unit in positions
        )

    def _lookup(self, basket: str) -> tuple[BasketComponent, ...]:
        basket_norm = normalize_address(basket)
        if basket_norm not in self._baskets:
            raise InvalidCompositionError(f"Unknown basket: {basket}")
        return self._baskets[basket_norm]

    def get_components(self, basket: str) -> Sequence[str]:
        """Ordered component addresses.

        Raises:
            InvalidCompositionError: If basket is not registered
        """
        return [c.token for c in self._lookup(basket)]

    def get_per_unit_quantity(self, basket: str, component: str) -> int:
        component_norm = normalize_address(component)
        for c in self._lookup(basket):
            if c.token == component_norm:
                return c.unit
        return 0


def fetch_composition(source: BasketCompositionSource, basket: str) -> BasketComposition:
    """Read a basket's components and units once into an immutable snapshot."""
    basket_norm = normalize_address(basket)
    components = tuple(
        BasketComponent(
            token=normalize_address(token),
            unit=source.get_per_unit_quantity(basket_norm, token),
        )
        for token in source.get_components(basket_norm)
    )
    return BasketComposition(basket=basket_norm, components=components)
