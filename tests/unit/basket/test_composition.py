"""Tests for basket composition snapshots."""

import pytest

from exchange_issuance.basket import (
    BasketComponent,
    BasketComposition,
    BasketCompositionSource,
    StaticBasketSource,
    fetch_composition,
)
from exchange_issuance.errors import InvalidCompositionError
from tests.helpers import BASKET, DAI, DAI_UNIT, WBTC, WBTC_UNIT, make_basket_source


class CountingSource:
    """Composition source that counts reads."""

    def __init__(self) -> None:
        self.reads = 0

    def get_components(self, basket):
        self.reads += 1
        return [DAI, WBTC]

    def get_per_unit_quantity(self, basket, component):
        self.reads += 1
        return DAI_UNIT if component == DAI else WBTC_UNIT


class TestStaticBasketSource:
    """Tests for the in-memory composition source."""

    def test_satisfies_protocol(self):
        assert isinstance(StaticBasketSource(), BasketCompositionSource)

    def test_components_in_order(self, basket_source):
        assert list(basket_source.get_components(BASKET)) == [DAI, WBTC]

    def test_per_unit_quantity(self, basket_source):
        assert basket_source.get_per_unit_quantity(BASKET, DAI) == DAI_UNIT
        assert basket_source.get_per_unit_quantity(BASKET, WBTC) == WBTC_UNIT

    def test_unknown_component_is_zero(self, basket_source):
        assert basket_source.get_per_unit_quantity(BASKET, "0x" + "22" * 20) == 0

    def test_lookup_is_case_insensitive(self, basket_source):
        assert list(basket_source.get_components(BASKET.upper().replace("0X", "0x"))) == [DAI, WBTC]

    def test_unknown_basket_raises(self, basket_source):
        with pytest.raises(InvalidCompositionError, match="Unknown basket"):
            basket_source.get_components("0x" + "33" * 20)


class TestFetchComposition:
    """Tests for snapshotting a source."""

    def test_snapshot_contents(self, basket_source):
        composition = fetch_composition(basket_source, BASKET)
        assert composition.basket == BASKET
        assert composition.components == (
            BasketComponent(token=DAI, unit=DAI_UNIT),
            BasketComponent(token=WBTC, unit=WBTC_UNIT),
        )

    def test_reads_source_once_per_snapshot(self):
        source = CountingSource()
        fetch_composition(source, BASKET)
        # One getComponents plus one unit per component
        assert source.reads == 3

    def test_snapshot_is_immutable(self, basket_source):
        composition = fetch_composition(basket_source, BASKET)
        with pytest.raises(AttributeError):
            composition.components = ()  # type: ignore[misc]


class TestValidate:
    """Tests for composition validation."""

    def test_returns_active_components(self, basket_source):
        active = fetch_composition(basket_source, BASKET).validate()
        assert [c.token for c in active] == [DAI, WBTC]

    def test_skips_zero_units(self):
        source = make_basket_source(positions=[(DAI, 0), (WBTC, WBTC_UNIT)])
        active = fetch_composition(source, BASKET).validate()
        assert active == (BasketComponent(token=WBTC, unit=WBTC_UNIT),)

    def test_empty_basket_raises(self):
        composition = BasketComposition(basket=BASKET, components=())
        with pytest.raises(InvalidCompositionError):
            composition.validate()

    def test_all_zero_units_raises(self):
        source = make_basket_source(positions=[(DAI, 0), (WBTC, 0)])
        with pytest.raises(InvalidCompositionError):
            fetch_composition(source, BASKET).validate()

    def test_external_position_raises(self):
        source = make_basket_source(positions=[(DAI, DAI_UNIT), (WBTC, -1)])
        with pytest.raises(InvalidCompositionError) as exc_info:
            fetch_composition(source, BASKET).validate()
        assert "External positions" in str(exc_info.value)
