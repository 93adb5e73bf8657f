"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from exchange_issuance.amm.quoters import BestPriceQuoter
from exchange_issuance.basket.composition import StaticBasketSource
from exchange_issuance.models.snapshot import IssuanceSnapshot
from exchange_issuance.quoting import BasketQuoter
from tests.helpers import (
    MockExchange,
    make_basket_source,
    make_mock_exchange,
    make_uniswap_venue,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SNAPSHOTS_DIR = FIXTURES_DIR / "snapshots"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


def load_snapshot_fixture(name: str) -> IssuanceSnapshot:
    """Load a snapshot fixture by name (e.g. "dai_wbtc_basket")."""
    path = SNAPSHOTS_DIR / f"{name}.json"
    with open(path) as f:
        data = json.load(f)
    return IssuanceSnapshot.model_validate(data)


@pytest.fixture
def mock_exchange() -> MockExchange:
    """Mock exchange with fixed linear rates."""
    return make_mock_exchange()


@pytest.fixture
def basket_source() -> StaticBasketSource:
    """Source holding the 0.5 DAI + 1 WBTC basket."""
    return make_basket_source()


@pytest.fixture
def mock_quoter(mock_exchange: MockExchange, basket_source: StaticBasketSource) -> BasketQuoter:
    """Quoter over the mock exchange."""
    return BasketQuoter(exchange=mock_exchange, baskets=basket_source)


@pytest.fixture
def uniswap_quoter(basket_source: StaticBasketSource) -> BasketQuoter:
    """Quoter over constant-product pools seeded like the contract tests."""
    return BasketQuoter(
        exchange=BestPriceQuoter([make_uniswap_venue()]),
        baskets=basket_source,
    )


@pytest.fixture
def snapshot() -> IssuanceSnapshot:
    """Snapshot with uniswap and sushiswap venues for the DAI/WBTC basket."""
    return load_snapshot_fixture("dai_wbtc_basket")
