"""Tests for the quote_snapshot command-line tool."""

import importlib.util
import json
from pathlib import Path

import pytest

from tests.helpers import BASKET, DAI, USDC, WETH, ether

ROOT = Path(__file__).parents[2]
SCRIPT_PATH = ROOT / "scripts" / "quote_snapshot.py"
SNAPSHOT_PATH = ROOT / "tests" / "fixtures" / "snapshots" / "dai_wbtc_basket.json"


@pytest.fixture(scope="module")
def cli():
    """The script loaded as a module."""
    loader_spec = importlib.util.spec_from_file_location("quote_snapshot", SCRIPT_PATH)
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ISSUANCE_WETH_ADDRESS", raising=False)
    monkeypatch.delenv("ISSUANCE_DEFAULT_FEE_BPS", raising=False)


def _write_snapshot(tmp_path: Path, data: dict) -> str:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestMain:
    """Tests for the CLI entry point."""

    def test_issue_eth_prints_quote(self, cli, capsys):
        assert cli.main([str(SNAPSHOT_PATH), BASKET, "issue-eth", str(ether(1))]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["amount_input"] == ether(1)
        assert result["amount_set"] > 0

    def test_redeem_token_requires_token(self, cli):
        assert cli.main([str(SNAPSHOT_PATH), BASKET, "redeem-token", str(ether(1))]) == 1

    def test_redeem_token(self, cli, capsys):
        args = [str(SNAPSHOT_PATH), BASKET, "redeem-token", str(ether(1)), "--token", USDC]
        assert cli.main(args) == 0
        assert json.loads(capsys.readouterr().out)["output_token"] == USDC

    def test_missing_snapshot(self, cli, tmp_path):
        assert cli.main([str(tmp_path / "missing.json"), BASKET, "issue-eth", "1"]) == 1

    def test_unknown_basket_exits_1(self, cli):
        assert cli.main([str(SNAPSHOT_PATH), "0x" + "33" * 20, "issue-eth", str(ether(1))]) == 1

    def test_zero_amount_exits_1(self, cli):
        assert cli.main([str(SNAPSHOT_PATH), BASKET, "issue-eth", "0"]) == 1

    def test_snapshot_without_venues_exits_1(self, cli, tmp_path):
        path = _write_snapshot(tmp_path, {"baskets": [{"address": BASKET, "components": []}]})
        assert cli.main([path, BASKET, "issue-eth", str(ether(1))]) == 1

    def test_invalid_env_fee_exits_1(self, cli, monkeypatch):
        monkeypatch.setenv("ISSUANCE_DEFAULT_FEE_BPS", "10000")
        assert cli.main([str(SNAPSHOT_PATH), BASKET, "issue-eth", str(ether(1))]) == 1


class TestBuildQuoter:
    """Tests for quoter construction from a snapshot and the environment."""

    def test_env_fee_applies_to_pairs_without_fee(self, cli, monkeypatch):
        monkeypatch.setenv("ISSUANCE_DEFAULT_FEE_BPS", "0")
        quoter = cli.build_quoter(cli.load_snapshot(SNAPSHOT_PATH))
        uniswap = quoter.exchange.venues[0]
        assert uniswap.get_pool(WETH, DAI).fee_bps == 0
        assert quoter.config.default_fee_bps == 0
