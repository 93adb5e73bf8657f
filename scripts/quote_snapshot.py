#!/usr/bin/env python3
"""Quote basket issuance or redemption from a saved on-chain snapshot.

The snapshot is an IssuanceSnapshot JSON file (baskets plus venue reserves).

Usage:
    python scripts/quote_snapshot.py SNAPSHOT BASKET issue-eth AMOUNT
    python scripts/quote_snapshot.py SNAPSHOT BASKET issue-token AMOUNT --token ADDR
    python scripts/quote_snapshot.py SNAPSHOT BASKET issue-exact-eth AMOUNT_SET [--max-input N]
    python scripts/quote_snapshot.py SNAPSHOT BASKET issue-exact-token AMOUNT_SET --token ADDR --max-input N
    python scripts/quote_snapshot.py SNAPSHOT BASKET redeem-eth AMOUNT_SET
    python scripts/quote_snapshot.py SNAPSHOT BASKET redeem-token AMOUNT_SET --token ADDR

Exit codes:
    0 - Quote printed as JSON
    1 - Quote failed (details printed)
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

import structlog
from pydantic import ValidationError

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from exchange_issuance.config import QuoterConfig  # noqa: E402
from exchange_issuance.errors import IssuanceError  # noqa: E402
from exchange_issuance.models.snapshot import IssuanceSnapshot  # noqa: E402
from exchange_issuance.quoting import BasketQuoter  # noqa: E402

logger = structlog.get_logger()

MODES = [
    "issue-eth",
    "issue-token",
    "issue-exact-eth",
    "issue-exact-token",
    "redeem-eth",
    "redeem-token",
]
TOKEN_MODES = {"issue-token", "issue-exact-token", "redeem-token"}


def load_snapshot(path: Path) -> IssuanceSnapshot:
    """Load and validate a snapshot file."""
    with open(path) as f:
        data = json.load(f)
    return IssuanceSnapshot.model_validate(data)


def run_quote(quoter: BasketQuoter, args: argparse.Namespace) -> dict:
    """Dispatch to the quoter method for args.mode and return the result as a dict."""
    if args.mode == "issue-eth":
        result = quoter.issue_set_for_exact_eth(args.basket, args.amount)
    elif args.mode == "issue-token":
        result = quoter.issue_set_for_exact_token(args.basket, args.token, args.amount)
    elif args.mode == "issue-exact-eth":
        result = quoter.issue_exact_set_from_eth(args.basket, args.amount, args.max_input)
    elif args.mode == "issue-exact-token":
        result = quoter.issue_exact_set_from_token(
            args.basket, args.token, args.amount, args.max_input
        )
    elif args.mode == "redeem-eth":
        result = quoter.redeem_exact_set_for_eth(args.basket, args.amount)
    else:
        result = quoter.redeem_exact_set_for_token(args.basket, args.token, args.amount)
    return asdict(result)


def build_quoter(snapshot: IssuanceSnapshot) -> BasketQuoter:
    """Quoter over the snapshot, with defaults from ISSUANCE_* environment variables.

    Raises:
        ValueError: If the environment is invalid or the snapshot has no venues
    """
    config = snapshot.config(QuoterConfig.from_env())
    return BasketQuoter(
        exchange=snapshot.exchange(config),
        baskets=snapshot.basket_source(),
        config=config,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Quote basket issuance from a snapshot")
    parser.add_argument("snapshot", type=Path, help="Path to IssuanceSnapshot JSON")
    parser.add_argument("basket", help="Basket token address")
    parser.add_argument("mode", choices=MODES, help="Quote to compute")
    parser.add_argument("amount", type=int, help="Input amount or basket amount (raw units)")
    parser.add_argument("--token", help="Input/output token for *-token modes")
    parser.add_argument(
        "--max-input",
        type=int,
        default=None,
        help="Maximum input for issue-exact-* modes (raw units)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if args.mode in TOKEN_MODES and not args.token:
        print(f"Error: --token is required for {args.mode}")
        return 1
    if args.mode == "issue-exact-token" and args.max_input is None:
        print("Error: --max-input is required for issue-exact-token")
        return 1

    if not args.snapshot.exists():
        logger.error("snapshot_not_found", path=str(args.snapshot))
        print(f"Error: Snapshot not found: {args.snapshot}")
        return 1

    try:
        snapshot = load_snapshot(args.snapshot)
    except (json.JSONDecodeError, ValidationError) as err:
        print(f"Error: Invalid snapshot {args.snapshot}: {err}")
        return 1

    try:
        result = run_quote(build_quoter(snapshot), args)
    except (IssuanceError, ValueError) as err:
        logger.error("quote_failed", mode=args.mode, error=str(err))
        print(f"Error: {err}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
