"""Protocol constants for exchange issuance quoting.

Centralizes well-known addresses and fixed-point parameters.
"""

from exchange_issuance.models.types import is_valid_address

# Fixed-point scale for basket units and ratios (1e18)
PRECISE_UNIT = 10**18

# UniswapV2-style pools charge 30 bps on the input amount
DEFAULT_FEE_BPS = 30
FEE_DENOMINATOR = 10_000


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Placeholder the issuance contract emits for native ether (lowercase for consistency)
ETH_ADDRESS = _validate_token_address("ETH", "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee")

# Well-known token addresses on mainnet (lowercase for consistency)
WETH = _validate_token_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
WBTC = _validate_token_address("WBTC", "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599")
USDC = _validate_token_address("USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")
DAI = _validate_token_address("DAI", "0x6b175474e89094c44da98b954eedeac495271d0f")
