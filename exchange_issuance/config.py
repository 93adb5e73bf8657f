"""Quoter configuration."""

import os
from dataclasses import dataclass

from exchange_issuance.constants import DEFAULT_FEE_BPS, ETH_ADDRESS, WETH
from exchange_issuance.models.types import normalize_address


@dataclass(frozen=True)
class QuoterConfig:
    """Centralized configuration for basket quoting.

    Attributes:
        weth: Wrapped native token every component is priced against
        eth_placeholder: Address standing in for native ether in inputs/outputs
        default_fee_bps: Pool fee applied when a snapshot omits one (30 = 0.3%)
    """

    weth: str = WETH
    eth_placeholder: str = ETH_ADDRESS
    default_fee_bps: int = DEFAULT_FEE_BPS

    def is_native(self, token: str) -> bool:
        """True if token is WETH or the native ether placeholder."""
        token_norm = normalize_address(token)
        return token_norm in (normalize_address(self.weth), normalize_address(self.eth_placeholder))

    @classmethod
    def from_env(cls) -> "QuoterConfig":
        """Build a config from environment variables.

        - ISSUANCE_WETH_ADDRESS: wrapped native token (default: mainnet WETH)
        - ISSUANCE_DEFAULT_FEE_BPS: default pool fee in bps (default: 30)
        """
        weth = normalize_address(os.environ.get("ISSUANCE_WETH_ADDRESS", WETH), validate=True)
        fee_bps = int(os.environ.get("ISSUANCE_DEFAULT_FEE_BPS", str(DEFAULT_FEE_BPS)))
        if not 0 <= fee_bps < 10_000:
            raise ValueError(f"ISSUANCE_DEFAULT_FEE_BPS must be in [0, 10000), got {fee_bps}")
        return cls(weth=weth, default_fee_bps=fee_bps)


# Default configuration instance
DEFAULT_CONFIG = QuoterConfig()
