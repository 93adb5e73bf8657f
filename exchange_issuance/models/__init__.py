"""Pydantic models and shared types for on-chain state.

Snapshot models live in exchange_issuance.models.snapshot and are imported
from there directly.
"""

from exchange_issuance.models.types import (
    Address,
    Int256,
    Uint256,
    is_valid_address,
    normalize_address,
)

__all__ = [
    "Address",
    "Int256",
    "Uint256",
    "is_valid_address",
    "normalize_address",
]
