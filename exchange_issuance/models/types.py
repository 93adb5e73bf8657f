"""Annotated types for on-chain values in snapshot dumps.

RPC dumps carry amounts as decimal strings (JSON cannot hold a uint256
losslessly) or as plain ints. Both are parsed to Python ints at the model
boundary and range-checked against the Solidity type they came from.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

UINT256_MAX = 2**256 - 1
INT256_MIN = -(2**255)
INT256_MAX = 2**255 - 1

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
_ADDRESS_RE = re.compile(ADDRESS_PATTERN)


def _parse_int(value: Any, type_name: str) -> int:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{type_name} must be string or int, got {type(value).__name__}")
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError as err:
        raise ValueError(f"{type_name} must be a decimal integer string: '{value}'") from err


def validate_uint256(value: Any) -> int:
    """Parse a reserve or balance (uint256) from a string or int.

    Raises:
        ValueError: If value is not an integer in [0, 2^256 - 1]
    """
    int_value = _parse_int(value, "Uint256")
    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")
    return int_value


def validate_int256(value: Any) -> int:
    """Parse a position unit (int256) from a string or int.

    Negative units are legal on-chain (external positions); rejecting them
    is up to the quoting engine.

    Raises:
        ValueError: If value is not an integer in the int256 range
    """
    int_value = _parse_int(value, "Int256")
    if not INT256_MIN <= int_value <= INT256_MAX:
        raise ValueError(f"Int256 out of range: {value}")
    return int_value


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=ADDRESS_PATTERN)]

# Reserve amount, stored as int
Uint256 = Annotated[int, BeforeValidator(validate_uint256)]

# Default position real unit, stored as int
Int256 = Annotated[int, BeforeValidator(validate_int256)]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Lowercase an address and add the 0x prefix if missing.

    Raises:
        ValueError: If validate=True and the result is not a valid address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """True if address is 0x followed by 40 hex characters."""
    return isinstance(address, str) and _ADDRESS_RE.fullmatch(address) is not None
