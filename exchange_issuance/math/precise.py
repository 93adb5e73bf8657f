"""Precise (18-decimal) fixed-point math helpers.

Mirrors the PreciseUnitMath conventions used by Set Protocol contracts: values
are integers scaled by 10^18 and every division truncates toward zero, as
Solidity and ethers' BigNumber do. Python ints are arbitrary precision, so no
intermediate product can overflow.
"""

from __future__ import annotations

from exchange_issuance.constants import PRECISE_UNIT
from exchange_issuance.errors import DivisionByZero

__all__ = [
    "PRECISE_UNIT",
    "precise_mul",
    "precise_mul_ceil",
    "precise_mul_ceil_int",
    "precise_div",
    "precise_div_ceil",
    "precise_div_ceil_int",
    "div_down",
    "min_value",
    "sqrt",
]


def _require_int(*values: int) -> None:
    for value in values:
        # bool is an int subclass but never a valid amount
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Precise math requires int, got {type(value).__name__}")


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero (matching Solidity).

    Python's // operator rounds toward negative infinity, but Solidity
    truncates toward zero. This matters for negative numbers.

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        Solidity: -7 / 3 = -2 (truncates toward zero)

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} / 0")

    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def precise_mul(a: int, b: int) -> int:
    """Multiply two precise values: a * b / 10^18, truncated."""
    _require_int(a, b)
    return _div_trunc(a * b, PRECISE_UNIT)


def precise_mul_ceil(a: int, b: int) -> int:
    """Multiply two precise values, rounding up.

    Used where under-charging would be unsafe (amounts a contract must
    collect at least in full). Returns 0 if either operand is 0.
    """
    _require_int(a, b)
    if a == 0 or b == 0:
        return 0
    return _div_trunc(a * b - 1, PRECISE_UNIT) + 1


def precise_mul_ceil_int(a: int, b: int) -> int:
    """Signed multiply that rounds the magnitude of the result up.

    Same-sign operands use the precise_mul_ceil formula. Opposite signs use
    (a * b + 1) / 10^18 - 1, which pushes the negative product one unit
    further from zero unless it divides exactly.
    """
    _require_int(a, b)
    if a == 0 or b == 0:
        return 0
    if (a > 0 and b > 0) or (a < 0 and b < 0):
        return _div_trunc(a * b - 1, PRECISE_UNIT) + 1
    return _div_trunc(a * b + 1, PRECISE_UNIT) - 1


def precise_div(a: int, b: int) -> int:
    """Divide two precise values: a * 10^18 / b, truncated.

    Raises:
        DivisionByZero: If b is zero
    """
    _require_int(a, b)
    return _div_trunc(a * PRECISE_UNIT, b)


def precise_div_ceil(a: int, b: int) -> int:
    """Divide two precise values, rounding up.

    Returns 0 if either operand is 0 (including a zero divisor).
    """
    _require_int(a, b)
    if a == 0 or b == 0:
        return 0
    return _div_trunc(a * PRECISE_UNIT - 1, b) + 1


def precise_div_ceil_int(a: int, b: int) -> int:
    """Signed divide that rounds the magnitude of the result up.

    Branches on sign agreement exactly like precise_mul_ceil_int.
    Returns 0 if either operand is 0.
    """
    _require_int(a, b)
    if a == 0 or b == 0:
        return 0
    if (a > 0 and b > 0) or (a < 0 and b < 0):
        return _div_trunc(a * PRECISE_UNIT - 1, b) + 1
    return _div_trunc(a * PRECISE_UNIT + 1, b) - 1


def div_down(a: int, b: int) -> int:
    """Integer division rounding toward negative infinity.

    Truncating division is corrected by one when the quotient is negative
    and the division leaves a remainder.

    Raises:
        DivisionByZero: If b is zero
    """
    _require_int(a, b)
    result = _div_trunc(a, b)
    remainder = a - result * b
    if a * b < 0 and remainder != 0:
        result -= 1
    return result


def min_value(x: int, y: int) -> int:
    """Return the smaller of two values."""
    return x if x < y else y


def sqrt(n: int) -> int:
    """Integer square root (floor) via the Babylonian method.

    Raises:
        ValueError: If n is negative
    """
    _require_int(n)
    if n < 0:
        raise ValueError(f"sqrt requires non-negative input, got {n}")

    y = n
    z = (n + 1) // 2
    # z strictly decreases while above floor(sqrt(n))
    while z < y:
        y = z
        z = (n // z + z) // 2
    return y
