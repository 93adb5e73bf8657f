"""Mathematical utilities for exchange issuance quoting.

This package provides the fixed-point primitives used by the quoting engine:
- precise_mul / precise_div and their ceiling variants (18-decimal)
- div_down, min_value and integer sqrt
"""

from exchange_issuance.math.precise import (
    PRECISE_UNIT,
    div_down,
    min_value,
    precise_div,
    precise_div_ceil,
    precise_div_ceil_int,
    precise_mul,
    precise_mul_ceil,
    precise_mul_ceil_int,
    sqrt,
)

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
