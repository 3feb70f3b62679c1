"""
Top-level API for exactnum (integer-domain).

This module exposes the stable interface:
  - BigInt: arbitrary-precision signed integer (base 10^9 limbs)
  - Decimal: exact mantissa * 10^exponent decimal with explicit-precision division

The limb kernel and formatting bridges live under `exactnum.core`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    BigInt,
    Decimal,
    DEFAULT_DIV_PRECISION,
    ExactNumError,
    ParseError,
    NegativeExponentError,
    RangeError,
    ExponentOverflowError,
    InvariantViolation,
)

__all__ = [
    "BigInt",
    "Decimal",
    "DEFAULT_DIV_PRECISION",
    "ExactNumError",
    "ParseError",
    "NegativeExponentError",
    "RangeError",
    "ExponentOverflowError",
    "InvariantViolation",
]
