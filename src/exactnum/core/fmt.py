"""
Formatting helpers and stdlib bridges (non-core arithmetic).

Core arithmetic never touches the stdlib `decimal` module or floats. The
bridges here are exact (tuple construction, no context rounding) and exist for
display, logging and interop only.
"""

from __future__ import annotations

from decimal import Decimal as PyDecimal
from fractions import Fraction
from typing import Union

from .bigint import BigInt
from .bigdecimal import Decimal, _ten_pow
from .exc import ParseError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


Number = Union[BigInt, Decimal]


def _as_decimal(x: Number) -> Decimal:
    if isinstance(x, Decimal):
        return x
    if isinstance(x, (BigInt, int)):
        return Decimal(x)
    raise TypeError(f"expected BigInt or Decimal, got {type(x).__name__}")


# ---------------------------------------------------------------------------
# stdlib Decimal / Fraction bridges
# ---------------------------------------------------------------------------

def to_py_decimal(x: Number) -> PyDecimal:
    """Exact stdlib Decimal with the same value (no context rounding)."""
    d = _as_decimal(x)
    digits = tuple(int(c) for c in str(d.mantissa.abs()))
    return PyDecimal((1 if d.mantissa.negative else 0, digits, d.exponent))


def from_py_decimal(x: PyDecimal) -> Decimal:
    """Exact Decimal from a finite stdlib Decimal."""
    if not isinstance(x, PyDecimal):
        raise TypeError("from_py_decimal expects decimal.Decimal")
    if x.is_nan() or x.is_infinite():
        raise ParseError(str(x), "NaN and infinity have no exact value")
    sign, digits, exponent = x.as_tuple()
    m = BigInt("".join(str(c) for c in digits) or "0")
    if sign:
        m = -m
    _dbg(f"from_py_decimal: {x} -> m={m}, e={exponent}")
    return Decimal.from_components(m, exponent)


def to_fraction(x: Number) -> Fraction:
    """Exact rational value."""
    d = _as_decimal(x)
    m = int(d.mantissa)
    if d.exponent >= 0:
        return Fraction(m * int(_ten_pow(d.exponent)), 1)
    return Fraction(m, int(_ten_pow(-d.exponent)))


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_sci(x: Number, places: int = 18) -> str:
    """Scientific notation with exactly `places` fractional digits.

    Digits past `places` are dropped (toward zero) on the exact mantissa, so
    1.29 at one place prints as 1.2E+0 and -9.99 as -9.9E+0.
    """
    if places < 0:
        raise ValueError(f"places must be >= 0, got {places}")
    d = _as_decimal(x)
    digits = str(d.mantissa.abs())
    keep = digits[:places + 1]
    exponent = d.exponent + len(digits) - len(keep)
    _dbg(f"fmt_sci: {d} -> digits={keep}, e={exponent}")
    exact = PyDecimal((1 if d.mantissa.negative else 0, tuple(int(c) for c in keep), exponent))
    return format(exact, f".{places}E")


def group_digits(x: Number, sep: str = ",") -> str:
    """Plain string form with the integer digits grouped in threes."""
    s = str(x)
    sign = ""
    if s.startswith("-"):
        sign, s = "-", s[1:]
    int_part, dot, frac = s.partition(".")
    head = len(int_part) % 3 or 3
    groups = [int_part[:head]]
    for i in range(head, len(int_part), 3):
        groups.append(int_part[i:i + 3])
    return sign + sep.join(groups) + dot + frac


__all__ = [
    "to_py_decimal",
    "from_py_decimal",
    "to_fraction",
    "fmt_sci",
    "group_digits",
]
