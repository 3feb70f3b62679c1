"""
exactnum Core Constants (integer domain)
========================================

Limb radix, native integer bounds and default precisions. Formatting helpers
and the stdlib bridges live in `fmt.py`.
"""

# NOTE: Magnitudes are stored in base 10^9 so that decimal formatting is a
# simple per-limb zero-pad and no base conversion is ever needed.

# ---------------------------------------------------------------------------
# Limb representation
# ---------------------------------------------------------------------------

#: Decimal digits held by one limb.
LIMB_DIGITS: int = 9

#: Limb radix (each limb is in [0, RADIX)).
RADIX: int = 10 ** LIMB_DIGITS

#: Largest single-limb value.
LIMB_MAX: int = RADIX - 1


# ---------------------------------------------------------------------------
# Native integer bounds for narrowing conversions
# ---------------------------------------------------------------------------

U64_MAX: int = (1 << 64) - 1
I64_MAX: int = (1 << 63) - 1
I64_MIN: int = -(1 << 63)

#: Decimal exponents must fit a signed 32-bit integer.
EXP_MAX: int = (1 << 31) - 1
EXP_MIN: int = -(1 << 31)


# ---------------------------------------------------------------------------
# Decimal division
# ---------------------------------------------------------------------------

#: Fractional digits kept by plain `/` on Decimal values.
DEFAULT_DIV_PRECISION: int = 10


__all__ = [
    "LIMB_DIGITS",
    "RADIX",
    "LIMB_MAX",
    "U64_MAX",
    "I64_MAX",
    "I64_MIN",
    "EXP_MAX",
    "EXP_MIN",
    "DEFAULT_DIV_PRECISION",
]
