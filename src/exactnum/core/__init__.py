"""
exactnum Core
=============

Unified exports for the integer-domain primitives: the limb kernel, BigInt and
Decimal. All arithmetic is exact; floats and the stdlib `decimal` module only
appear in the lossy/display helpers of `fmt`.
"""

# NOTE:
#   Layering is strictly one-way: Decimal reduces to BigInt operations on aligned
#   mantissas, and BigInt reduces to limb-kernel operations plus a sign rule.

# Integer-domain constants
from .constants import (
    LIMB_DIGITS,
    RADIX,
    LIMB_MAX,
    U64_MAX,
    I64_MAX,
    I64_MIN,
    EXP_MAX,
    EXP_MIN,
    DEFAULT_DIV_PRECISION,
)

# Limb kernel (unsigned magnitudes)
from . import limbs

# Number types
from .bigint import BigInt
from .bigdecimal import Decimal

# Formatting and stdlib bridges (non-core arithmetic)
from .fmt import (
    to_py_decimal,
    from_py_decimal,
    to_fraction,
    fmt_sci,
    group_digits,
)

# Core exceptions
from .exc import (
    ExactNumError,
    ParseError,
    NegativeExponentError,
    RangeError,
    ExponentOverflowError,
    InvariantViolation,
)

__all__ = [
    # constants
    "LIMB_DIGITS",
    "RADIX",
    "LIMB_MAX",
    "U64_MAX",
    "I64_MAX",
    "I64_MIN",
    "EXP_MAX",
    "EXP_MIN",
    "DEFAULT_DIV_PRECISION",
    # kernel
    "limbs",
    # numbers
    "BigInt",
    "Decimal",
    # fmt
    "to_py_decimal",
    "from_py_decimal",
    "to_fraction",
    "fmt_sci",
    "group_digits",
    # exceptions
    "ExactNumError",
    "ParseError",
    "NegativeExponentError",
    "RangeError",
    "ExponentOverflowError",
    "InvariantViolation",
]
