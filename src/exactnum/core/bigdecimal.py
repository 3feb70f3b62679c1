"""
Decimal: exact scaled decimal, value = mantissa * 10^exponent.

- mantissa is a BigInt (carries the sign); exponent fits a signed 32-bit int.
- Every public constructor normalises: trailing decimal zeros of the mantissa are
  folded into the exponent, and zero is canonicalised to (0, 0). Equality and
  hashing can therefore compare (mantissa, exponent) directly.
- Comparison, addition and subtraction align both operands to the smaller exponent.
- Division is explicit about precision: div(other, n) truncates to n fractional
  digits, div_round(other, n) rounds half-up away from zero. Plain `/` keeps
  DEFAULT_DIV_PRECISION digits.

# Alignment notes:
# - Rounding is decided in the integer domain on the (n+1)-digit truncated
#   quotient; no string round-trips.
"""

from __future__ import annotations

import hashlib
import sys
from dataclasses import dataclass
from typing import Tuple, Union

from . import limbs as K
from .bigint import BigInt
from .constants import LIMB_DIGITS, EXP_MIN, EXP_MAX, DEFAULT_DIV_PRECISION
from .exc import ParseError, NegativeExponentError, ExponentOverflowError

# Debug printing control
DEBUG_DECIMAL = False

def _dbg(msg: str) -> None:
    if DEBUG_DECIMAL:
        print(msg)


_DIGITS = frozenset("0123456789")
_TEN = BigInt(10)

DecimalLike = Union["Decimal", BigInt, int]


# ----------------------------
# Integer-domain helpers
# ----------------------------

def _ten_pow(n: int) -> BigInt:
    """Return 10**n for n >= 0 as a BigInt (whole limbs plus one partial limb)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    q, r = divmod(n, LIMB_DIGITS)
    return BigInt.from_limbs(K.shift_left((10 ** r,), q))


def _check_exponent(e: int) -> int:
    if e < EXP_MIN or e > EXP_MAX:
        raise ExponentOverflowError(f"Decimal exponent {e} outside [{EXP_MIN}, {EXP_MAX}]")
    return e


def _normalize(m: BigInt, e: int) -> Tuple[BigInt, int]:
    """Fold trailing decimal zeros of m into e; zero becomes (0, 0)."""
    if m.is_zero():
        return BigInt.zero(), 0
    # Whole zero limbs first: each one is nine factors of ten.
    mag = m.limbs
    k = 0
    while mag[k] == 0:
        k += 1
    if k:
        m = BigInt.from_limbs(mag[k:], m.negative)
        e += k * LIMB_DIGITS
    while True:
        q, r = m.divmod_trunc(_TEN)
        if not r.is_zero():
            break
        m = q
        e += 1
    return m, _check_exponent(e)


def _coerce(x: object) -> "Decimal | None":
    if isinstance(x, Decimal):
        return x
    if isinstance(x, (BigInt, int)):
        return Decimal(x)
    return None


def _align(a: "Decimal", b: "Decimal") -> Tuple[BigInt, BigInt, int]:
    """Rescale both mantissas to the smaller exponent; return (ma, mb, exp)."""
    e = min(a.exponent, b.exponent)
    ma = a.mantissa
    mb = b.mantissa
    if a.exponent > e:
        ma = ma * _ten_pow(a.exponent - e)
    if b.exponent > e:
        mb = mb * _ten_pow(b.exponent - e)
    return ma, mb, e


# ----------------------------
# Decimal
# ----------------------------

@dataclass(frozen=True, init=False, eq=False)
class Decimal:
    """Exact decimal value mantissa * 10^exponent (always normalised)."""

    mantissa: BigInt
    exponent: int

    # ------------- constructors -------------

    def __init__(self, value: Union["Decimal", BigInt, int, str] = 0) -> None:
        if isinstance(value, Decimal):
            m, e = value.mantissa, value.exponent
        elif isinstance(value, BigInt):
            m, e = _normalize(value, 0)
        elif isinstance(value, int):
            m, e = _normalize(BigInt(value), 0)
        elif isinstance(value, str):
            parsed = Decimal.from_string(value)
            m, e = parsed.mantissa, parsed.exponent
        else:
            raise TypeError(f"cannot build Decimal from {type(value).__name__}")
        object.__setattr__(self, "mantissa", m)
        object.__setattr__(self, "exponent", e)

    @classmethod
    def _make(cls, mantissa: BigInt, exponent: int) -> "Decimal":
        m, e = _normalize(mantissa, exponent)
        obj = cls.__new__(cls)
        object.__setattr__(obj, "mantissa", m)
        object.__setattr__(obj, "exponent", e)
        return obj

    @classmethod
    def from_components(cls, mantissa: Union[BigInt, int], exponent: int) -> "Decimal":
        """Build mantissa * 10^exponent and normalise."""
        return cls._make(BigInt(mantissa), exponent)

    @staticmethod
    def zero() -> "Decimal":
        return Decimal(0)

    @classmethod
    def from_string(cls, text: str) -> "Decimal":
        """Parse [sign] digits [. digits] [(e|E) [sign] digits].

        The integer part may be empty (".5") but a '.' must be followed by
        at least one digit.
        """
        if not isinstance(text, str):
            raise TypeError("Decimal.from_string expects str")
        if text == "":
            raise ParseError(text, "empty string")
        p = text
        negative = False
        if p[0] in "+-":
            negative = p[0] == "-"
            p = p[1:]
            if p == "":
                raise ParseError(text, "sign only")

        mant_str = p
        exp_val = 0
        cut = -1
        for i, ch in enumerate(p):
            if ch in "eE":
                cut = i
                break
        if cut >= 0:
            mant_str = p[:cut]
            exp_str = p[cut + 1:]
            if exp_str == "":
                raise ParseError(text, "exponent missing")
            exp_neg = exp_str[0] == "-"
            if exp_str[0] in "+-":
                exp_str = exp_str[1:]
                if exp_str == "":
                    raise ParseError(text, "exponent sign only")
            for ch in exp_str:
                if ch not in _DIGITS:
                    raise ParseError(text, "invalid exponent digit")
            exp_digits = exp_str.lstrip("0") or "0"
            if len(exp_digits) > 12:
                raise ExponentOverflowError(f"exponent in {text!r} is out of range")
            exp_val = -int(exp_digits) if exp_neg else int(exp_digits)
            _check_exponent(exp_val)

        if mant_str == "":
            raise ParseError(text, "no digits")
        dot = mant_str.find(".")
        if dot >= 0:
            if mant_str.find(".", dot + 1) >= 0:
                raise ParseError(text, "multiple decimal points")
            int_part = mant_str[:dot]
            frac_part = mant_str[dot + 1:]
            for ch in int_part:
                if ch not in _DIGITS:
                    raise ParseError(text, "invalid integer digit")
            if frac_part == "":
                raise ParseError(text, "decimal point without fractional digits")
            for ch in frac_part:
                if ch not in _DIGITS:
                    raise ParseError(text, "invalid fractional digit")
            digits = (int_part or "0") + frac_part
            exp_val -= len(frac_part)
        else:
            for ch in mant_str:
                if ch not in _DIGITS:
                    raise ParseError(text, "invalid digit")
            digits = mant_str

        m = BigInt.from_string(digits)
        if negative:
            m = -m
        _dbg(f"from_string: {text!r} -> m={m}, e={exp_val}")
        return cls._make(m, exp_val)

    parse = from_string

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.mantissa.is_zero()

    def sign(self) -> int:
        return self.mantissa.sign()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- comparisons -------------

    def compare(self, other: DecimalLike) -> int:
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot compare Decimal with {type(other).__name__}")
        if self.exponent == o.exponent:
            return self.mantissa.compare(o.mantissa)
        ma, mb, _ = _align(self, o)
        return ma.compare(mb)

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        # Both sides are normalised, so no realignment is needed.
        return self.exponent == o.exponent and self.mantissa == o.mantissa

    def __lt__(self, other: DecimalLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: DecimalLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: DecimalLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: DecimalLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        if self.exponent >= 0:
            # Integral value: hash like the equal int (CPython numeric hash).
            modulus = sys.hash_info.modulus
            h = K.to_int(self.mantissa.limbs) % modulus
            h = h * pow(10, self.exponent, modulus) % modulus
            if self.mantissa.negative:
                h = -h
            return -2 if h == -1 else h
        return hash((str(self.mantissa), self.exponent))

    def hash_value(self) -> BigInt:
        """Stable hash contribution derived from the mantissa and exponent strings."""
        mant_h = int.from_bytes(hashlib.sha256(str(self.mantissa).encode()).digest()[:8], "big")
        exp_h = int.from_bytes(hashlib.sha256(str(self.exponent).encode()).digest()[:8], "big")
        return BigInt(mant_h) * BigInt(1 << 32) + BigInt(exp_h)

    # ------------- arithmetic -------------

    def __neg__(self) -> "Decimal":
        return Decimal._make(-self.mantissa, self.exponent)

    def __pos__(self) -> "Decimal":
        return self

    def abs(self) -> "Decimal":
        return Decimal._make(self.mantissa.abs(), self.exponent)

    __abs__ = abs

    def __add__(self, other: DecimalLike) -> "Decimal":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        ma, mb, e = _align(self, o)
        return Decimal._make(ma + mb, e)

    def __radd__(self, other: DecimalLike) -> "Decimal":
        return self.__add__(other)

    def __sub__(self, other: DecimalLike) -> "Decimal":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        ma, mb, e = _align(self, o)
        return Decimal._make(ma - mb, e)

    def __rsub__(self, other: DecimalLike) -> "Decimal":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: DecimalLike) -> "Decimal":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Decimal._make(self.mantissa * o.mantissa, self.exponent + o.exponent)

    def __rmul__(self, other: DecimalLike) -> "Decimal":
        return self.__mul__(other)

    def _scaled_quotient(self, other: "Decimal", n: int) -> BigInt:
        """Return trunc(self / other * 10^n) as a BigInt."""
        if other.is_zero():
            raise ZeroDivisionError("Decimal division by zero")
        if n < 0:
            raise ValueError(f"precision must be >= 0, got {n}")
        ma, mb, _ = _align(self, other)
        q = (ma * _ten_pow(n)) / mb
        _dbg(f"_scaled_quotient: ma={ma}, mb={mb}, n={n} -> q={q}")
        return q

    def div(self, other: DecimalLike, n: int) -> "Decimal":
        """Divide, truncating toward zero to exactly n fractional digits."""
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot divide Decimal by {type(other).__name__}")
        return Decimal._make(self._scaled_quotient(o, n), -n)

    def div_round(self, other: DecimalLike, n: int = DEFAULT_DIV_PRECISION) -> "Decimal":
        """Divide and round half-up (away from zero) to n fractional digits."""
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot divide Decimal by {type(other).__name__}")
        if n < 0:
            raise ValueError(f"precision must be >= 0, got {n}")
        q = self._scaled_quotient(o, n + 1)
        kept, digit = q.abs().divmod_trunc(_TEN)
        if int(digit) >= 5:
            kept = kept + 1
        _dbg(f"div_round: q={q}, digit={digit}, kept={kept}, n={n}")
        return Decimal._make(-kept if q.negative else kept, -n)

    def __truediv__(self, other: DecimalLike) -> "Decimal":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self.div(o, DEFAULT_DIV_PRECISION)

    def __rtruediv__(self, other: DecimalLike) -> "Decimal":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o.div(self, DEFAULT_DIV_PRECISION)

    def pow(self, exponent: Union[BigInt, int]) -> "Decimal":
        """Raise to a non-negative integer power.

        Raises NegativeExponentError for negative powers and
        ExponentOverflowError when the result's exponent leaves the 32-bit range.
        """
        if not isinstance(exponent, (BigInt, int)):
            raise TypeError(f"exponent must be int or BigInt, not {type(exponent).__name__}")
        k = BigInt(exponent)
        if k.negative:
            raise NegativeExponentError(f"exponent cannot be negative: {k}")
        if k.is_zero():
            return Decimal(1)
        new_exp = BigInt(self.exponent) * k
        if new_exp < EXP_MIN or new_exp > EXP_MAX:
            raise ExponentOverflowError(f"exponent overflow in Decimal.pow: {self.exponent} * {k}")
        m = self.mantissa.abs().pow(k)
        if self.mantissa.negative and k.is_odd():
            m = -m
        return Decimal._make(m, int(new_exp))

    def __pow__(self, exponent: Union[BigInt, int], modulo: object = None) -> "Decimal":
        if modulo is not None or not isinstance(exponent, (BigInt, int)):
            return NotImplemented
        return self.pow(exponent)

    # ------------- parts -------------

    def integer_part(self) -> BigInt:
        """Integer part, truncated toward zero."""
        if self.exponent >= 0:
            return self.mantissa * _ten_pow(self.exponent)
        return self.mantissa / _ten_pow(-self.exponent)

    def fractional_part(self) -> "Decimal":
        """self - integer_part(); carries the sign of self."""
        return self - Decimal(self.integer_part())

    def decimal_weekeq(self, other: DecimalLike, n: int) -> bool:
        """True if integer parts match and the first n fractional digits match.

        Fractional parts are compared after scaling by 10^n and truncating.
        """
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot compare Decimal with {type(other).__name__}")
        if n < 0:
            return False
        if self == o:
            return True
        a_int = self.integer_part()
        b_int = o.integer_part()
        if a_int != b_int:
            return False
        scale = Decimal(_ten_pow(n))
        a_scaled = ((self - Decimal(a_int)) * scale).integer_part()
        b_scaled = ((o - Decimal(b_int)) * scale).integer_part()
        return a_scaled == b_scaled

    # ------------- conversions -------------

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        digits = str(self.mantissa.abs())
        e = self.exponent
        if e >= 0:
            s = digits + "0" * e
        else:
            shift = -e
            if shift >= len(digits):
                s = "0." + "0" * (shift - len(digits)) + digits
            else:
                cut = len(digits) - shift
                s = digits[:cut] + "." + digits[cut:]
            # Normalised mantissas never end in zero, but keep the output tidy regardless.
            s = s.rstrip("0").rstrip(".")
        return "-" + s if self.mantissa.negative else s

    to_string = __str__

    def __repr__(self) -> str:
        return f"Decimal('{self}')"

    def to_float(self) -> float:
        """Lossy conversion to float."""
        return float(f"{self.mantissa}e{self.exponent}")

    def as_tuple(self) -> Tuple[BigInt, int]:
        """Return (mantissa, exponent)."""
        return self.mantissa, self.exponent


__all__ = [
    "Decimal",
    "DecimalLike",
]
