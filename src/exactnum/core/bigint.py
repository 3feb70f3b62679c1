"""
BigInt: arbitrary-precision signed integer over the limb kernel.

- Magnitude is a canonical limb tuple (see `limbs.py`); sign is a flag.
- There is no negative zero: the flag is forced to False when the magnitude is zero.
- Values are immutable; every operation returns a fresh BigInt.
- Division truncates toward zero and the remainder takes the dividend's sign
  (C-style), so (a / b) * b + (a % b) == a and BigInt(-7) % BigInt(2) == -1.

Recoverable failures raise ParseError / NegativeExponentError / RangeError.
Division or modulo by zero raises ZeroDivisionError (programming error).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from . import limbs as K
from .constants import LIMB_DIGITS, U64_MAX, I64_MAX, I64_MIN
from .exc import ParseError, NegativeExponentError, RangeError

_DIGITS = frozenset("0123456789")

IntLike = Union["BigInt", int]


def _coerce(x: object) -> "BigInt | None":
    if isinstance(x, BigInt):
        return x
    if isinstance(x, int):
        return BigInt(x)
    return None


@dataclass(frozen=True, init=False, eq=False)
class BigInt:
    """Signed arbitrary-precision integer (base 10^9 limbs, immutable)."""

    limbs: K.Limbs
    negative: bool

    # ------------- constructors -------------

    def __init__(self, value: Union["BigInt", int, str] = 0) -> None:
        if isinstance(value, BigInt):
            mag, neg = value.limbs, value.negative
        elif isinstance(value, int):
            mag, neg = K.from_int(-value if value < 0 else value), value < 0
        elif isinstance(value, str):
            parsed = BigInt.from_string(value)
            mag, neg = parsed.limbs, parsed.negative
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        object.__setattr__(self, "limbs", mag)
        object.__setattr__(self, "negative", neg and not K.is_zero(mag))

    @classmethod
    def _make(cls, mag: K.Limbs, negative: bool) -> "BigInt":
        # Trusted fast path: `mag` is already canonical.
        obj = cls.__new__(cls)
        object.__setattr__(obj, "limbs", mag)
        object.__setattr__(obj, "negative", negative and not K.is_zero(mag))
        return obj

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], negative: bool = False) -> "BigInt":
        """Build from raw limbs (least-significant first); validated and trimmed."""
        return cls._make(K.check(limbs), bool(negative))

    @classmethod
    def zero(cls) -> "BigInt":
        return cls._make(K.ZERO, False)

    @classmethod
    def one(cls) -> "BigInt":
        return cls._make(K.ONE, False)

    @classmethod
    def from_u64(cls, value: int) -> "BigInt":
        if value < 0 or value > U64_MAX:
            raise RangeError(f"value {value} is outside the unsigned 64-bit range")
        return cls(value)

    @classmethod
    def from_i64(cls, value: int) -> "BigInt":
        if value < I64_MIN or value > I64_MAX:
            raise RangeError(f"value {value} is outside the signed 64-bit range")
        return cls(value)

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """Parse an optional '-' followed by decimal digits.

        Leading zeros are accepted and dropped; "-0" parses to zero.
        """
        if not isinstance(text, str):
            raise TypeError("BigInt.from_string expects str")
        if text == "":
            raise ParseError(text, "empty string")
        negative = text[0] == "-"
        body = text[1:] if negative else text
        if body == "":
            raise ParseError(text, "missing digits after minus sign")
        for ch in body:
            if ch not in _DIGITS:
                raise ParseError(text, f"invalid digit {ch!r}")
        body = body.lstrip("0")
        if body == "":
            return cls.zero()
        # 9-digit groups from the least-significant end.
        out = []
        end = len(body)
        while end > 0:
            start = max(0, end - LIMB_DIGITS)
            out.append(int(body[start:end]))
            end = start
        return cls._make(K.trim(out), negative)

    parse = from_string

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return K.is_zero(self.limbs)

    def is_odd(self) -> bool:
        return K.is_odd(self.limbs)

    def sign(self) -> int:
        """-1, 0 or 1."""
        if self.is_zero():
            return 0
        return -1 if self.negative else 1

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- comparisons -------------

    def compare(self, other: IntLike) -> int:
        """Three-way signed comparison: -1, 0 or 1."""
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot compare BigInt with {type(other).__name__}")
        if self.negative != o.negative:
            return -1 if self.negative else 1
        c = K.compare(self.limbs, o.limbs)
        return -c if self.negative else c

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self.negative == o.negative and self.limbs == o.limbs

    def __lt__(self, other: IntLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: IntLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: IntLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: IntLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Equal to hash(int(self)) so BigInt and int keys collide as they compare.
        return hash(int(self))

    # ------------- arithmetic -------------

    def __neg__(self) -> "BigInt":
        return BigInt._make(self.limbs, not self.negative)

    def __pos__(self) -> "BigInt":
        return self

    def abs(self) -> "BigInt":
        return BigInt._make(self.limbs, False)

    __abs__ = abs

    def _add_signed(self, o: "BigInt", o_negative: bool) -> "BigInt":
        if self.negative == o_negative:
            return BigInt._make(K.add(self.limbs, o.limbs), self.negative)
        # Opposite signs: larger magnitude minus smaller, sign of the larger.
        if K.compare(self.limbs, o.limbs) < 0:
            return BigInt._make(K.sub(o.limbs, self.limbs), o_negative)
        return BigInt._make(K.sub(self.limbs, o.limbs), self.negative)

    def __add__(self, other: IntLike) -> "BigInt":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._add_signed(o, o.negative)

    def __radd__(self, other: int) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: IntLike) -> "BigInt":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._add_signed(o, not o.negative and not o.is_zero())

    def __rsub__(self, other: int) -> "BigInt":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: IntLike) -> "BigInt":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if self.is_zero() or o.is_zero():
            return BigInt.zero()
        return BigInt._make(K.mul(self.limbs, o.limbs), self.negative != o.negative)

    def __rmul__(self, other: int) -> "BigInt":
        return self.__mul__(other)

    def divmod_trunc(self, other: IntLike) -> Tuple["BigInt", "BigInt"]:
        """Truncating (quotient, remainder); remainder carries the dividend's sign."""
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot divide BigInt by {type(other).__name__}")
        if o.is_zero():
            raise ZeroDivisionError("BigInt division by zero")
        q, r = K.divmod_(self.limbs, o.limbs)
        return (
            BigInt._make(q, self.negative != o.negative),
            BigInt._make(r, self.negative),
        )

    def __truediv__(self, other: IntLike) -> "BigInt":
        if _coerce(other) is None:
            return NotImplemented
        return self.divmod_trunc(other)[0]

    def __rtruediv__(self, other: int) -> "BigInt":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o.divmod_trunc(self)[0]

    # `//` is an alias of `/`: both truncate toward zero (not floor).
    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: IntLike) -> "BigInt":
        if _coerce(other) is None:
            return NotImplemented
        return self.divmod_trunc(other)[1]

    def __rmod__(self, other: int) -> "BigInt":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o.divmod_trunc(self)[1]

    def __divmod__(self, other: IntLike) -> Tuple["BigInt", "BigInt"]:
        if _coerce(other) is None:
            return NotImplemented
        return self.divmod_trunc(other)

    def pow(self, exponent: IntLike) -> "BigInt":
        """Raise to a non-negative integer power (square-and-multiply).

        x.pow(0) == 1 for every x, including zero.
        """
        e = _coerce(exponent)
        if e is None:
            raise TypeError(f"exponent must be int or BigInt, not {type(exponent).__name__}")
        if e.negative:
            raise NegativeExponentError(f"exponent cannot be negative: {e}")
        if e.is_zero():
            return BigInt.one()
        if self.is_zero():
            return BigInt.zero()
        result = BigInt.one()
        base = self
        exp = e.limbs
        while not K.is_zero(exp):
            if K.is_odd(exp):
                result = result * base
            exp, _ = K.divmod_small(exp, 2)
            if not K.is_zero(exp):
                base = base * base
        return result

    def __pow__(self, exponent: IntLike, modulo: object = None) -> "BigInt":
        if modulo is not None or _coerce(exponent) is None:
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: int) -> "BigInt":
        b = _coerce(base)
        if b is None:
            return NotImplemented
        return b.pow(self)

    def shift_limbs(self, k: int) -> "BigInt":
        """Multiply by RADIX**k (i.e. 10**(9k))."""
        return BigInt._make(K.shift_left(self.limbs, k), self.negative)

    # ------------- conversions -------------

    def __str__(self) -> str:
        mag = self.limbs
        parts = [str(mag[-1])]
        for x in reversed(mag[:-1]):
            parts.append(str(x).zfill(LIMB_DIGITS))
        s = "".join(parts)
        return "-" + s if self.negative else s

    to_string = __str__

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        v = K.to_int(self.limbs)
        return -v if self.negative else v

    def to_u64(self) -> int:
        """Narrow to an unsigned 64-bit value; RangeError if it does not fit."""
        if self.negative:
            raise RangeError(f"negative value {self} cannot be converted to u64")
        if K.compare(self.limbs, _U64_MAX_LIMBS) > 0:
            raise RangeError(f"value {self} exceeds u64 max")
        return K.to_int(self.limbs)

    def to_i64(self) -> int:
        """Narrow to a signed 64-bit value; RangeError if it does not fit.

        The minimum -2**63 is accepted even though its magnitude exceeds I64_MAX.
        """
        bound = _I64_NEG_BOUND_LIMBS if self.negative else _I64_MAX_LIMBS
        if K.compare(self.limbs, bound) > 0:
            raise RangeError(f"value {self} is outside the i64 range")
        v = K.to_int(self.limbs)
        return -v if self.negative else v

    def to_float(self) -> float:
        """Lossy conversion; very large magnitudes become +/-inf."""
        return float(str(self))

    def div_to_float(self, other: IntLike) -> float:
        """Lossy ratio self / other as a float."""
        o = _coerce(other)
        if o is None:
            raise TypeError(f"cannot divide BigInt by {type(other).__name__}")
        if o.is_zero():
            raise ZeroDivisionError("BigInt division by zero")
        return int(self) / int(o)


_U64_MAX_LIMBS = K.from_int(U64_MAX)
_I64_MAX_LIMBS = K.from_int(I64_MAX)
_I64_NEG_BOUND_LIMBS = K.from_int(-I64_MIN)


__all__ = [
    "BigInt",
    "IntLike",
]
