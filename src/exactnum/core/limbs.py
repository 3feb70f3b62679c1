"""
Limb arithmetic kernel: unsigned magnitudes in base 10^9.

- A magnitude is a tuple of limbs, least-significant first, each in [0, RADIX).
- Canonical form has no most-significant zero limb; zero is exactly (0,).
- Every function here is pure and returns a new tuple; operands are never mutated.
- No sign handling: BigInt resolves signs and guarantees the preconditions below.

Division follows Knuth's Algorithm D (TAOCP vol. 2, 4.3.1): normalise so the
divisor's top limb is >= RADIX/2, estimate each quotient digit from the top two
limbs, correct with the second divisor limb, multiply-subtract, add back once.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .constants import RADIX, LIMB_MAX
from .exc import InvariantViolation

# Debug printing control
DEBUG_LIMBS = False

def _dbg(msg: str) -> None:
    if DEBUG_LIMBS:
        print(msg)


Limbs = Tuple[int, ...]

ZERO: Limbs = (0,)
ONE: Limbs = (1,)


# ----------------------------
# Representation helpers
# ----------------------------

def trim(limbs: Iterable[int]) -> Limbs:
    """Drop most-significant zero limbs, keeping at least one limb."""
    out = list(limbs)
    while len(out) > 1 and out[-1] == 0:
        out.pop()
    if not out:
        return ZERO
    return tuple(out)


def check(limbs: Iterable[int]) -> Limbs:
    """Validate raw limbs and return them in canonical form."""
    out = tuple(limbs)
    if not out:
        raise InvariantViolation("magnitude must contain at least one limb")
    for x in out:
        if not isinstance(x, int) or isinstance(x, bool) or x < 0 or x > LIMB_MAX:
            raise InvariantViolation(f"limb out of range: {x!r}")
    return trim(out)


def is_zero(a: Limbs) -> bool:
    return len(a) == 1 and a[0] == 0


def is_odd(a: Limbs) -> bool:
    # RADIX is even, so parity lives in the lowest limb.
    return (a[0] & 1) == 1


def from_int(n: int) -> Limbs:
    """Decompose a non-negative native int into limbs."""
    if n < 0:
        raise InvariantViolation("from_int expects a non-negative value")
    if n == 0:
        return ZERO
    out: List[int] = []
    while n > 0:
        n, r = divmod(n, RADIX)
        out.append(r)
    return tuple(out)


def to_int(a: Limbs) -> int:
    """Recompose limbs into a native int."""
    v = 0
    for x in reversed(a):
        v = v * RADIX + x
    return v


def compare(a: Limbs, b: Limbs) -> int:
    """Three-way compare of canonical magnitudes: -1, 0 or 1."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def shift_left(a: Limbs, k: int) -> Limbs:
    """Multiply by RADIX**k (prepend k zero limbs)."""
    if k < 0:
        raise InvariantViolation("shift_left expects k >= 0")
    if k == 0 or is_zero(a):
        return a
    return (0,) * k + a


# ----------------------------
# Add / subtract
# ----------------------------

def add(a: Limbs, b: Limbs) -> Limbs:
    if len(a) < len(b):
        a, b = b, a
    out: List[int] = []
    carry = 0
    lb = len(b)
    for i in range(len(a)):
        s = a[i] + (b[i] if i < lb else 0) + carry
        if s >= RADIX:
            out.append(s - RADIX)
            carry = 1
        else:
            out.append(s)
            carry = 0
    if carry:
        out.append(carry)
    return tuple(out)


def sub(a: Limbs, b: Limbs) -> Limbs:
    """Return a - b. Precondition: a >= b as magnitudes (caller guarantees it)."""
    if len(b) > len(a):
        raise InvariantViolation("sub requires a >= b")
    out: List[int] = []
    borrow = 0
    lb = len(b)
    for i in range(len(a)):
        d = a[i] - (b[i] if i < lb else 0) - borrow
        if d < 0:
            out.append(d + RADIX)
            borrow = 1
        else:
            out.append(d)
            borrow = 0
    if borrow:
        raise InvariantViolation("sub requires a >= b")
    return trim(out)


# ----------------------------
# Multiply
# ----------------------------

def mul_small(a: Limbs, k: int) -> Limbs:
    """Multiply by a single limb value 0 <= k < RADIX."""
    if k < 0 or k > LIMB_MAX:
        raise InvariantViolation(f"mul_small expects a single limb, got {k}")
    if k == 0 or is_zero(a):
        return ZERO
    if k == 1:
        return a
    out: List[int] = []
    carry = 0
    for x in a:
        carry, r = divmod(x * k + carry, RADIX)
        out.append(r)
    if carry:
        out.append(carry)
    return tuple(out)


def mul(a: Limbs, b: Limbs) -> Limbs:
    """Schoolbook O(n*m) multiplication."""
    if is_zero(a) or is_zero(b):
        return ZERO
    la, lb = len(a), len(b)
    out = [0] * (la + lb)
    for i in range(la):
        ai = a[i]
        if ai == 0:
            continue
        carry = 0
        for j in range(lb):
            carry, out[i + j] = divmod(out[i + j] + ai * b[j] + carry, RADIX)
        out[i + lb] = carry
    return trim(out)


# ----------------------------
# Divide
# ----------------------------

def divmod_small(a: Limbs, k: int) -> Tuple[Limbs, int]:
    """Short division by a single limb value 0 < k < RADIX."""
    if k == 0:
        raise ZeroDivisionError("division by zero in divmod_small")
    if k < 0 or k > LIMB_MAX:
        raise InvariantViolation(f"divmod_small expects a single limb, got {k}")
    out = [0] * len(a)
    rem = 0
    for i in range(len(a) - 1, -1, -1):
        out[i], rem = divmod(rem * RADIX + a[i], k)
    return trim(out), rem


def _scale(a: Limbs, d: int) -> List[int]:
    """Multiply by d and always return len(a)+1 limbs (top may be zero)."""
    out: List[int] = []
    carry = 0
    for x in a:
        carry, r = divmod(x * d + carry, RADIX)
        out.append(r)
    out.append(carry)
    return out


def divmod_(a: Limbs, b: Limbs) -> Tuple[Limbs, Limbs]:
    """Return (quotient, remainder) with a = q*b + r and 0 <= r < b.

    Precondition: b is nonzero.
    """
    if is_zero(b):
        raise ZeroDivisionError("division by zero in limbs.divmod_")
    if compare(a, b) < 0:
        return ZERO, a
    if len(b) == 1:
        q, r = divmod_small(a, b[0])
        return q, (r,)

    # Normalise: the scaled divisor keeps its length and gets top limb >= RADIX/2.
    d = RADIX // (b[-1] + 1)
    u = _scale(a, d)
    v = _scale(b, d)
    if v[-1] != 0:
        raise InvariantViolation("normalised divisor grew a limb")
    v.pop()
    n = len(v)
    m = len(u) - n - 1
    v_top = v[-1]
    v_next = v[-2]
    _dbg(f"divmod_: len(a)={len(a)}, len(b)={n}, d={d}, v_top={v_top}")

    q = [0] * (m + 1)
    for j in range(m, -1, -1):
        # Trial digit from the top two limbs of the current window.
        num = u[j + n] * RADIX + u[j + n - 1]
        qhat, rhat = divmod(num, v_top)
        if qhat > LIMB_MAX:
            qhat = LIMB_MAX
            rhat = num - qhat * v_top
        # Correct downward with the second divisor limb (at most twice).
        while rhat < RADIX and qhat * v_next > rhat * RADIX + u[j + n - 2]:
            qhat -= 1
            rhat += v_top

        # Multiply and subtract qhat * v from u[j .. j+n].
        carry = 0
        borrow = 0
        for i in range(n):
            carry, p = divmod(qhat * v[i] + carry, RADIX)
            t = u[i + j] - p - borrow
            if t < 0:
                u[i + j] = t + RADIX
                borrow = 1
            else:
                u[i + j] = t
                borrow = 0
        t = u[j + n] - carry - borrow

        if t < 0:
            # Trial digit was one too high: add the divisor back once.
            _dbg(f"divmod_: add-back at j={j}, qhat={qhat}")
            u[j + n] = t + RADIX
            qhat -= 1
            carry = 0
            for i in range(n):
                carry, u[i + j] = divmod(u[i + j] + v[i] + carry, RADIX)
            u[j + n] = (u[j + n] + carry) % RADIX
        else:
            u[j + n] = t

        q[j] = qhat

    # Undo normalisation on the remainder.
    rem, spill = divmod_small(trim(u[:n]), d)
    if spill != 0:
        raise InvariantViolation("scaled remainder not divisible by normaliser")
    return trim(q), rem


__all__ = [
    "Limbs",
    "ZERO",
    "ONE",
    "trim",
    "check",
    "is_zero",
    "is_odd",
    "from_int",
    "to_int",
    "compare",
    "shift_left",
    "add",
    "sub",
    "mul_small",
    "mul",
    "divmod_small",
    "divmod_",
]
