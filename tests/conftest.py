from __future__ import annotations
import random
from typing import Callable, List, Tuple

import pytest

# Import project primitives
from exactnum.core import RADIX


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def rand_magnitude(rng: random.Random, n_limbs: int) -> int:
    """Random non-negative int with exactly n_limbs base-10^9 limbs."""
    if n_limbs <= 0:
        return 0
    top = rng.randrange(1, RADIX)
    rest = rng.randrange(0, RADIX ** (n_limbs - 1)) if n_limbs > 1 else 0
    return top * RADIX ** (n_limbs - 1) + rest


def trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """Reference C-style division on native ints (quotient toward zero)."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def rand_mag() -> Callable[[random.Random, int], int]:
    return rand_magnitude


@pytest.fixture()
def ref_divmod() -> Callable[[int, int], Tuple[int, int]]:
    return trunc_divmod


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(20240917)


@pytest.fixture()
def signed_pairs(rng: random.Random) -> List[Tuple[int, int]]:
    """Mixed-sign operand pairs spanning 1..5 limbs, divisor never zero."""
    pairs = []
    for la in range(1, 6):
        for lb in range(1, 6):
            for _ in range(4):
                a = rand_magnitude(rng, la) * rng.choice((1, -1))
                b = rand_magnitude(rng, lb) * rng.choice((1, -1))
                pairs.append((a, b))
    pairs.extend([(0, 1), (0, -7), (1, 1), (-1, 1), (RADIX, -1), (-(RADIX ** 3), RADIX)])
    return pairs

