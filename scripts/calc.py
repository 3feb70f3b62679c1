"""Exact calculator demo: evaluate `a OP b` with BigInt or Decimal operands.

Operators:
  +  -  *      exact
  /            truncating division to --places fractional digits
  divr         half-up rounding division to --places fractional digits
  %            BigInt remainder (sign follows the dividend)
  ^            power (integer exponent)

Operands that contain '.', 'e' or 'E' are parsed as Decimal, others as BigInt.
Pass --decimal to force Decimal for both.
"""
from __future__ import annotations

import argparse
import sys

from exactnum.core import (
    BigInt,
    Decimal,
    DEFAULT_DIV_PRECISION,
    ExactNumError,
    fmt_sci,
    group_digits,
)

OPS = ("+", "-", "*", "/", "divr", "%", "^")


def parse_operand(text: str, force_decimal: bool):
    if force_decimal or any(c in text for c in ".eE"):
        return Decimal.from_string(text)
    return BigInt.from_string(text)


def evaluate(a, op: str, b, places: int):
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        return Decimal(a).div(Decimal(b), places)
    if op == "divr":
        return Decimal(a).div_round(Decimal(b), places)
    if op == "%":
        if isinstance(a, Decimal) or isinstance(b, Decimal):
            raise ExactNumError("% is only defined for integer operands")
        return a % b
    if op == "^":
        if isinstance(b, Decimal):
            if b.exponent < 0:
                raise ExactNumError("exponent must be an integer")
            b = b.integer_part()
        return a.pow(b)
    raise ExactNumError(f"unknown operator {op!r}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Exact BigInt/Decimal calculator")
    ap.add_argument("a", help="left operand literal")
    ap.add_argument("op", choices=OPS, help="operator")
    ap.add_argument("b", help="right operand literal")
    ap.add_argument("--places", type=int, default=DEFAULT_DIV_PRECISION,
                    help=f"fractional digits for / and divr (default {DEFAULT_DIV_PRECISION})")
    ap.add_argument("--decimal", action="store_true", help="parse both operands as Decimal")
    ap.add_argument("--sci", type=int, metavar="PLACES", default=None,
                    help="also print scientific notation with PLACES digits")
    ap.add_argument("--group", action="store_true", help="group integer digits with commas")
    args = ap.parse_args(argv)

    try:
        a = parse_operand(args.a, args.decimal)
        b = parse_operand(args.b, args.decimal)
        result = evaluate(a, args.op, b, args.places)
    except ZeroDivisionError:
        print("error: division by zero", file=sys.stderr)
        return 2
    except (ExactNumError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(group_digits(result) if args.group else str(result))
    if args.sci is not None:
        try:
            print(fmt_sci(result, args.sci))
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
