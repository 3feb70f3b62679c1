"""
Core exception types for exactnum.core.

These are dependency-free and may be imported by all core modules.

Recoverable conditions (bad literals, negative exponents, out-of-range
conversions) have their own types so callers can branch on them. Division by
zero uses the builtin ZeroDivisionError and is treated as a programming error.
"""

__all__ = [
    "ExactNumError",
    "ParseError",
    "NegativeExponentError",
    "RangeError",
    "ExponentOverflowError",
    "InvariantViolation",
]


class ExactNumError(Exception):
    """Base class for exactnum errors."""
    pass


class ParseError(ExactNumError, ValueError):
    """Raised when a textual literal is not a valid BigInt/Decimal.

    Attributes
    ----------
    text : str
        The literal that failed to parse.
    reason : str
        Short description of what was wrong with it.
    """

    def __init__(self, text, reason):
        super().__init__(f"cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


class NegativeExponentError(ExactNumError, ValueError):
    """Raised when a negative exponent is passed to pow()."""
    pass


class RangeError(ExactNumError, OverflowError):
    """Raised when a value does not fit the requested native range."""
    pass


class ExponentOverflowError(RangeError):
    """Raised when a Decimal exponent leaves the signed 32-bit range."""
    pass


class InvariantViolation(ExactNumError):
    """Raised when a kernel precondition or representation invariant is broken."""
    pass
