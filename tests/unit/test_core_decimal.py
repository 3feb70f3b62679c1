import pytest

from exactnum.core import (
    BigInt,
    Decimal,
    ParseError,
    NegativeExponentError,
    ExponentOverflowError,
    EXP_MAX,
    EXP_MIN,
)


def D(x) -> Decimal:
    return Decimal.from_string(x) if isinstance(x, str) else Decimal(x)


# -----------------------------
# Parsing & normalisation
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", "123.45"),
        ("-0.00123", "-0.00123"),
        ("1e-3", "0.001"),
        ("1E3", "1000"),
        ("+2.5e+1", "25"),
        ("1.230", "1.23"),
        (".5", "0.5"),
        ("-0", "0"),
        ("-0.000", "0"),
        ("0e5", "0"),
        ("12.5e-4", "0.00125"),
        ("007.100", "7.1"),
        ("1200", "1200"),
    ],
)
def test_parse_to_string(text, expected):
    print(f"[decimal-parse] {text!r} -> expect {expected!r}")
    v = D(text)
    print("to_string ->", str(v), "; (m, e) ->", v.as_tuple())
    assert str(v) == expected


@pytest.mark.parametrize(
    "text,why",
    [
        ("", "empty string"),
        ("invalid", "invalid digit"),
        ("-", "sign only"),
        ("+", "sign only"),
        ("1.", "decimal point without fractional digits"),
        (".", "decimal point without fractional digits"),
        ("1.2.3", "multiple decimal points"),
        ("1e", "exponent missing"),
        ("1e-", "exponent sign only"),
        ("1e1.5", "invalid exponent digit"),
        ("e5", "no digits"),
        ("1a.5", "invalid integer digit"),
        ("1.5a", "invalid fractional digit"),
        ("1-2", "invalid digit"),
    ],
)
def test_parse_rejects_invalid(text, why):
    print(f"[decimal-parse-invalid] {text!r} -> expect ParseError ({why})")
    with pytest.raises(ParseError) as ei:
        D(text)
    assert ei.value.reason == why


def test_parse_exponent_out_of_range():
    with pytest.raises(ExponentOverflowError):
        D("1e99999999999999")
    with pytest.raises(ExponentOverflowError):
        D(f"1e{EXP_MAX + 1}")
    assert D(f"1e{EXP_MAX}").exponent == EXP_MAX


def test_normalisation_invariants():
    print("[normalize] nonzero mantissa not divisible by 10; zero has exponent 0")
    for text in ("120", "1.230", "1000000000000000000000", "-5e10", "0.000", "3"):
        v = D(text)
        print(text, "->", v.as_tuple())
        if v.is_zero():
            assert v.exponent == 0
        else:
            assert (v.mantissa % 10) != 0
    assert D("120").as_tuple() == (BigInt(12), 1)
    assert Decimal.from_components(120, 0) == Decimal.from_components(12, 1)
    assert Decimal.from_components(BigInt(10) ** 20, -20) == D("1")


def test_constructors_from_ints():
    assert D(5) == D("5")
    assert D(BigInt(-30)).as_tuple() == (BigInt(-3), 1)
    assert Decimal("2.50") == D("2.5")
    assert Decimal(Decimal("7")) == 7
    with pytest.raises(TypeError):
        Decimal(1.5)  # type: ignore[arg-type]


# -----------------------------
# Comparison & hashing
# -----------------------------

def test_equality_and_ordering():
    a, b = D("1.23"), D("1.230")
    assert a == b
    assert str(D("1.230")) == "1.23"
    c = D("1.24")
    assert a < c
    d = D("-1.23")
    assert d < a
    assert D("10") > D("9.999")
    assert D("-0.5") < D("-0.49")
    assert D("100") == 100 and D("100") == BigInt(100)
    assert BigInt(3) < D("3.5")


def test_hash_matches_equality():
    assert hash(D("1.230")) == hash(D("1.23"))
    assert hash(D("1200")) == hash(1200)
    assert hash(D("-7")) == hash(-7) == hash(BigInt(-7))
    assert len({D("0.1"), D("0.10"), D("1e-1")}) == 1


def test_hash_value_is_stable_bigint():
    h1 = D("1.5").hash_value()
    h2 = D("1.50").hash_value()
    assert isinstance(h1, BigInt)
    assert h1 == h2
    assert h1 != D("15").hash_value()


# -----------------------------
# Arithmetic
# -----------------------------

def test_add_sub_examples():
    assert str(D("1.23") + D("4.56")) == "5.79"
    assert str(D("-1.23") + D("1.23")) == "0"
    assert str(D("5.67") - D("1.23")) == "4.44"
    assert str(D("1.23") - D("5.67")) == "-4.44"
    assert str(D("0.1") + D("0.2")) == "0.3"
    assert str(D("1e10") + D("1e-10")) == "10000000000.0000000001"


def test_add_sub_inverse():
    values = ["0", "1.5", "-2.25", "1e20", "-3e-15", "123456789.987654321"]
    for x in values:
        for y in values:
            assert (D(x) + D(y)) - D(y) == D(x)


def test_multiplication_examples():
    assert str(D("1.2") * D("3.4")) == "4.08"
    assert str(D("2.5") * D("-0.5")) == "-1.25"
    assert D("0.5") * D("2") == 1
    assert (D("1e-5") * D("1e5")).as_tuple() == (BigInt(1), 0)


def test_mixed_operands():
    assert D("1.5") + 1 == D("2.5")
    assert 1 + D("1.5") == D("2.5")
    assert BigInt(2) - D("0.5") == D("1.5")
    assert D("0.5") * BigInt(4) == 2
    assert 1 / D("4") == D("0.25")


def test_division_default_precision_truncates():
    assert str(D("10") / D("3")) == "3.3333333333"
    assert str(D("-10") / D("3")) == "-3.3333333333"
    assert str(D("1") / D("8")) == "0.125"


@pytest.mark.parametrize(
    "a,b,n,expected",
    [
        ("10", "3", 2, "3.33"),
        ("2", "3", 2, "0.66"),
        ("-2", "3", 2, "-0.66"),
        ("1", "3", 0, "0"),
        ("7.5", "0.25", 0, "30"),
        ("1", "1e-3", 1, "1000"),
        ("123.456", "1", 1, "123.4"),
    ],
)
def test_div_truncates_to_n_digits(a, b, n, expected):
    print(f"[div] {a} / {b} @ {n} -> expect {expected}")
    got = D(a).div(D(b), n)
    print("got ->", got)
    assert str(got) == expected


@pytest.mark.parametrize(
    "a,b,n,expected",
    [
        ("10", "3", 0, "3"),
        ("10", "3", 2, "3.33"),
        ("2", "3", 2, "0.67"),
        ("-2", "3", 2, "-0.67"),
        ("2.5", "1", 0, "3"),
        ("-2.5", "1", 0, "-3"),
        ("2.4999", "1", 0, "2"),
        ("0.999", "1", 2, "1"),
        ("-0.999", "1", 2, "-1"),
        ("9.995", "1", 2, "10"),
        ("0.5", "1", 0, "1"),
        ("-0.5", "1", 0, "-1"),
        ("-0.04", "1", 1, "0"),
        ("1.05", "1", 1, "1.1"),
        ("0", "7", 3, "0"),
    ],
)
def test_div_round_half_up_away_from_zero(a, b, n, expected):
    print(f"[div_round] {a} / {b} @ {n} -> expect {expected}")
    got = D(a).div_round(D(b), n)
    print("got ->", got)
    assert str(got) == expected


def test_div_round_default_precision():
    assert str(D("2").div_round(D("3"))) == "0.6666666667"


@pytest.mark.parametrize("method", ["div", "div_round", "truediv"])
def test_division_by_zero_raises(method):
    print(f"[decimal-div-zero] {method} -> expect ZeroDivisionError")
    a = D("1.5")
    with pytest.raises(ZeroDivisionError):
        if method == "truediv":
            a / D("0")
        else:
            getattr(a, method)(D("0"), 2)


def test_negative_precision_raises():
    with pytest.raises(ValueError):
        D("1").div(D("3"), -1)
    with pytest.raises(ValueError):
        D("1").div_round(D("3"), -1)


# -----------------------------
# Exponentiation
# -----------------------------

def test_pow_examples():
    assert str(D("1.5").pow(3)) == "3.375"
    assert D("-2").pow(3) == D("-8")
    assert D("-2").pow(BigInt(4)) == 16
    assert str(D("-0.1").pow(3)) == "-0.001"
    assert D("1e2").pow(3) == D("1e6")
    assert D("7.25") ** 2 == D("52.5625")


def test_pow_zero_and_negative():
    assert D("0").pow(0) == 1
    assert D("-3.5").pow(0) == 1
    assert D("0").pow(4) == 0
    with pytest.raises(NegativeExponentError):
        D("2").pow(-1)


def test_pow_exponent_overflow():
    print("[pow-overflow] (1e-1)^(2^31 + 1) leaves the 32-bit exponent range")
    with pytest.raises(ExponentOverflowError):
        D("0.1").pow(2 ** 31 + 1)
    with pytest.raises(ExponentOverflowError):
        D("1e1000000").pow(3000)
    assert D("0.1").pow(2 ** 31).exponent == EXP_MIN
    assert D("10").pow(2 ** 31 - 1).exponent == EXP_MAX


def test_multiplication_exponent_overflow():
    big = Decimal.from_components(1, EXP_MAX)
    with pytest.raises(ExponentOverflowError):
        big * big


# -----------------------------
# Parts & fuzzy equality
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.456", "123"),
        ("-0.789", "0"),
        ("-123.456", "-123"),
        ("1.2e3", "1200"),
        ("0", "0"),
        ("5e-10", "0"),
    ],
)
def test_integer_part_truncates_toward_zero(text, expected):
    assert str(D(text).integer_part()) == expected


def test_fractional_part():
    assert D("123.456").fractional_part() == D("0.456")
    assert D("-1.25").fractional_part() == D("-0.25")
    assert D("7").fractional_part() == 0


def test_decimal_weekeq():
    a, b = D("1.2345"), D("1.2346")
    assert a.decimal_weekeq(b, 3)
    assert not a.decimal_weekeq(b, 4)
    assert not D("1.5").decimal_weekeq(D("2.5"), 0)
    assert D("1.5").decimal_weekeq(D("1.9"), 0)
    assert D("-1.23").decimal_weekeq(D("-1.2399"), 2)
    assert D("3").decimal_weekeq(D("3"), 5)
    assert not a.decimal_weekeq(b, -1)


# -----------------------------
# Conversions
# -----------------------------

def test_str_repr_float_abs():
    assert str(D("-0.5")) == "-0.5"
    assert repr(D("-0.5")) == "Decimal('-0.5')"
    assert D("1.25").to_float() == 1.25
    assert D("-3e2").to_float() == -300.0
    assert abs(D("-2.5")) == D("2.5")
    assert -D("2.5") == D("-2.5")
    assert D("-2.5").sign() == -1
    assert bool(D("0")) is False
