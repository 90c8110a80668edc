from decimal import Decimal

import pytest

from olympiad.decimal_arith import (
    ParsedNumber,
    add,
    compare,
    divide,
    mod,
    mul,
    parse,
    strip,
    sub,
)


def test_strip_all_zeros_gives_zero():
    assert strip("000") == "0"
    assert strip("") == "0"
    assert strip("0.00") == "0"


def test_strip_removes_outer_zeros_and_points():
    assert strip("0012.500") == "12.5"


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("5", "3", 1),
        ("3", "5", -1),
        ("7", "7", 0),
        ("007", "7", 0),
        ("-1", "1", -1),
        ("1", "-1", 1),
        ("123", "45", 1),
        ("-123", "-45", -1),
    ],
)
def test_compare(a, b, expected):
    assert compare(a, b) == expected


@pytest.mark.parametrize("a, b", [("5", "3"), ("-4", "9"), ("120", "7"), ("-8", "-3")])
def test_compare_is_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)


def test_parse_signed_decimal():
    assert parse("-12.34") == ParsedNumber(True, "12", "34")


def test_parse_missing_integer_part():
    assert parse(".5") == ParsedNumber(False, "0", "5")


def test_parse_integer():
    assert parse("42") == ParsedNumber(False, "42", "")


@pytest.mark.parametrize(
    "x, y", [(0, 0), (1, 9), (999, 1), (123456789, 987654321), (50, 50)]
)
def test_add_non_negative_integers(x, y):
    assert add(str(x), str(y)) == str(x + y)


@pytest.mark.parametrize(
    "a, b", [("1.5", "2.25"), ("0.5", "0.5"), ("10.01", "0.99"), ("3.125", "4")]
)
def test_add_non_negative_decimals(a, b):
    result = add(a, b)
    assert Decimal(result) == Decimal(a) + Decimal(b)
    assert not result.endswith("0") or "." not in result


def test_add_opposites_is_zero():
    assert add("5", "-5") == "0"
    assert sub("3.5", "3.5") == "0"


@pytest.mark.parametrize(
    "x, y",
    [(12, 3), (-7, 8), (-6, -9), (0, 123), (99, 99), (123456789, 987654321)],
)
def test_mul_integers(x, y):
    assert mul(str(x), str(y)) == str(x * y)


@pytest.mark.parametrize(
    "a, b", [("1.5", "2"), ("0.5", "0.5"), ("2.25", "-4"), ("3.14", "2.5")]
)
def test_mul_decimals(a, b):
    assert Decimal(mul(a, b)) == Decimal(a) * Decimal(b)


@pytest.mark.parametrize("a, b", [("1.5", "2"), ("37", "-41"), ("0.25", "8.8")])
def test_mul_is_commutative(a, b):
    assert mul(a, b) == mul(b, a)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide("5", "0", 0)


def test_divide_negative_precision_raises():
    with pytest.raises(ValueError):
        divide("5", "2", -1)


def test_divide_smaller_dividend_gives_zero():
    assert divide("3", "7", 0) == "0"
    assert divide("-3", "7", 0) == "0"


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod("5", "0")


def test_mod_smaller_dividend_keeps_it():
    assert mod("2", "5") == "2"
    assert mod("-2", "5") == "-2"
    assert mod("0", "5") == "0"