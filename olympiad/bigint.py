"""Arbitrary-precision integer arithmetic on decimal digit strings.

Numbers are plain strings of decimal digits, optionally preceded by a
single ``-`` sign.  The ``*_abs`` helpers work on unsigned magnitudes;
the signed operations build on them.
"""

from __future__ import annotations

from itertools import chain, repeat, zip_longest

__all__ = [
    "strip_zeros",
    "compare",
    "add_abs",
    "sub_abs",
    "mul_abs",
    "div_abs",
    "mod_abs",
    "add",
    "sub",
    "mul",
    "half",
    "is_even",
    "power",
    "div",
    "mod",
    "difference",
    "six_square_sum",
]


def _split_sign(s: str) -> tuple[bool, str]:
    if s.startswith("-"):
        return True, s[1:]
    return False, s


def _signed(negative: bool, magnitude: str) -> str:
    return "-" + magnitude if negative and magnitude != "0" else magnitude


def strip_zeros(s: str) -> str:
    """Remove leading zeros, keeping a single ``"0"`` for zero."""
    return s.lstrip("0") or "0"


def compare(a: str, b: str) -> int:
    """Compare two unsigned magnitudes; return -1, 0 or 1."""
    s1, s2 = strip_zeros(a), strip_zeros(b)
    k1, k2 = (len(s1), s1), (len(s2), s2)
    return (k1 > k2) - (k1 < k2)


def add_abs(a: str, b: str) -> str:
    """Sum of two unsigned magnitudes."""
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, d = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(d))
    if carry:
        digits.append(str(carry))
    return strip_zeros("".join(reversed(digits)))


def sub_abs(a: str, b: str) -> str:
    """Difference ``a - b`` of unsigned magnitudes; ``a`` must not be less than ``b``."""
    digits = []
    borrow = 0
    for x, y in zip(reversed(a), chain(reversed(b), repeat("0"))):
        d = int(x) - int(y) - borrow
        borrow = 1 if d < 0 else 0
        digits.append(str(d + 10 * borrow))
    return strip_zeros("".join(reversed(digits)))


def mul_abs(a: str, b: str) -> str:
    """Product of two unsigned magnitudes."""
    cells = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            cells[i + j + 1] += int(x) * int(y)
    digits = []
    carry = 0
    for value in reversed(cells):
        carry, d = divmod(value + carry, 10)
        digits.append(str(d))
    return strip_zeros("".join(reversed(digits)))


def _long_division(a: str, b: str) -> tuple[str, str]:
    quotient = []
    remainder = "0"
    for digit in a:
        remainder = strip_zeros(remainder + digit)
        q = next(d for d in range(9, -1, -1) if compare(mul_abs(b, str(d)), remainder) <= 0)
        quotient.append(str(q))
        remainder = sub_abs(remainder, mul_abs(b, str(q)))
    return strip_zeros("".join(quotient)), remainder


def div_abs(a: str, b: str) -> str:
    """Integer quotient of two unsigned magnitudes."""
    if compare(a, b) < 0:
        return "0"
    return _long_division(a, b)[0]


def mod_abs(a: str, b: str) -> str:
    """Remainder of two unsigned magnitudes; ``a`` is returned as is when smaller than ``b``."""
    if compare(a, b) < 0:
        return a
    return strip_zeros(_long_division(a, b)[1])


def add(a: str, b: str) -> str:
    """Signed sum."""
    na, s1 = _split_sign(a)
    nb, s2 = _split_sign(b)
    if na == nb:
        total = add_abs(s1, s2)
        return "-" + total if na else total
    cp = compare(s1, s2)
    if cp == 0:
        return "0"
    if na:
        return "-" + sub_abs(s1, s2) if cp > 0 else sub_abs(s2, s1)
    return sub_abs(s1, s2) if cp > 0 else "-" + sub_abs(s2, s1)


def sub(a: str, b: str) -> str:
    """Signed difference ``a - b``."""
    negated = b[1:] if b.startswith("-") else "-" + b
    return add(a, negated)


def mul(a: str, b: str) -> str:
    """Signed product."""
    na, s1 = _split_sign(a)
    nb, s2 = _split_sign(b)
    return _signed(na != nb, mul_abs(s1, s2))


def half(s: str) -> str:
    """Unsigned magnitude divided by two, rounded down."""
    digits = []
    carry = 0
    for ch in s:
        q, carry = divmod(carry * 10 + int(ch), 2)
        digits.append(str(q))
    return strip_zeros("".join(digits))


def is_even(s: str) -> bool:
    """Whether the number's last digit is even."""
    return int(s[-1]) % 2 == 0


def power(a: str, b: str) -> str:
    """``a`` raised to the non-negative exponent ``b`` by repeated squaring."""
    if b == "0":
        return "1"
    if b == "1":
        return a
    if is_even(b):
        root = power(a, half(b))
        return mul(root, root)
    return mul(a, power(a, sub_abs(b, "1")))


def div(a: str, b: str) -> str:
    """Signed quotient truncated toward zero.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    na, s1 = _split_sign(a)
    nb, s2 = _split_sign(b)
    if strip_zeros(s2) == "0":
        raise ZeroDivisionError("division by zero")
    return _signed(na != nb, div_abs(s1, s2))


def mod(a: str, b: str) -> str:
    """Signed remainder whose sign follows the dividend.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    na, s1 = _split_sign(a)
    _, s2 = _split_sign(b)
    if strip_zeros(s2) == "0":
        raise ZeroDivisionError("modulo by zero")
    return _signed(na, mod_abs(s1, s2))


def difference(a: str, b: str) -> str:
    """Signed difference ``a - b`` of two non-negative digit strings."""
    negative = (len(a), a) < (len(b), b)
    big, small = (b, a) if negative else (a, b)
    return _signed(negative, sub_abs(big, small))


def six_square_sum(n: int) -> str:
    """Sum of the squares of 6, 66, 666, ... with ``n`` terms."""
    total = "0"
    for width in range(1, n + 1):
        term = "6" * width
        total = add(total, mul(term, term))
    return total