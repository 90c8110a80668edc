"""Digit-string arithmetic on signed numbers that may carry a fractional part.

Numbers are strings such as ``"12"``, ``"-3.25"`` or ``".5"``.  Each
operation works digit by digit on the text: the operands are aligned and
carries are pushed along, and the sign of the result comes from
comparing the operands.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ParsedNumber",
    "strip",
    "compare",
    "parse",
    "add",
    "sub",
    "mul",
    "divide",
    "mod",
]

_ZERO = ord("0")


def _digit(ch: str) -> int:
    return ord(ch) - _ZERO


def _char(value: int) -> str:
    return chr(_ZERO + value)


def _trunc_div(a: int, b: int) -> int:
    """Quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _unsign(s: str) -> tuple[bool, str]:
    if s.startswith("-"):
        return True, s[1:]
    return False, s


def _drop_point(s: str) -> tuple[str, int]:
    """Remove the first decimal point; return the digits and the fraction length."""
    head, dot, tail = s.partition(".")
    if not dot:
        return s, 0
    return head + tail, len(tail)


@dataclass(frozen=True)
class ParsedNumber:
    """A number split into its sign, integer digits and fraction digits."""

    negative: bool
    integer: str
    fraction: str


def strip(s: str) -> str:
    """Remove zeros and decimal points from both ends; ``"0"`` if nothing is left."""
    return s.strip("0.") or "0"


def compare(a: str, b: str) -> int:
    """Compare two numbers after stripping them; return -1, 0 or 1."""
    s1, s2 = strip(a), strip(b)
    if s1 == s2:
        return 0
    n1, n2 = s1.startswith("-"), s2.startswith("-")
    if n1 != n2:
        return -1 if n1 else 1
    order = 1 if (len(s1), s1) > (len(s2), s2) else -1
    return -order if n1 else order


def parse(s: str) -> ParsedNumber:
    """Split a number into sign, integer part and fraction part."""
    negative, body = _unsign(s)
    integer, _, fraction = body.partition(".")
    return ParsedNumber(negative, integer or "0", fraction)


def add(a: str, b: str) -> str:
    """Sum of two signed numbers."""
    pa, pb = parse(a), parse(b)
    dec_len = max(len(pa.fraction), len(pb.fraction))
    int_len = max(len(pa.integer), len(pb.integer))
    left = pa.integer.rjust(int_len, "0") + pa.fraction.ljust(dec_len, "0")
    right = pb.integer.rjust(int_len, "0") + pb.fraction.ljust(dec_len, "0")

    digits = []
    carry = 0
    for x, y in zip(reversed(left), reversed(right)):
        n1, n2 = _digit(x), _digit(y)
        total = (-n1 if pa.negative else n1) + (-n2 if pb.negative else n2) + carry
        carry, d = divmod(total, 10)
        digits.append(_char(d))
    digits.reverse()

    res_int = "".join(digits[:int_len])
    res_dec = "".join(digits[int_len:])
    if carry:
        res_int = _char(carry) + res_int

    res_int = res_int.lstrip("0") or "0"
    res_dec = res_dec.rstrip("0")

    negative = False
    if not (res_int == "0" and not res_dec):
        if res_int.startswith("-"):
            negative = True
            res_int = res_int[1:]
        elif pa.negative and pb.negative:
            negative = True
        elif pa.negative or pb.negative:
            order = compare(a, b)
            negative = (order == -1 and pa.negative) or (order == 1 and pb.negative)

    result = res_int + ("." + res_dec if res_dec else "")
    return "-" + result if negative else result


def sub(a: str, b: str) -> str:
    """Difference ``a - b``, computed as ``a`` plus the negation of ``b``."""
    negated = b[1:] if b.startswith("-") else "-" + b
    return add(a, negated)


def mul(a: str, b: str) -> str:
    """Product of two signed numbers."""
    na, sa = _unsign(a)
    nb, sb = _unsign(b)
    sa, d1 = _drop_point(sa)
    sb, d2 = _drop_point(sb)

    v1 = [_digit(ch) for ch in reversed(sa)]
    v2 = [_digit(ch) for ch in reversed(sb)]
    cells = [0] * (len(v1) + len(v2))
    for i, x in enumerate(v1):
        for j, y in enumerate(v2):
            cells[i + j] += x * y
    for i in range(len(cells) - 1):
        q = _trunc_div(cells[i], 10)
        cells[i + 1] += q
        cells[i] -= 10 * q

    dec = d1 + d2
    parts = []
    for i in range(len(cells) - 1, -1, -1):
        if dec and i == dec - 1:
            parts.append(".")
        parts.append(_char(cells[i]))
    text = "".join(parts)

    if not any(cells):
        text = "0"
    else:
        if "." in text:
            text = text.rstrip("0")
            if text.endswith("."):
                text = text[:-1]
        if text[0] == "0" and len(text) > 1 and text[1] != ".":
            text = text[1:]

    if na != nb and text != "0":
        text = "-" + text
    return text


def divide(a: str, b: str, precision: int) -> str:
    """Quotient ``a / b`` with ``precision`` digits after the decimal point.

    Raises ZeroDivisionError when ``b`` is zero and ValueError for a
    negative precision.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    na, sa = _unsign(a)
    nb, sb = _unsign(b)
    sa, d1 = _drop_point(sa)
    sb, d2 = _drop_point(sb)

    shift = d2 - d1 + precision
    if shift > 0:
        sa += "0" * shift
    else:
        sb += "0" * -shift
    if strip(sb) == "0":
        raise ZeroDivisionError("division by zero")

    quotient = []
    remainder = "0"
    for ch in sa:
        remainder += ch
        count = 0
        while compare(remainder, sb) >= 0:
            remainder = sub(remainder, sb)
            count += 1
        quotient.append(_char(count))

    digits = "".join(quotient)
    cut = len(digits) - precision
    result = strip(digits[:cut] + "." + digits[cut:])
    if na != nb and result != "0":
        result = "-" + result
    return result


def mod(a: str, b: str) -> str:
    """Remainder of ``a`` by ``b``, carrying the sign of ``a``.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    na, sa = _unsign(a)
    _, sb = _unsign(b)
    ha, dot_a, ta = sa.partition(".")
    hb, dot_b, tb = sb.partition(".")
    d1 = len(ta) if dot_a else 0
    d2 = len(tb) if dot_b else 0
    maxd = max(d1, d2)

    sa = ha + ta if dot_a else sa + "0" * maxd
    sb = hb + tb if dot_b else sb + "0" * maxd
    width = max(len(sa), len(sb))
    sa, sb = sa.rjust(width, "0"), sb.rjust(width, "0")
    if strip(sb) == "0":
        raise ZeroDivisionError("modulo by zero")

    remainder = "0"
    for ch in sa:
        remainder = add(mul(remainder, "10"), ch)
        while compare(remainder, sb) >= 0:
            remainder = sub(remainder, sb)

    if maxd > 0:
        cut = max(len(remainder) - maxd, 0)
        remainder = remainder[:cut] + "." + remainder[cut:]

    remainder = strip(remainder)
    if na and remainder != "0":
        remainder = "-" + remainder
    return remainder