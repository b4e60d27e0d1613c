"""
Conversions between text and numbers for runtime values.

Text is turned into a number with a small lark grammar describing the decimal
literals the block runtime accepts. Numbers are turned back into text the way
JavaScript's `Number.prototype.toString` does it, since that is what the
runtime displays and stores.
"""

__all__ = ["str_to_num", "num_to_str", "number_tree", "WHITESPACE"]

import decimal
import functools
import math

import lark

import sb3value


# Characters with the Unicode White_Space property. This is narrower than
# str.isspace(), which also treats the ASCII separators 0x1c-0x1f as spaces.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Decimal point positions that still print without an exponent
_MAX_FIXED = 21
_MIN_FIXED = -6


def str_to_num(text):
    """Convert text to a number, or None if it does not hold one.

    Surrounding whitespace is ignored. Exactly `inf`, `+inf` and `-inf` are
    refused, other spellings of infinity such as `Infinity` or `INF` are
    accepted. NaN is never returned.

    Args:
        text: (str) Text to convert
    Returns:
        (float | None) Parsed number
    """
    text = text.strip(WHITESPACE)
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    if text in ("inf", "+inf", "-inf") or not text:
        return None

    try:
        number_tree(text)
    except lark.exceptions.LarkError:
        return None

    num = float(text)
    if math.isnan(num):
        return None
    return num


def num_to_str(num):
    """Format a number as the JavaScript runtime would.

    Integral values print without a fractional part, very large and very small
    magnitudes switch to exponent notation, and the infinities print as
    `Infinity` and `-Infinity`.

    Args:
        num: (float) Number to format
    Returns:
        (str) Formatted text
    Raises:
        EvalError: If num is NaN
    """
    if math.isnan(num):
        raise sb3value.EvalError("NaN cannot be formatted as a runtime number")
    if num == 0.0:
        return "0"
    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"

    sign = "-" if num < 0 else ""

    # repr gives the shortest digits that round trip back to the same float
    shortest = decimal.Decimal(repr(abs(num))).normalize()
    _, digit_tuple, exponent = shortest.as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = exponent + k

    if k <= n <= _MAX_FIXED:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_FIXED:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_FIXED < n <= 0:
        return sign + "0." + "0" * -n + digits

    power = n - 1
    power_sign = "+" if power >= 0 else "-"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{power_sign}{abs(power)}"


def number_tree(text):
    """Parse already trimmed text with the number literal grammar.

    Args:
        text: (str) Text to parse
    Returns:
        (lark.Tree) Parse tree
    Raises:
        lark.exceptions.LarkError: If text is not a number literal
    """
    return _number_parser().parse(text)


@functools.cache
def _number_parser():
    """(lark.Lark) Number literal parser, built on first use and then shared."""
    return lark.Lark.open("lark/number.lark", rel_to=__file__, parser="lalr")
