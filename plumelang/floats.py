"""Single-precision number handling.

Plume values are text. Arithmetic and comparisons parse that text into an
IEEE-754 single-precision number, compute, and format the result back to
the shortest decimal text that reads back to the same single-precision value.
Results are never written in exponent notation, integral values have no
fractional part, and the special values are spelled ``inf``, ``-inf`` and
``NaN``.


File: floats.py
Version: 0.1.0
License: MIT
"""

import math
import re
import struct
from decimal import Decimal

_NUMBER = re.compile(
    r'[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)',
    re.IGNORECASE,
)


def to_single(value: float) -> float:
    """
    Round a Python float to the nearest single-precision value.

    Values beyond the single-precision range become signed infinity.
    """
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_number(text: str) -> float:
    """
    Parse numeric text into a single-precision value.

    Returns:
        float: The value, rounded to single precision.

    Raises:
        ValueError: If the text is not a number.
    """
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return to_single(float(text))


def format_number(value: float) -> str:
    """
    Format a single-precision value as its shortest round-tripping decimal.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'

    value = to_single(value)
    for precision in range(1, 10):
        digits = f'{value:.{precision}g}'
        if to_single(float(digits)) == value:
            break
    text = format(Decimal(digits), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def add(lhs: float, rhs: float) -> float:
    """Single-precision sum."""
    return to_single(lhs + rhs)


def sub(lhs: float, rhs: float) -> float:
    """Single-precision difference."""
    return to_single(lhs - rhs)


def mul(lhs: float, rhs: float) -> float:
    """Single-precision product."""
    return to_single(lhs * rhs)


def div(lhs: float, rhs: float) -> float:
    """IEEE division: x/0 is a signed infinity and 0/0 is NaN."""
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return to_single(lhs / rhs)
