"""Sign prefixes and padding produced by the '+', ' ', '-' and '0' flags."""

from __future__ import annotations

import math
import struct

from .formatspec import Flags
from .numbers import digit_count, float_length


def _single_precision(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def sign_prefix(space: bool, plus: bool, value: float) -> str:
    """'+' for a non-negative value under '+', ' ' under a lone ' ' flag."""
    if plus:
        return "+" if value >= 0 else ""
    if space:
        return " "
    return ""


def _zero_fill(flags: Flags, length: int) -> str:
    if flags.zero <= 0 or flags.minus != 0:
        return ""
    count = flags.zero - length
    if flags.plus or flags.space:
        count -= 1
    return "0" * max(count, 0)


def int_zero_pad(flags: Flags, value: int) -> str:
    """Zeros that fill an integer up to the '0' width."""
    return _zero_fill(flags, digit_count(value))


def float_zero_pad(flags: Flags, value: float) -> str:
    """Zeros that fill a fixed-point value, narrowed to single precision."""
    return _zero_fill(flags, float_length(_single_precision(value), False))


def trailing_pad(minus: int, plus: bool, space: bool, printed: int) -> str:
    """Spaces after a field to reach the '-' width, one fewer under '+' or ' '."""
    if minus <= 0:
        return ""
    count = minus - printed
    if plus or space:
        count -= 1
    return " " * max(count, 0)


def string_sign_prefix(space: bool, plus: bool) -> str:
    """'+' under the '+' flag, ' ' under a lone ' ' flag."""
    if plus:
        return "+"
    if space:
        return " "
    return ""


def string_zero_pad(flags: Flags, text: str) -> str:
    """Zeros that fill a string up to the '0' width."""
    return _zero_fill(flags, len(text.split("\0", 1)[0]))