"""Rendering of the floating-point conversions '%f', '%F', '%e', '%E' and '%a'.

Each renderer returns a ``Rendered`` holding the written text, the amount added
to the running character count and how far the format cursor moves past the
'%'. The counts keep the formatter's quirks.
"""

from __future__ import annotations

from dataclasses import replace

from .formatspec import conversion_span, parse_flags
from .numbers import (
    _c_int,
    count_power,
    exponent_suffix,
    float_length,
    format_float,
    format_int,
)
from .padding import float_zero_pad, sign_prefix, trailing_pad
from .specifiers_int import Rendered, hex_digits


def _as_float(value: float) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"expected a number, got {type(value).__name__}")


def render_float(value: float, fmt: str, index: int, upper: bool = False) -> Rendered:
    """A '%f' or '%F' conversion.

    The lower-case form reads its '-' width one short, the upper-case form its
    '0' width; only the digits written by the fixed-point writer are counted.
    """
    nb = _as_float(value)
    flags = parse_flags(fmt, index)
    if upper:
        adjusted = replace(flags, zero=flags.zero - 1)
    else:
        adjusted = replace(flags, minus=flags.minus - 1)
    body, printed = format_float(nb, upper)
    text = (
        sign_prefix(flags.space, flags.plus, _c_int(nb))
        + float_zero_pad(adjusted, nb)
        + body
        + trailing_pad(adjusted.minus, flags.plus, flags.space, printed)
    )
    return Rendered(text=text, count=printed, advance=conversion_span(fmt, index))


def render_exponent(value: float, fmt: str, index: int, upper: bool = False) -> Rendered:
    """A '%e' or '%E' conversion.

    Zero is written as '0.000000e+00'; a magnitude of exactly one, or NaN,
    writes nothing beyond its sign.
    """
    nb = _as_float(value)
    power = count_power(nb)
    advance = conversion_span(fmt, index)
    sign = ""
    if nb < 0:
        sign = "-"
        nb = -nb
    if nb == 0:
        suffix = "E+00" if upper else "e+00"
        return Rendered(text=sign + "0.000000" + suffix, count=4, advance=advance)
    if nb > 1:
        mantissa = nb / power
        positive = True
    elif nb < 1:
        power *= 10
        mantissa = nb * power
        positive = False
    else:
        return Rendered(text=sign, count=0, advance=advance)
    suffix, suffix_count = exponent_suffix(power, positive, upper)
    text = sign + format_float(mantissa, False)[0] + suffix
    count = float_length(mantissa, False) + suffix_count
    return Rendered(text=text, count=count, advance=advance)


def count_power_two(nb: float) -> int:
    """Binary exponent found by doubling or halving from one.

    Above one it is one less than the number of doublings needed to reach
    ``nb``; below one it is minus the number of halvings needed to fall to it.
    """
    if nb < 0:
        raise ValueError("cannot find the binary exponent of a negative value")
    exp = 0
    power = 1.0
    if nb > 1:
        while power < nb:
            power *= 2
            exp += 1
        exp -= 1
    if nb < 1:
        while power > nb:
            power /= 2
            exp += 1
        exp = -exp
    return exp


def power_two(nb: float) -> float:
    """Two raised to ``count_power_two(nb)``.

    For an exponent of zero the scale keeps its starting value of two.
    """
    exp = count_power_two(nb)
    if exp == 0:
        return 2.0
    result = 2.0
    if exp > 0:
        for _ in range(exp):
            result *= 2
    else:
        for _ in range(-exp):
            result /= 2
    return result / 2


def _binary_exponent(nb: float, exact: bool, exp: int) -> str:
    exp += count_power_two(nb)
    if exact:
        exp += 1
    if exp > 0:
        return f"p+{exp}"
    if exp < 0:
        return f"p{exp}"
    return ""


def _hex_fraction(calc: float, left: int) -> tuple[str, float]:
    calc = (calc - left) * 16
    left = _c_int(calc)
    digits: list[str] = []
    precision = 12
    while precision > -1 and calc != 0:
        digits.append(format_int(left) if left <= 9 else hex_digits(left))
        calc = (calc - left) * 16
        left = _c_int(calc)
        precision -= 1
    return "".join(digits), calc


def _hex_float_body(nb: float) -> str:
    scale = power_two(nb)
    calc = nb / scale
    left = _c_int(calc)
    check = scale / 2 if nb == 2 else scale
    if nb == check * 2 or nb == check:
        return "0x1" + _binary_exponent(nb, True, -1 if nb < 1 else 0)
    digits, calc = _hex_fraction(calc, left)
    parts = ["0x", format_int(left), ".", digits]
    if calc != 0:
        parts.append(hex_digits(_c_int(calc)))
    parts.append(_binary_exponent(nb, False, 0))
    return "".join(parts)


def render_hex_float(value: float, fmt: str, index: int) -> Rendered:
    """A '%a' conversion in hexadecimal floating-point notation; nothing is counted."""
    nb = _as_float(value)
    advance = conversion_span(fmt, index)
    sign = ""
    if nb < 0:
        sign = "-"
        nb = -nb
    if nb == 1:
        body = "0x1p+0"
    elif nb == 0:
        body = "0x0p+0"
    else:
        body = _hex_float_body(nb)
    return Rendered(text=sign + body, count=0, advance=advance)