import math
import re

import pytest

from bsqsolver.numbers import format_float
from bsqsolver.specifiers_float import (
    count_power_two,
    power_two,
    render_exponent,
    render_float,
    render_hex_float,
)

EXP_PATTERN = re.compile(r"^\d+\.\d+[eE][+-]\d\d$")


@pytest.mark.parametrize("value", [2.5, 0.25, 7.0, 123.5])
def test_float_matches_fixed_point_writer(value):
    rendered = render_float(value, "%f", 0)
    assert (rendered.text, rendered.count) == format_float(value)
    assert rendered.advance == 1


def test_float_negative_gets_sign():
    assert render_float(-2.5, "%f", 0).text == "-" + render_float(2.5, "%f", 0).text


def test_float_plus_flag():
    plain = render_float(2.5, "%f", 0).text
    assert render_float(2.5, "%+f", 0).text == "+" + plain
    negative = render_float(-2.5, "%+f", 0).text
    assert negative.startswith("-")
    assert "+" not in negative


def test_float_space_flag():
    plain = render_float(2.5, "%f", 0).text
    assert render_float(2.5, "% f", 0).text == " " + plain


def test_float_infinity_case():
    assert render_float(math.inf, "%F", 0, upper=True).text == "INF"
    assert render_float(math.inf, "%f", 0).text == "inf"


def test_float_minus_width_differs_by_case():
    lower = render_float(2.5, "%-12f", 0)
    upper = render_float(2.5, "%-12F", 0, upper=True)
    plain = render_float(2.5, "%f", 0).text
    assert lower.text.startswith(plain)
    assert upper.text == lower.text + " "
    assert lower.count == upper.count == render_float(2.5, "%f", 0).count
    assert lower.advance == len("%-12f") - 1


def test_float_zero_width_only_for_upper():
    plain_lower = render_float(2.5, "%f", 0).text
    assert render_float(2.5, "%012f", 0).text == plain_lower
    plain_upper = render_float(2.5, "%F", 0, upper=True).text
    narrow = render_float(2.5, "%012F", 0, upper=True).text
    wide = render_float(2.5, "%013F", 0, upper=True).text
    assert narrow.endswith(plain_upper)
    lead = narrow[: len(narrow) - len(plain_upper)]
    assert lead and set(lead) == {"0"}
    assert wide == "0" + narrow


def test_float_rejects_text():
    with pytest.raises(TypeError):
        render_float("2.5", "%f", 0)


def test_exponent_zero():
    lower = render_exponent(0.0, "%e", 0)
    assert lower.text == "0.000000e+00"
    assert lower.count == 4
    assert render_exponent(0.0, "%E", 0, upper=True).text == "0.000000E+00"
    assert render_exponent(-0.0, "%e", 0).text == "0.000000e+00"


@pytest.mark.parametrize("value", [2.5, 123.5, 0.5, 0.037])
def test_exponent_shape(value):
    text = render_exponent(value, "%e", 0).text
    assert EXP_PATTERN.match(text)
    assert ("e+" in text) == (value > 1)
    assert ("e-" in text) == (value < 1)


@pytest.mark.parametrize("value", [2.5, 123.5, 0.037])
def test_exponent_upper_and_negative(value):
    lower = render_exponent(value, "%e", 0)
    upper = render_exponent(value, "%E", 0, upper=True)
    assert upper.text == lower.text.replace("e", "E")
    assert upper.count == lower.count
    assert render_exponent(-value, "%e", 0).text == "-" + lower.text


def test_exponent_one_and_nan_write_nothing():
    assert render_exponent(1.0, "%e", 0).text == ""
    assert render_exponent(-1.0, "%e", 0).text == "-"
    assert render_exponent(math.nan, "%e", 0).text == ""


def test_exponent_infinity_raises():
    with pytest.raises(ValueError):
        render_exponent(math.inf, "%e", 0)


def test_hex_float_special_values():
    one = render_hex_float(1.0, "%a", 0)
    assert one.text == "0x1p+0"
    assert one.count == 0
    assert render_hex_float(0.0, "%a", 0).text == "0x0p+0"


@pytest.mark.parametrize(
    "value, expected", [(0.5, "0x1p-1"), (4.0, "0x1p+2"), (3.0, "0x1.8p+1")]
)
def test_hex_float_values(value, expected):
    assert render_hex_float(value, "%a", 0).text == expected


def test_hex_float_negative_and_advance():
    positive = render_hex_float(3.0, "%a", 0)
    negative = render_hex_float(-3.0, "%a", 0)
    assert negative.text == "-" + positive.text
    assert render_hex_float(3.0, "%5a", 0).advance == len("%5a") - 1


@pytest.mark.parametrize("k", range(2, 9))
def test_powers_of_two_above_one(k):
    assert count_power_two(2.0**k) == k - 1
    assert power_two(2.0**k) == 2.0 ** (k - 1)


@pytest.mark.parametrize("k", range(1, 9))
def test_powers_of_two_below_one(k):
    assert count_power_two(2.0**-k) == -k
    assert power_two(2.0**-k) == 2.0**-k


@pytest.mark.parametrize("value", [3.0, 5.0, 0.3, 0.75, 100.7])
def test_power_two_normalises(value):
    ratio = value / power_two(value)
    assert 1 <= ratio < 2


def test_power_two_zero_exponent_keeps_two():
    assert count_power_two(1.5) == 0
    assert power_two(1.5) == 2.0


def test_count_power_two_rejects_negative():
    with pytest.raises(ValueError):
        count_power_two(-1.0)