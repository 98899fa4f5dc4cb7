"""
Tests for single-precision parsing and formatting.
"""
import math

import pytest

from plumelang import floats


@pytest.mark.parametrize(
    "text, expected",
    [
        ("14", 14.0),
        ("007", 7.0),
        ("-2.5", -2.5),
        ("+3", 3.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("INF", math.inf),
        ("-infinity", -math.inf),
    ],
)
def test_parse_number(text, expected):
    assert floats.parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " 1", "1 ", "1_000", "0x10", "1e", "."])
def test_parse_rejects(text):
    with pytest.raises(ValueError):
        floats.parse_number(text)


def test_parse_nan():
    assert math.isnan(floats.parse_number("NaN"))


def test_parse_rounds_to_single():
    assert floats.parse_number("0.1") == 0.10000000149011612


def test_parse_overflow_is_infinite():
    assert floats.parse_number("1e39") == math.inf


@pytest.mark.parametrize(
    "value, expected",
    [
        (14.0, "14"),
        (-2.0, "-2"),
        (0.25, "0.25"),
        (0.1, "0.1"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (16777217.0, "16777216"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
        (-0.0, "-0"),
    ],
)
def test_format_number(value, expected):
    assert floats.format_number(value) == expected


def test_shortest_round_trip():
    value = floats.div(10.0, 3.0)
    text = floats.format_number(value)
    assert text == "3.3333333"
    assert floats.parse_number(text) == value


def test_division_by_zero():
    assert floats.div(1.0, 0.0) == math.inf
    assert floats.div(-1.0, 0.0) == -math.inf
    assert floats.div(1.0, -0.0) == -math.inf
    assert math.isnan(floats.div(0.0, 0.0))


def test_arithmetic_overflow():
    big = floats.parse_number("3e38")
    assert floats.mul(big, 10.0) == math.inf
    assert floats.add(big, big) == math.inf
