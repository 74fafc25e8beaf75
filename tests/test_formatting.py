import math

import pytest

from scicalc.formatting import format_number, is_numeral, parse_number


@pytest.mark.parametrize("value, text", [
    (8.0, "8"),
    (-0.0, "0"),
    (0.5, "0.5"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (1.5e22, "1.5e+22"),
    (0.00001, "0.00001"),
    (1e-7, "1e-7"),
    (math.nan, "NaN"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_parse_number():
    assert parse_number("8.") == 8
    assert math.isnan(parse_number("NaN"))
    assert math.isnan(parse_number("Memory"))


def test_is_numeral():
    assert is_numeral("0.")
    assert is_numeral("-12.5")
    assert not is_numeral("-")
    assert not is_numeral("NaN")
    assert not is_numeral("Infinity")
