import pytest

from interpolation_calc.constants import NO_VALUE
from interpolation_calc.number_format import format_value, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", 1.5),
        ("  -2.5e3 ", -2500.0),
        ("+7", 7.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1E-2", 0.01),
        ("20480", 20480.0),
    ],
)
def test_parse_number(text: str, expected: float):
    """Test parsing of valid invariant-format numbers."""
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text",
    [None, "", "   ", "abc", "1,5", "1,000.5", "1_000", "inf", "nan", "1e400", "--1", "."],
)
def test_parse_number_invalid(text):
    """Test that anything but a plain decimal number is rejected."""
    assert parse_number(text) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, NO_VALUE),
        (5.0, "5"),
        (55487.8, "55487.8"),
        (55261.27, "55261.27"),
        (0.123456, "0.12346"),
        (-0.000001, "0"),
        (-12.5, "-12.5"),
        (1e20, "100000000000000000000"),
    ],
)
def test_format_value(value, expected: str):
    """Test display formatting with trailing zeros trimmed."""
    assert format_value(value) == expected


def test_format_value_decimals():
    """Test formatting with fewer decimals."""
    assert format_value(2.125, decimals=2) == "2.12"
    assert format_value(1234.0, decimals=0) == "1234"
