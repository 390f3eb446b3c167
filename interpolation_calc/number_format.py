"""
Locale-invariant parsing and display formatting of numbers.

Text is always read with "." as the decimal separator, whatever the system
locale, and results are always written the same way.

"""

import math
import re
from typing import Optional

from interpolation_calc.constants import DISPLAY_DECIMALS, NO_VALUE

# optional sign, digits with an optional fraction (or a bare fraction), optional exponent
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse user text into a float.

    Leading and trailing whitespace is ignored. Thousands separators,
    underscores, "inf" and "nan" are rejected, as is anything that overflows
    to infinity.

    Parameters
    ----------
    text : Optional[str]
        The text to parse.

    Returns
    -------
    Optional[float]
        The parsed value, or None if the text is missing or not a number.
    """
    if text is None:
        return None
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def format_value(value: Optional[float], decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Format a result for display.

    Parameters
    ----------
    value : Optional[float]
        The value to format.
    decimals : int, optional
        Maximum number of decimal places shown, default is 5.

    Returns
    -------
    str
        NO_VALUE for None; otherwise fixed-point text with trailing zeros
        (and a trailing decimal point) trimmed, e.g. 55487.8 or 5.
    """
    if value is None:
        return NO_VALUE
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text
