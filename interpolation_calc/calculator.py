"""
Calculator layer sitting between text input and the interpolation functions.

The functions here take the raw text of each input field, parse it with
``parse_number``, apply the input checks the interpolation functions leave to
their caller, and return plain results ready for ``format_value``.

"""

import logging
from typing import NamedTuple, Optional

from interpolation_calc.constants import DEFAULT_DECIMALS, EPSILON
from interpolation_calc.interpolate import (
    ChainedResult,
    bilinear_3x3,
    double_vb_style,
    single,
)
from interpolation_calc.number_format import parse_number

logger = logging.getLogger(__name__)


class InterpolationInputError(ValueError):
    """
    Raised when a field of user input cannot be used.

    Attributes
    ----------
    field : str
        Name of the offending field.
    message : str
        Message suitable for showing to the user.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class DoubleModeResult(NamedTuple):
    """
    Derived cells of a double-mode calculation.

    ``complete`` is True only when every input field held a number; v22 is
    always None otherwise.
    """

    v12: Optional[float]
    v21: Optional[float]
    v22: Optional[float]
    v23: Optional[float]
    v32: Optional[float]
    complete: bool


def _shortest(value: float) -> str:
    """Shortest text that round-trips value, without a trailing '.0'."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _require(text: Optional[str], field: str, message: str) -> float:
    value = parse_number(text)
    if value is None:
        raise InterpolationInputError(field, message)
    return value


def _optional(text: Optional[str], field: str) -> Optional[float]:
    if text is None or not text.strip():
        return None
    return _require(text, field, f"Please enter a valid number for {field}.")


def solve_single(
    x1: Optional[str],
    x: Optional[str],
    x2: Optional[str],
    y1: Optional[str],
    y2: Optional[str],
    decimals: int = DEFAULT_DECIMALS,
) -> Optional[float]:
    """
    Solve a single-mode interpolation from text input.

    Fields are checked in the order x1, x, x2, y1, y2 and the first bad field
    stops the calculation.

    Parameters
    ----------
    x1, x, x2 : Optional[str]
        The first bound, the target and the second bound.
    y1, y2 : Optional[str]
        The values at x1 and x2.
    decimals : int, optional
        Number of decimal places in the result, default is 5.

    Returns
    -------
    Optional[float]
        The interpolated value.

    Raises
    ------
    InterpolationInputError
        If a field is not a number, x1 equals x2, or x lies outside
        [min(x1, x2), max(x1, x2)].
    """
    x1_v = _require(x1, "x1", "x1 must be a number.")
    x_v = _require(x, "x", "x (target) must be a number.")
    x2_v = _require(x2, "x2", "x2 must be a number.")
    y1_v = _require(y1, "y1", "y at x1 must be a number.")
    y2_v = _require(y2, "y2", "y at x2 must be a number.")

    if abs(x2_v - x1_v) < EPSILON:
        raise InterpolationInputError(
            "x2", "x1 and x2 cannot be equal (division by zero)."
        )

    min_x = min(x1_v, x2_v)
    max_x = max(x1_v, x2_v)
    if x_v < min_x:
        raise InterpolationInputError(
            "x", f"x is too low; should be ≥ {_shortest(min_x)}."
        )
    if x_v > max_x:
        raise InterpolationInputError(
            "x", f"x is too high; should be ≤ {_shortest(max_x)}."
        )

    return single(x_v, x1_v, x2_v, y1_v, y2_v, decimals)


def solve_double(
    x_left: Optional[str],
    x_target: Optional[str],
    x_right: Optional[str],
    y_low: Optional[str],
    y_target: Optional[str],
    y_high: Optional[str],
    z11: Optional[str],
    z13: Optional[str],
    z31: Optional[str],
    z33: Optional[str],
    decimals: int = DEFAULT_DECIMALS,
) -> DoubleModeResult:
    """
    Solve a double-mode (3x3 grid) interpolation from text input.

    Nothing here fails fast: every field is parsed and each derived cell is
    computed as soon as the inputs it needs are usable. The edge cells use a
    1-D interpolation along one axis. The center uses the full bilinear grid
    when every input is usable, and otherwise falls back to a 1-D
    interpolation between two computed edge cells, or to a single edge cell
    when only one axis is usable.

    Parameters
    ----------
    x_left, x_target, x_right : Optional[str]
        The X values of the left, target and right columns.
    y_low, y_target, y_high : Optional[str]
        The Y values of the low, target and high rows.
    z11, z13, z31, z33 : Optional[str]
        Corner values at (left, low), (right, low), (left, high), (right, high).
    decimals : int, optional
        Number of decimal places in each result, default is 5.

    Returns
    -------
    DoubleModeResult
        The five derived cells and whether the input was complete.
    """
    xl, xt, xr = (parse_number(t) for t in (x_left, x_target, x_right))
    yl, yt, yh = (parse_number(t) for t in (y_low, y_target, y_high))
    q11, q13, q31, q33 = (parse_number(t) for t in (z11, z13, z31, z33))

    has_x = xl is not None and xt is not None and xr is not None
    has_y = yl is not None and yt is not None and yh is not None
    has_corners = all(q is not None for q in (q11, q13, q31, q33))

    can_interp_x = has_x and abs(xr - xl) > EPSILON
    can_interp_y = has_y and abs(yh - yl) > EPSILON

    v12 = v21 = v22 = v23 = v32 = None

    # rows, along X
    if can_interp_x and q11 is not None and q13 is not None:
        v12 = single(xt, xl, xr, q11, q13, decimals)
    if can_interp_x and q31 is not None and q33 is not None:
        v32 = single(xt, xl, xr, q31, q33, decimals)

    # columns, along Y
    if can_interp_y and q11 is not None and q31 is not None:
        v21 = single(yt, yl, yh, q11, q31, decimals)
    if can_interp_y and q13 is not None and q33 is not None:
        v23 = single(yt, yl, yh, q13, q33, decimals)

    if can_interp_x and can_interp_y and has_corners:
        v22 = bilinear_3x3(xl, xt, xr, yl, yt, yh, q11, q13, q31, q33, decimals).v22
    elif can_interp_x and v21 is not None and v23 is not None:
        v22 = single(xt, xl, xr, v21, v23, decimals)
    elif can_interp_y and v12 is not None and v32 is not None:
        v22 = single(yt, yl, yh, v12, v32, decimals)
    elif v21 is not None:
        v22 = v21
    elif v12 is not None:
        v22 = v12

    complete = has_x and has_y and has_corners
    if not complete:
        logger.debug("Double-mode input incomplete; center not reported")
        v22 = None

    return DoubleModeResult(v12, v21, v22, v23, v32, complete)


def solve_chained(
    A1: Optional[str],
    a2: Optional[str],
    a3: Optional[str],
    b1: Optional[str],
    b3: Optional[str],
    c1: Optional[str] = None,
    c3: Optional[str] = None,
    D1: Optional[str] = None,
    d2: Optional[str] = None,
    d3: Optional[str] = None,
    decimals: int = DEFAULT_DECIMALS,
) -> ChainedResult:
    """
    Solve the legacy chained interpolation from text input.

    A1, a2, a3, b1 and b3 are required. The c and D fields may be left empty,
    but a field that holds text must hold a number.

    Raises
    ------
    InterpolationInputError
        If a required field is missing or any non-empty field is not a number.
    """
    required = {}
    for field, text in (("A1", A1), ("a2", a2), ("a3", a3), ("b1", b1), ("b3", b3)):
        required[field] = _require(
            text, field, f"Please enter a valid number for {field}."
        )

    return double_vb_style(
        required["A1"],
        required["a2"],
        required["a3"],
        required["b1"],
        required["b3"],
        c1=_optional(c1, "c1"),
        c3=_optional(c3, "c3"),
        D1=_optional(D1, "D1"),
        d2=_optional(d2, "d2"),
        d3=_optional(d3, "d3"),
        decimals=decimals,
    )
