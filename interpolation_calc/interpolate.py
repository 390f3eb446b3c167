"""
Interpolation functions for the interpolation calculator.

All functions here are pure: they take plain floats, return plain floats, and
report a degenerate span (two bounds that are numerically equal) as ``None``
rather than raising.

"""

import logging
from typing import NamedTuple, Optional

import numba

from interpolation_calc.constants import DEFAULT_DECIMALS, EPSILON

logger = logging.getLogger(__name__)


class ChainedResult(NamedTuple):
    """
    Results of the legacy chained double interpolation.

    Each field is None when the guard of the stage producing it failed.
    """

    b2: Optional[float]
    c2: Optional[float]
    a1d1: Optional[float]
    a2d2: Optional[float]
    a3d3: Optional[float]


class Grid3x3(NamedTuple):
    """
    A 3x3 grid of interpolated values.

    Rows are Y = [low, target, high], columns are X = [left, target, right],
    so ``v12`` is (y_low, x_target) and ``v22`` is the center.
    """

    v11: Optional[float]
    v12: Optional[float]
    v13: Optional[float]
    v21: Optional[float]
    v22: Optional[float]
    v23: Optional[float]
    v31: Optional[float]
    v32: Optional[float]
    v33: Optional[float]


@numba.jit(nopython=True)
def linear_interpolation(p1: float, p2: float, v1: float, v2: float, p3: float):
    """
    Perform linear interpolation between two points.

    Parameters
    ----------
    p1 : float
        The first point.
    p2 : float
        The second point.
    v1 : float
        The value at the first point.
    v2 : float
        The value at the second point.
    p3 : float
        The point at which to interpolate.

    Returns
    -------
    float
        The interpolated value at point p3.
    """
    return v1 + (p3 - p1) * (v2 - v1) / (p2 - p1)


@numba.jit(nopython=True)
def lerp(a: float, b: float, t: float):
    """
    Blend between a and b by the fraction t (t=0 gives a, t=1 gives b).
    """
    return a + t * (b - a)


@numba.jit(nopython=True)
def chained_step(top: float, bottom: float, p1: float, p2: float, p3: float):
    """
    One step of the legacy chained interpolation: ``top - (p1 - p2) * (top - bottom) / (p1 - p3)``.
    """
    return top - (p1 - p2) * (top - bottom) / (p1 - p3)


def _as_float(value: Optional[float]) -> Optional[float]:
    return None if value is None else float(value)


def round_half_even(value: Optional[float], decimals: int) -> Optional[float]:
    """
    Round a value to a number of decimal places, ties to even.

    Python's ``round`` works on the exact binary value of the float, so a
    value such as 2.675 (stored as 2.67499999...) rounds down while an exact
    tie such as 0.125 rounds to the even neighbour 0.12.

    Parameters
    ----------
    value : Optional[float]
        The value to round. None is passed through.
    decimals : int
        Number of decimal places to keep.

    Returns
    -------
    Optional[float]
        The rounded value, or None if value is None.
    """
    if value is None:
        return None
    return float(round(value, decimals))


def single(
    x: float,
    x1: float,
    x2: float,
    y1: float,
    y2: float,
    decimals: int = DEFAULT_DECIMALS,
) -> Optional[float]:
    """
    Single (1-D) linear interpolation: given x between x1 and x2, return y.

    No range check is applied to x; callers that require x to lie within
    [min(x1, x2), max(x1, x2)] must check it themselves.

    Parameters
    ----------
    x : float
        The point at which to interpolate.
    x1, x2 : float
        The two known points.
    y1, y2 : float
        The values at x1 and x2.
    decimals : int, optional
        Number of decimal places in the result, default is 5.

    Returns
    -------
    Optional[float]
        The interpolated value, or None if x1 and x2 are equal.
    """
    x, x1, x2, y1, y2 = (float(v) for v in (x, x1, x2, y1, y2))
    if abs(x2 - x1) < EPSILON:
        logger.debug(f"Degenerate span in single interpolation: x1={x1}, x2={x2}")
        return None
    return round_half_even(linear_interpolation(x1, x2, y1, y2, x), decimals)


def double_vb_style(
    A1: float,
    a2: float,
    a3: float,
    b1: float,
    b3: float,
    c1: Optional[float] = None,
    c3: Optional[float] = None,
    D1: Optional[float] = None,
    d2: Optional[float] = None,
    d3: Optional[float] = None,
    decimals: int = DEFAULT_DECIMALS,
) -> ChainedResult:
    """
    Legacy two-stage chained double interpolation.

    This reproduces an established calculation convention and is not the same
    geometry as ``bilinear_3x3``. The first stage interpolates the b and c
    columns along the A axis; the second stage interpolates along the D axis.
    When c1 or c3 is missing, the second stage substitutes b1 or b3 in its
    place, which collapses that row to its b value.

    Parameters
    ----------
    A1, a2, a3 : float
        First-stage coordinates: the bounds A1 and a3 and the target a2.
    b1, b3 : float
        Values of the b column at A1 and a3.
    c1, c3 : Optional[float]
        Values of the c column at A1 and a3.
    D1, d2, d3 : Optional[float]
        Second-stage coordinates: the bounds D1 and d3 and the target d2.
    decimals : int, optional
        Number of decimal places in each result, default is 5.

    Returns
    -------
    ChainedResult
        (b2, c2, a1d1, a2d2, a3d3). Each value is None when it cannot be
        computed: b2 and c2 need A1 != a3 (c2 also needs c1 and c3), the
        stage-two values need D1, d2, d3 with D1 != d3 (a2d2 also needs b2
        and c2).
    """
    A1, a2, a3, b1, b3 = (float(v) for v in (A1, a2, a3, b1, b3))
    c1, c3, D1, d2, d3 = (_as_float(v) for v in (c1, c3, D1, d2, d3))
    b2 = c2 = a1d1 = a2d2 = a3d3 = None

    if abs(A1 - a3) > EPSILON:
        b2 = chained_step(b1, b3, A1, a2, a3)
        if c1 is not None and c3 is not None:
            c2 = chained_step(c1, c3, A1, a2, a3)
    else:
        logger.debug(f"Degenerate A span in chained interpolation: A1={A1}, a3={a3}")

    if D1 is not None and d2 is not None and d3 is not None and abs(D1 - d3) > EPSILON:
        a1d1 = chained_step(b1, c1 if c1 is not None else b1, D1, d2, d3)
        if b2 is not None and c2 is not None:
            a2d2 = chained_step(b2, c2, D1, d2, d3)
        a3d3 = chained_step(b3, c3 if c3 is not None else b3, D1, d2, d3)

    return ChainedResult(
        *(round_half_even(v, decimals) for v in (b2, c2, a1d1, a2d2, a3d3))
    )


def bilinear_3x3(
    x_left: float,
    x_target: float,
    x_right: float,
    y_low: float,
    y_target: float,
    y_high: float,
    z11: float,
    z13: float,
    z31: float,
    z33: float,
    decimals: int = DEFAULT_DECIMALS,
) -> Grid3x3:
    """
    Bilinear interpolation on a 2D grid using four corner values.

    The target fractions are not clamped, so a target outside the bounds
    extrapolates linearly.

    Parameters
    ----------
    x_left, x_target, x_right : float
        The X values of the left column, the target column and the right column.
    y_low, y_target, y_high : float
        The Y values of the low row, the target row and the high row.
    z11, z13, z31, z33 : float
        Corner values at (x_left, y_low), (x_right, y_low), (x_left, y_high)
        and (x_right, y_high).
    decimals : int, optional
        Number of decimal places in each result, default is 5.

    Returns
    -------
    Grid3x3
        The full 3x3 grid. If the X or Y span is zero every cell is None.
    """
    x_left, x_target, x_right = (float(v) for v in (x_left, x_target, x_right))
    y_low, y_target, y_high = (float(v) for v in (y_low, y_target, y_high))
    z11, z13, z31, z33 = (float(v) for v in (z11, z13, z31, z33))

    dx = x_right - x_left
    dy = y_high - y_low
    if abs(dx) < EPSILON or abs(dy) < EPSILON:
        logger.debug(f"Degenerate grid: dx={dx}, dy={dy}")
        return Grid3x3(*([None] * 9))

    tx = (x_target - x_left) / dx
    ty = (y_target - y_low) / dy

    v12 = lerp(z11, z13, tx)  # top middle
    v32 = lerp(z31, z33, tx)  # bottom middle
    v21 = lerp(z11, z31, ty)  # middle left
    v23 = lerp(z13, z33, ty)  # middle right
    v22 = lerp(v21, v23, tx)  # center

    return Grid3x3(
        *(
            round_half_even(v, decimals)
            for v in (z11, v12, z13, v21, v22, v23, z31, v32, z33)
        )
    )
