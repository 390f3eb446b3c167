"""
interpolate_cli.py

Command line front end for the interpolation calculator. Every numeric input is
taken as text and read with "." as the decimal separator, whatever the locale.

Usage:
    interpolation-calc single <x1> <x> <x2> <y1> <y2> [options]
    interpolation-calc double [--x-left ...] [--z11 ...] [options]
    interpolation-calc chained <A1> <a2> <a3> <b1> <b3> [--c1 ...] [--d1 ...] [options]

Example:
    interpolation-calc single 0 5 10 0 10
        Y = 5

    interpolation-calc double --x-left 9.2 --x-target 9.25 --x-right 9.4 \
        --y-low 20000 --y-target 20480 --y-high 21000 \
        --z11 55267 --z13 54382 --z31 55727 --z33 54798 --decimals 2
        V12 = 55045.75
        V21 = 55487.8
        V22 = 55261.27
        V23 = 54581.68
        V32 = 55494.75

Absent results are printed as "—". The number of decimals kept defaults to
the INTERPOLATION_DECIMALS environment variable, then the "decimals" key of
$XDG_CONFIG_HOME/interpolation_calc/config.json, then 5.

"""

import logging
import sys
from typing import Annotated, Optional

import typer

from interpolation_calc.calculator import (
    InterpolationInputError,
    solve_chained,
    solve_double,
    solve_single,
)
from interpolation_calc.number_format import format_value
from interpolation_calc.settings import resolve_decimals

# Configure logging at the module level
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("interpolation_calc")

app = typer.Typer(
    pretty_exceptions_enable=False,
    help="Linear, bilinear and chained interpolation from sample points.",
)

# positional values such as "-10" are read as arguments, not unknown options
NEGATIVE_NUMBER_ARGS = {"ignore_unknown_options": True}


def _configure(command: str, decimals: Optional[int], log_level: str) -> int:
    """
    Set the log level and resolve the number of decimals for a command.

    Raises
    ------
    typer.Exit
        If the number of decimals is invalid.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    logger.log(logging.DEBUG, f"Logger initialized with level {log_level}")

    try:
        resolved = resolve_decimals(decimals)
    except ValueError as e:
        logger.log(logging.ERROR, str(e))
        raise typer.Exit(code=1)
    logger.log(logging.DEBUG, f"{command} interpolation with {resolved} decimals")
    return resolved


def _echo(name: str, value: Optional[float]) -> None:
    typer.echo(f"{name} = {format_value(value)}")


@app.command(context_settings=NEGATIVE_NUMBER_ARGS)
def single(
    x1: Annotated[str, typer.Argument(help="First bound.")],
    x: Annotated[str, typer.Argument(help="Target, between x1 and x2.")],
    x2: Annotated[str, typer.Argument(help="Second bound.")],
    y1: Annotated[str, typer.Argument(help="Value at x1.")],
    y2: Annotated[str, typer.Argument(help="Value at x2.")],
    decimals: Annotated[Optional[int], typer.Option(help="Decimals kept.")] = None,
    log_level: str = "WARNING",
) -> None:
    """
    Single linear interpolation: solve for y at x from (x1, y1) and (x2, y2).

    Parameters
    ----------
    x1, x, x2 : str
        The first bound, the target and the second bound.
    y1, y2 : str
        The values at x1 and x2.
    decimals : int | None, optional
        Number of decimals kept in the result.
    log_level : str, optional
        Logging level for the script (default: "WARNING").
    """
    resolved = _configure("single", decimals, log_level)
    try:
        y = solve_single(x1, x, x2, y1, y2, decimals=resolved)
    except InterpolationInputError as e:
        logger.log(logging.ERROR, f"Invalid input for {e.field}: {e.message}")
        raise typer.Exit(code=1)
    _echo("Y", y)


@app.command()
def double(
    x_left: Annotated[Optional[str], typer.Option(help="X of the left column.")] = None,
    x_target: Annotated[Optional[str], typer.Option(help="Target X.")] = None,
    x_right: Annotated[Optional[str], typer.Option(help="X of the right column.")] = None,
    y_low: Annotated[Optional[str], typer.Option(help="Y of the low row.")] = None,
    y_target: Annotated[Optional[str], typer.Option(help="Target Y.")] = None,
    y_high: Annotated[Optional[str], typer.Option(help="Y of the high row.")] = None,
    z11: Annotated[Optional[str], typer.Option(help="Value at (left, low).")] = None,
    z13: Annotated[Optional[str], typer.Option(help="Value at (right, low).")] = None,
    z31: Annotated[Optional[str], typer.Option(help="Value at (left, high).")] = None,
    z33: Annotated[Optional[str], typer.Option(help="Value at (right, high).")] = None,
    decimals: Annotated[Optional[int], typer.Option(help="Decimals kept.")] = None,
    log_level: str = "WARNING",
) -> None:
    """
    Bilinear interpolation on a 3x3 grid from its four corners.

    Missing or invalid inputs do not stop the calculation: every cell that can
    be derived from the usable inputs is printed. The center (V22) is only
    printed when every input was given.

    Parameters
    ----------
    x_left, x_target, x_right : str | None
        The X values of the left, target and right columns.
    y_low, y_target, y_high : str | None
        The Y values of the low, target and high rows.
    z11, z13, z31, z33 : str | None
        Corner values.
    decimals : int | None, optional
        Number of decimals kept in the results.
    log_level : str, optional
        Logging level for the script (default: "WARNING").
    """
    resolved = _configure("double", decimals, log_level)
    result = solve_double(
        x_left,
        x_target,
        x_right,
        y_low,
        y_target,
        y_high,
        z11,
        z13,
        z31,
        z33,
        decimals=resolved,
    )
    if not result.complete:
        logger.log(logging.WARNING, "Not every input was given; center not computed")

    _echo("V12", result.v12)
    _echo("V21", result.v21)
    if result.complete:
        _echo("V22", result.v22)
    else:
        typer.echo("V22 =")
    _echo("V23", result.v23)
    _echo("V32", result.v32)


@app.command(context_settings=NEGATIVE_NUMBER_ARGS)
def chained(
    a1: Annotated[str, typer.Argument(metavar="A1", help="First A bound.")],
    a2: Annotated[str, typer.Argument(metavar="a2", help="A target.")],
    a3: Annotated[str, typer.Argument(metavar="a3", help="Second A bound.")],
    b1: Annotated[str, typer.Argument(help="b value at A1.")],
    b3: Annotated[str, typer.Argument(help="b value at a3.")],
    c1: Annotated[Optional[str], typer.Option(help="c value at A1.")] = None,
    c3: Annotated[Optional[str], typer.Option(help="c value at a3.")] = None,
    d1: Annotated[Optional[str], typer.Option("--d1", help="First D bound.")] = None,
    d2: Annotated[Optional[str], typer.Option("--d2", help="D target.")] = None,
    d3: Annotated[Optional[str], typer.Option("--d3", help="Second D bound.")] = None,
    decimals: Annotated[Optional[int], typer.Option(help="Decimals kept.")] = None,
    log_level: str = "WARNING",
) -> None:
    """
    Legacy two-stage chained interpolation.

    Parameters
    ----------
    a1, a2, a3 : str
        The A bounds (A1, a3) and target (a2).
    b1, b3 : str
        The b column values.
    c1, c3 : str | None
        The c column values.
    d1, d2, d3 : str | None
        The D bounds (D1, d3) and target (d2).
    decimals : int | None, optional
        Number of decimals kept in the results.
    log_level : str, optional
        Logging level for the script (default: "WARNING").
    """
    resolved = _configure("chained", decimals, log_level)
    try:
        result = solve_chained(
            a1, a2, a3, b1, b3, c1=c1, c3=c3, D1=d1, d2=d2, d3=d3, decimals=resolved
        )
    except InterpolationInputError as e:
        logger.log(logging.ERROR, f"Invalid input for {e.field}: {e.message}")
        raise typer.Exit(code=1)

    _echo("B2", result.b2)
    _echo("C2", result.c2)
    _echo("A1D1", result.a1d1)
    _echo("A2D2", result.a2d2)
    _echo("A3D3", result.a3d3)


if __name__ == "__main__":
    app()
