"""
Utilities to resolve the number of decimal places used for results.

"""

import json
import os
import sys
from pathlib import Path

from interpolation_calc.constants import (
    CONFIG_DIR_NAME,
    DECIMALS_ENV_VAR,
    DEFAULT_DECIMALS,
    MAX_DECIMALS,
)


def config_file() -> Path:
    """
    Location of the optional JSON config file.

    Returns
    -------
    Path
        $XDG_CONFIG_HOME/interpolation_calc/config.json (XDG_CONFIG_HOME
        defaults to ~/.config).
    """
    return (
        Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
        / CONFIG_DIR_NAME
        / "config.json"
    )


def validate_decimals(value: object) -> int:
    """
    Check that a digit count is an integer between 0 and MAX_DECIMALS.

    Parameters
    ----------
    value : object
        The candidate digit count. Integer strings are accepted.

    Returns
    -------
    int
        The digit count.

    Raises
    ------
    ValueError
        If the value is not an integer in range.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid number of decimals: {value!r}")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValueError(f"Invalid number of decimals: {value!r}")
    if not isinstance(value, int):
        raise ValueError(f"Invalid number of decimals: {value!r}")
    if not 0 <= value <= MAX_DECIMALS:
        raise ValueError(
            f"Number of decimals must be between 0 and {MAX_DECIMALS}, got {value}"
        )
    return value


def _load_cfg_decimals() -> int | None:
    """
    Load the digit count from the config file.

    Returns
    -------
    int | None
        The digit count if found and valid, otherwise None.

    """
    cfg = config_file()
    if not cfg.exists():
        return None
    try:
        with open(cfg, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        if "decimals" not in data:
            return None
        return validate_decimals(data["decimals"])
    except json.JSONDecodeError:
        print(f"Error: Invalid JSON format in {cfg}", file=sys.stderr)
        return None
    except (TypeError, ValueError, AttributeError):
        print(f"Error: Invalid decimals value in {cfg}", file=sys.stderr)
        return None
    except OSError as e:
        print(f"Error: OS error occurred: {e}", file=sys.stderr)
        return None


def resolve_decimals(cli_override: int | str | None = None) -> int:
    """
    Resolve the number of decimal places with precedence.

    Parameters
    ----------
    cli_override : int | str | None
        If provided, this value takes highest precedence.

    Returns
    -------
    int
        Resolved digit count.

    Raises
    ------
    ValueError
        If the CLI override or the environment variable holds an invalid value.

    """
    # 1) CLI override
    if cli_override is not None:
        return validate_decimals(cli_override)

    # 2) env var
    env = os.environ.get(DECIMALS_ENV_VAR)
    if env:
        return validate_decimals(env)

    # 3) config file (optional)
    cfg = _load_cfg_decimals()
    if cfg is not None:
        return cfg

    # 4) default
    return DEFAULT_DECIMALS
