from pathlib import Path

import pytest

from interpolation_calc.constants import DECIMALS_ENV_VAR


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point XDG_CONFIG_HOME at an empty temporary directory and clear the decimals env var.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv(DECIMALS_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def sample_grid_inputs() -> dict:
    """Grid inputs taken from a worked table lookup, with known results at 2 decimals."""
    return {
        "x_left": 9.2,
        "x_target": 9.25,
        "x_right": 9.4,
        "y_low": 20000,
        "y_target": 20480,
        "y_high": 21000,
        "z11": 55267,
        "z13": 54382,
        "z31": 55727,
        "z33": 54798,
    }
