from pathlib import Path

import pytest
from typer.testing import CliRunner

from interpolation_calc.scripts.interpolate_cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(config_home: Path) -> Path:
    """Run every CLI test without a user config."""
    return config_home


def test_single():
    """Test the single command."""
    result = runner.invoke(app, ["single", "0", "5", "10", "0", "10"])
    assert result.exit_code == 0
    assert "Y = 5\n" in result.output


def test_single_decimals():
    """Test the single command with a digit count."""
    result = runner.invoke(app, ["single", "0", "1", "3", "0", "1", "--decimals", "2"])
    assert result.exit_code == 0
    assert "Y = 0.33\n" in result.output


def test_single_equal_bounds():
    """Test that equal bounds exit with an error."""
    result = runner.invoke(app, ["single", "4", "4", "4", "0", "10"])
    assert result.exit_code == 1
    assert "Y =" not in result.output


def test_single_out_of_range():
    """Test that a target outside the bounds exits with an error."""
    result = runner.invoke(app, ["single", "0", "11", "10", "0", "10"])
    assert result.exit_code == 1


def test_single_invalid_decimals():
    """Test that a bad digit count exits with an error."""
    result = runner.invoke(app, ["single", "0", "5", "10", "0", "10", "--decimals", "99"])
    assert result.exit_code == 1


def test_double(sample_grid_inputs: dict):
    """Test the double command with every input given."""
    args = ["double", "--decimals", "2"]
    for name, value in sample_grid_inputs.items():
        args += [f"--{name.replace('_', '-')}", str(value)]

    result = runner.invoke(app, args)

    assert result.exit_code == 0
    assert "V12 = 55045.75\n" in result.output
    assert "V21 = 55487.8\n" in result.output
    assert "V22 = 55261.27\n" in result.output
    assert "V23 = 54581.68\n" in result.output
    assert "V32 = 55494.75\n" in result.output


def test_double_incomplete():
    """Test the double command with only the top row given."""
    result = runner.invoke(
        app,
        ["double", "--x-left", "0", "--x-target", "5", "--x-right", "10"]
        + ["--z11", "0", "--z13", "10"],
    )

    assert result.exit_code == 0
    assert "V12 = 5\n" in result.output
    assert "V21 = —\n" in result.output
    assert "V22 =\n" in result.output
    assert "V32 = —\n" in result.output


def test_chained():
    """Test the chained command."""
    result = runner.invoke(
        app,
        ["chained", "10", "8", "12", "100", "200"]
        + ["--c1", "110", "--c3", "210", "--d1", "5", "--d2", "3", "--d3", "7"],
    )

    assert result.exit_code == 0
    assert "B2 = 0\n" in result.output
    assert "C2 = 10\n" in result.output
    assert "A1D1 = 90\n" in result.output
    assert "A2D2 = -10\n" in result.output
    assert "A3D3 = 190\n" in result.output


def test_chained_invalid():
    """Test that an unreadable required field exits with an error."""
    result = runner.invoke(app, ["chained", "10", "8", "12", "abc", "200"])
    assert result.exit_code == 1


def test_single_negative_values():
    """Test that negative positional values are read as numbers."""
    result = runner.invoke(app, ["single", "-10", "0", "10", "-1", "1"])
    assert result.exit_code == 0
    assert "Y = 0\n" in result.output

    result = runner.invoke(
        app, ["single", "-10", "-2.5", "10", "-1e2", "100", "--decimals", "1"]
    )
    assert result.exit_code == 0
    assert "Y = -25\n" in result.output


def test_double_negative_values():
    """Test that negative option values are read as numbers."""
    result = runner.invoke(
        app,
        ["double", "--x-left", "-10", "--x-target", "0", "--x-right", "10"]
        + ["--z11", "-1", "--z13", "1"],
    )
    assert result.exit_code == 0
    assert "V12 = 0\n" in result.output


def test_chained_negative_values():
    """Test that negative positional values reach the chained calculation."""
    result = runner.invoke(app, ["chained", "10", "8", "12", "-100", "200"])
    assert result.exit_code == 0
    assert "B2 = -400\n" in result.output
