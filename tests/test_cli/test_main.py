"""Tests for dotver CLI."""

from pathlib import Path

from typer.testing import CliRunner

from dotver import __version__
from dotver.cli.main import app

runner = CliRunner()


def lines(output: str) -> list[str]:
    """Split command output into stripped, non-empty lines."""
    return [line.strip() for line in output.splitlines() if line.strip()]


# General tests
def test_version_option(project_dir: Path) -> None:
    """Test --version prints the package version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"dotver {__version__}" in result.stdout


def test_help_lists_commands(project_dir: Path) -> None:
    """Test the help text lists every command."""
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("parse", "compare", "compatible", "sort", "latest"):
        assert command in result.stdout


# parse tests
def test_parse(project_dir: Path) -> None:
    """Test parsing shows both renderings and the part kinds."""
    result = runner.invoke(app, ["parse", "1.2.*"])

    assert result.exit_code == 0
    assert "Dotted:     1.2.*" in result.stdout
    assert "Serialized: 1_2_*" in result.stdout
    assert "wildcard" in result.stdout
    assert "has_wildcards=True" in result.stdout


def test_parse_with_delimiter(project_dir: Path) -> None:
    """Test parsing the serialized form."""
    result = runner.invoke(app, ["parse", "0_1_2", "--delimiter", "_"])

    assert result.exit_code == 0
    assert "Dotted:     0.1.2" in result.stdout


def test_parse_invalid(project_dir: Path) -> None:
    """Test an invalid version exits with an error."""
    result = runner.invoke(app, ["parse", "x243"])

    assert result.exit_code == 1
    assert "Invalid version string: 'x243'" in result.stdout


def test_parse_invalid_delimiter(project_dir: Path) -> None:
    """Test an unusable delimiter is reported."""
    result = runner.invoke(app, ["parse", "1.2", "--delimiter", "*"])

    assert result.exit_code == 1
    assert "Error" in result.stdout


# compare tests
def test_compare_less(project_dir: Path) -> None:
    """Test numeric ordering."""
    result = runner.invoke(app, ["compare", "1.2.0", "1.10.0"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.2.0 < 1.10.0", "Equal: no"]


def test_compare_different_lengths(project_dir: Path) -> None:
    """Test versions matching on shared parts are level and equal."""
    result = runner.invoke(app, ["compare", "1.2.3", "1.2"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.2.3 = 1.2", "Equal: yes"]


def test_compare_wildcard(project_dir: Path) -> None:
    """Test a wildcard sorts high while still being equal."""
    result = runner.invoke(app, ["compare", "1.*", "1.2"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.* > 1.2", "Equal: yes"]


def test_compare_invalid(project_dir: Path) -> None:
    """Test an invalid operand exits with an error."""
    result = runner.invoke(app, ["compare", "1.2", "bad"])

    assert result.exit_code == 1
    assert "Invalid version string: 'bad'" in result.stdout


# compatible tests
def test_compatible(project_dir: Path) -> None:
    """Test a compatible version exits successfully."""
    result = runner.invoke(app, ["compatible", "0.1.0", "0.*.*"])

    assert result.exit_code == 0
    assert "0.1.0 is compatible with 0.*.*" in result.stdout


def test_not_compatible(project_dir: Path) -> None:
    """Test a pattern on the version side is never compatible."""
    result = runner.invoke(app, ["compatible", "1.1.*", "1.*.*"])

    assert result.exit_code == 1
    assert "1.1.* is not compatible with 1.*.*" in result.stdout


# sort tests
def test_sort(project_dir: Path) -> None:
    """Test versions print in ascending order."""
    result = runner.invoke(
        app, ["sort", "1.4.5", "1.0.5", "0.4.5", "0.9.5", "3.0.5"]
    )

    assert result.exit_code == 0
    assert lines(result.stdout) == ["0.4.5", "0.9.5", "1.0.5", "1.4.5", "3.0.5"]


def test_sort_reverse(project_dir: Path) -> None:
    """Test --reverse prints highest first."""
    result = runner.invoke(app, ["sort", "--reverse", "1.0", "2.0", "1.5"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["2.0", "1.5", "1.0"]


def test_sort_skips_invalid(project_dir: Path) -> None:
    """Test invalid versions are reported and skipped."""
    result = runner.invoke(app, ["sort", "2.0", "x", "1.0"])

    assert result.exit_code == 0
    assert "Skipping invalid version: x" in result.stdout
    assert lines(result.stdout)[-2:] == ["1.0", "2.0"]


def test_sort_nothing_valid(project_dir: Path) -> None:
    """Test sorting only invalid versions fails."""
    result = runner.invoke(app, ["sort", "x", "y"])

    assert result.exit_code == 1
    assert "No valid versions given" in result.stdout


# latest tests
def test_latest(project_dir: Path) -> None:
    """Test the highest concrete version is printed."""
    result = runner.invoke(app, ["latest", "1.0.1", "2.*", "junk", "1.10.0"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.10.0"]


def test_latest_with_pattern(project_dir: Path) -> None:
    """Test --pattern limits the candidates."""
    result = runner.invoke(
        app, ["latest", "--pattern", "1.*", "1.0.1", "2.0.0", "1.1.0"]
    )

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.1.0"]


def test_latest_nothing_compatible(project_dir: Path) -> None:
    """Test no compatible version exits with an error."""
    result = runner.invoke(app, ["latest", "-p", "3.*", "1.0", "2.0"])

    assert result.exit_code == 1
    assert "No version compatible with 3.*" in result.stdout


def test_latest_nothing_valid(project_dir: Path) -> None:
    """Test only invalid candidates exits with an error."""
    result = runner.invoke(app, ["latest", "junk", "1.*"])

    assert result.exit_code == 1
    assert "No valid versions given" in result.stdout


# Configuration tests
def test_config_delimiter(project_dir: Path) -> None:
    """Test the delimiter is read from dotver.toml."""
    (project_dir / "dotver.toml").write_text('[dotver]\ndelimiter = "_"\n')

    result = runner.invoke(app, ["sort", "1_10", "1_9"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1_9", "1_10"]


def test_config_reverse_overridden(project_dir: Path) -> None:
    """Test a command-line flag wins over the config file."""
    (project_dir / "pyproject.toml").write_text("[tool.dotver]\nreverse = true\n")

    result = runner.invoke(app, ["sort", "1.0", "2.0"])
    assert lines(result.stdout) == ["2.0", "1.0"]

    result = runner.invoke(app, ["sort", "--no-reverse", "1.0", "2.0"])
    assert lines(result.stdout) == ["1.0", "2.0"]


def test_explicit_config(project_dir: Path, tmp_path: Path) -> None:
    """Test --config points at a specific file."""
    config = tmp_path / "settings.toml"
    config.write_text('[dotver]\ndelimiter = "-"\n')

    result = runner.invoke(
        app, ["latest", "--config", str(config), "1-2", "1-10"]
    )

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1-10"]


def test_missing_config(project_dir: Path) -> None:
    """Test a missing config file is reported."""
    result = runner.invoke(app, ["parse", "1.2", "--config", "missing.toml"])

    assert result.exit_code == 1
    assert "Config file not found" in result.stdout


def test_invalid_config(project_dir: Path) -> None:
    """Test invalid settings are reported."""
    (project_dir / "dotver.toml").write_text('[dotver]\ndelimiter = "*"\n')

    result = runner.invoke(app, ["compare", "1.0", "2.0"])

    assert result.exit_code == 1
    assert "Invalid config" in result.stdout
