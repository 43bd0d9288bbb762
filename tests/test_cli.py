# SPDX-License-Identifier: MIT
"""Tests for the strata command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from strata.cli import cli


class TestParseCommand:
    """Tests for strata parse."""

    def test_parse_valid(self, cli_runner: CliRunner) -> None:
        """Test printing the components of a version."""
        result = cli_runner.invoke(cli, ["parse", "1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert "1.2.3-rc.1+build.5" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build:      build.5" in result.output

    def test_parse_invalid(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version exits with status 1 and a pointer."""
        result = cli_runner.invoke(cli, ["parse", "1.2"])

        assert result.exit_code == 1
        assert "expected '.' at offset 3" in result.output
        assert "   ^" in result.output


class TestCompareCommand:
    """Tests for strata compare."""

    def test_less(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert "1.0.0-alpha < 1.0.0" in result.output

    def test_equal_ignores_build(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0+a", "1.0.0+b"])

        assert result.exit_code == 0
        assert "1.0.0+a = 1.0.0+b" in result.output


class TestCheckCommand:
    """Tests for strata check."""

    def test_all_satisfy(self, cli_runner: CliRunner) -> None:
        """Test versions inside the range."""
        result = cli_runner.invoke(cli, ["check", "--range", "1.2.+", "1.2.0", "1.2.99"])

        assert result.exit_code == 0
        assert "1.2.0 satisfies [1.2.0-0,1.3.0-0)" in result.output

    def test_some_fail(self, cli_runner: CliRunner) -> None:
        """Test that a version outside the range exits with status 1."""
        result = cli_runner.invoke(cli, ["check", "-r", "(,4.5.6)", "4.5.5", "4.5.6"])

        assert result.exit_code == 1
        assert "4.5.6 does not satisfy (,4.5.6)" in result.output

    def test_range_from_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that the default range comes from [tool.strata]."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check", "1.4.2"])

        assert result.exit_code == 0
        assert "1.4.2 satisfies [1.0.0,2.0.0)" in result.output

    def test_no_range(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that a missing range is a usage error."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "check", "1.0.0"])

        assert result.exit_code == 2
        assert "No range given" in result.output

    def test_invalid_range(self, cli_runner: CliRunner) -> None:
        """Test that an invalid range exits with status 1."""
        result = cli_runner.invoke(cli, ["check", "-r", "[1.2.3", "1.2.3"])

        assert result.exit_code == 1
        assert "Invalid version range" in result.output

    def test_parse_error_honours_color_setting(
        self, cli_runner: CliRunner, temp_project: Path
    ) -> None:
        """Test that color = false keeps ANSI codes out of parse errors."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check", "1.2"], color=True)

        assert result.exit_code == 1
        assert "Invalid version '1.2'" in result.output
        assert "\x1b[" not in result.output

    def test_parse_error_colored_by_default(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that parse errors are red when color is enabled."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.2"], color=True)

        assert result.exit_code == 1
        assert "\x1b[31m" in result.output

    def test_parse_error_color_from_env(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that STRATA_COLOR=0 keeps ANSI codes out of parse errors."""
        monkeypatch.setenv("STRATA_COLOR", "0")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.2"], color=True)

        assert result.exit_code == 1
        assert "\x1b[" not in result.output


class TestSortCommand:
    """Tests for strata sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0-rc.1", "0.9.0", "1.0.0-2"])

        assert result.exit_code == 0
        assert result.output.split() == ["0.9.0", "1.0.0-2", "1.0.0-rc.1", "1.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--reverse", "1.0.0", "2.0.0"])

        assert result.exit_code == 0
        assert result.output.split() == ["2.0.0", "1.0.0"]


class TestRangeCommand:
    """Tests for strata range."""

    def test_wildcard_normalized(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["range", "1.+"])

        assert result.exit_code == 0
        assert result.output.strip() == "[1.0.0-0,2.0.0-0)"

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that broken configuration exits with status 1."""
        (tmp_path / "pyproject.toml").write_text("[tool.strata]\nverbose = 3\n")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "range", "+"])

        assert result.exit_code == 1
        assert "tool.strata.verbose" in result.output
