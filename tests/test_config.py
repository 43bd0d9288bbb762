# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from strata.config import CLIConfig, load_config
from strata.errors import ConfigError


class TestFromPyproject:
    """Tests for loading [tool.strata] from pyproject.toml."""

    def test_load_table(self, temp_project: Path) -> None:
        """Test loading a valid [tool.strata] table."""
        config = CLIConfig.from_pyproject(temp_project)

        assert config.color is False
        assert config.verbose is False
        assert config.range == "[1.0.0,2.0.0)"

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml yields defaults."""
        config = CLIConfig.from_pyproject(tmp_path)

        assert config == CLIConfig()

    def test_missing_table(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml without [tool.strata] yields defaults."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

        assert CLIConfig.from_pyproject(tmp_path) == CLIConfig()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that malformed TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.strata\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            CLIConfig.from_pyproject(tmp_path)

    def test_wrong_type(self) -> None:
        """Test that wrongly typed values raise ConfigError."""
        with pytest.raises(ConfigError, match="color"):
            CLIConfig.from_pyproject_dict({"tool": {"strata": {"color": "yes"}}})

    def test_invalid_range(self) -> None:
        """Test that an unparsable default range raises ConfigError."""
        with pytest.raises(ConfigError, match="not a valid version range"):
            CLIConfig.from_pyproject_dict({"tool": {"strata": {"range": "[1.0.0"}}})


class TestFromEnv:
    """Tests for STRATA_* environment variables."""

    def test_defaults(self) -> None:
        """Test that no variables yields defaults."""
        assert CLIConfig.from_env() == CLIConfig()

    def test_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test boolean flags from the environment."""
        monkeypatch.setenv("STRATA_COLOR", "false")
        monkeypatch.setenv("STRATA_VERBOSE", "1")

        config = CLIConfig.from_env()

        assert config.color is False
        assert config.verbose is True

    def test_invalid_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a non-boolean flag raises ConfigError."""
        monkeypatch.setenv("STRATA_VERBOSE", "loud")

        with pytest.raises(ConfigError, match="STRATA_VERBOSE"):
            CLIConfig.from_env()

    def test_env_overrides_pyproject(
        self, temp_project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the environment takes precedence over pyproject.toml."""
        monkeypatch.setenv("STRATA_RANGE", "1.+")
        monkeypatch.setenv("STRATA_COLOR", "true")

        config = load_config(temp_project)

        assert config.range == "1.+"
        assert config.color is True
