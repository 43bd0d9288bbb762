# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml and the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError, ParseError
from .range_parser import parse_version_range

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got '{raw}'")


@dataclass
class CLIConfig:
    """Configuration for the strata command.

    Attributes:
        color: Whether to colorize output
        verbose: Whether to print debug logging
        range: Default range used by ``strata check`` when none is given
    """

    color: bool = True
    verbose: bool = False
    range: Optional[str] = None

    @classmethod
    def from_env(cls, base: Optional["CLIConfig"] = None) -> "CLIConfig":
        """Apply STRATA_* environment variables on top of ``base``.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        config = base or cls()
        config.color = _env_flag("STRATA_COLOR", config.color)
        config.verbose = _env_flag("STRATA_VERBOSE", config.verbose)
        if default_range := os.getenv("STRATA_RANGE"):
            config.range = _checked_range(default_range, "STRATA_RANGE")
        return config

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load the ``[tool.strata]`` table from pyproject.toml.

        A missing pyproject.toml or table yields the defaults.

        Raises:
            ConfigError: If the file is invalid or holds wrongly typed values
        """
        pyproject_path = Path(project_dir) / "pyproject.toml"
        if not pyproject_path.exists():
            return cls()

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {}).get("strata", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool.strata] must be a table")

        config = cls()
        for key in ("color", "verbose"):
            if key in tool:
                if not isinstance(tool[key], bool):
                    raise ConfigError(f"tool.strata.{key} must be a boolean")
                setattr(config, key, tool[key])

        if "range" in tool:
            if not isinstance(tool["range"], str):
                raise ConfigError("tool.strata.range must be a string")
            config.range = _checked_range(tool["range"], "tool.strata.range")

        return config


def _checked_range(text: str, source: str) -> str:
    try:
        parse_version_range(text)
    except ParseError as e:
        raise ConfigError(f"{source} is not a valid version range: {e.message}") from e
    return text


def load_config(project_dir: Optional[Path] = None) -> CLIConfig:
    """Load configuration from pyproject.toml, then the environment.

    Args:
        project_dir: Directory holding pyproject.toml (defaults to cwd)
    """
    config = CLIConfig.from_pyproject(project_dir or Path.cwd())
    return CLIConfig.from_env(config)
