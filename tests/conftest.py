# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for strata tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STRATA_* variables from the developer's shell out of tests."""
    for name in ("STRATA_COLOR", "STRATA_VERBOSE", "STRATA_RANGE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with a [tool.strata] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-project"
version = "1.4.2"

[tool.strata]
color = false
range = "[1.0.0,2.0.0)"
"""
    )

    yield project_dir
