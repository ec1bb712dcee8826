# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project whose version lives in [project]."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "2024.04.03"  # release version
description = "Test project"

[tool.other]
version = "1.0.0"
"""
    )

    yield project_dir


@pytest.fixture
def tool_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project whose version lives in [tool.chronver]."""
    project_dir = tmp_path / "tool_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "tool-project"
version = "0.0.0"

[tool.chronver]
version = "2024.04.03.1-break"
"""
    )

    yield project_dir


@pytest.fixture
def version_file_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project whose version lives in a VERSION file."""
    project_dir = tmp_path / "file_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "file-project"
dynamic = ["version"]

[tool.chronver]
version-file = "VERSION"
"""
    )
    (project_dir / "VERSION").write_text("2024.04.03.5\n")

    yield project_dir
