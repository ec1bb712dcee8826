# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

The current version of a project is looked up in this order:

1. The file named by ``[tool.chronver].version-file``
2. ``[tool.chronver].version``
3. ``[project].version``
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

# Where the version was read from, and where --write stores it back
SOURCE_VERSION_FILE = "version-file"
SOURCE_TOOL = "tool.chronver"
SOURCE_PROJECT = "project"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name
        version: Current version string (empty if none is configured)
        version_source: Where the version came from (one of the SOURCE_* values)
        version_file: Path of the version file, if configured
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    version_source: str = ""
    version_file: Optional[Path] = None

    @property
    def pyproject_path(self) -> Path:
        return self.project_dir / "pyproject.toml"

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the configured version file cannot be read, or the
                version is not a string
        """
        project = pyproject.get("project", {})
        tool_chronver = pyproject.get("tool", {}).get("chronver", {})

        name = project.get("name", "")

        version_file: Optional[Path] = None
        if tool_chronver.get("version-file"):
            version_file = project_dir / tool_chronver["version-file"]
            try:
                version = version_file.read_text(encoding="ascii").strip()
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError(f"Cannot read version file {version_file}: {e}") from e
            source = SOURCE_VERSION_FILE
        elif tool_chronver.get("version"):
            version = tool_chronver["version"]
            source = SOURCE_TOOL
        elif project.get("version"):
            version = project["version"]
            source = SOURCE_PROJECT
        else:
            version = ""
            source = ""

        if not isinstance(version, str):
            raise ConfigError(
                f"Version in [{source}] must be a string, got {type(version).__name__} "
                f"{version!r}"
            )

        logger.debug("Loaded version %r from %s", version, source or "nowhere")

        return cls(
            project_dir=project_dir,
            name=name,
            version=version,
            version_source=source,
            version_file=version_file,
        )

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return self.pyproject_path.exists()

    def write_version(self, version: str) -> Path:
        """Store a new version where the current one was read from.

        Args:
            version: New version string

        Returns:
            Path of the file that was written

        Raises:
            ConfigError: If there is no configured version to replace
        """
        if self.version_source == SOURCE_VERSION_FILE and self.version_file is not None:
            self.version_file.write_text(f"{version}\n", encoding="ascii")
            path = self.version_file
        elif self.version_source == SOURCE_TOOL:
            path = self._rewrite_pyproject(["tool", "chronver"], version)
        elif self.version_source == SOURCE_PROJECT:
            path = self._rewrite_pyproject(["project"], version)
        else:
            raise ConfigError("No version is configured to write to")

        self.version = version
        logger.debug("Wrote version %s to %s", version, path)
        return path

    def _rewrite_pyproject(self, table: list[str], version: str) -> Path:
        path = self.pyproject_path
        text = path.read_text(encoding="utf-8")
        updated = replace_table_value(text, table, "version", version)
        if updated is None:
            raise ConfigError(f"No version key found in [{'.'.join(table)}] of {path}")
        path.write_text(updated, encoding="utf-8")
        return path


_TABLE_HEADER = re.compile(r"^\s*\[([^\[\]]+)\]\s*(?:#.*)?$")


def replace_table_value(text: str, table: list[str], key: str, value: str) -> Optional[str]:
    """Replace a string value in a TOML table, keeping the rest of the text intact.

    Only the ``key = "..."`` line directly inside ``[table]`` is touched, so
    comments and formatting survive.

    Returns:
        The updated text, or None if the key was not found in the table
    """
    header = ".".join(table)
    key_line = re.compile(rf"^(\s*{re.escape(key)}\s*=\s*)([\"'])[^\"']*\2(.*)$")

    lines = text.splitlines(keepends=True)
    in_table = False
    for i, line in enumerate(lines):
        header_match = _TABLE_HEADER.match(line)
        if header_match:
            in_table = header_match.group(1).strip() == header
            continue
        if not in_table:
            continue
        match = key_line.match(line.rstrip("\r\n"))
        if match:
            ending = line[len(line.rstrip("\r\n")) :]
            quote = match.group(2)
            lines[i] = f"{match.group(1)}{quote}{value}{quote}{match.group(3)}{ending}"
            return "".join(lines)
    return None


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
