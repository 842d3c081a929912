# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Defaults for the command line can be stored in the ``[tool.verbump]``
table of a project's pyproject.toml::

    [tool.verbump]
    default = "0.1.0"
    preid = "rc"
    latest-only = true
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from verbump_version import InvalidVersionError, validate


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        default_version: Version used when no valid version is found
        preid: Pre-release identifier for pre* increments
        latest_only: Only print the latest version
    """

    project_dir: Path
    default_version: str = ""
    preid: str = ""
    latest_only: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or has invalid values
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
            ConfigError: If a configured value is invalid
        """
        tool_verbump = pyproject.get("tool", {}).get("verbump", {})
        if not isinstance(tool_verbump, dict):
            raise ConfigError("[tool.verbump] must be a table")

        default_version = _get_str(tool_verbump, "default")
        if default_version:
            try:
                default_version = validate(default_version)
            except InvalidVersionError as e:
                raise ConfigError(f"[tool.verbump].default: {e}") from e

        latest_only = tool_verbump.get("latest-only", tool_verbump.get("latest_only", False))
        if not isinstance(latest_only, bool):
            raise ConfigError("[tool.verbump].latest-only must be a boolean")

        return cls(
            project_dir=project_dir,
            default_version=default_version,
            preid=_get_str(tool_verbump, "preid"),
            latest_only=latest_only,
        )

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return (self.project_dir / "pyproject.toml").exists()


def _get_str(table: dict[str, Any], key: str) -> str:
    value = table.get(key, "")
    if not isinstance(value, str):
        raise ConfigError(f"[tool.verbump].{key} must be a string")
    return value.strip()


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance, with defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return CLIConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
