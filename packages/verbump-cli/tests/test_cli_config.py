# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from verbump_cli.config import CLIConfig, ConfigError, find_project_root, load_config


class TestCLIConfig:
    """Tests for CLIConfig."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        """Test loading [tool.verbump] from pyproject.toml."""
        config = CLIConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.default_version == "0.1.0"
        assert config.preid == "rc"
        assert config.latest_only is True
        assert config.has_pyproject() is True

    def test_missing_table(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml without [tool.verbump] yields defaults."""
        config = CLIConfig.from_pyproject_dict({"project": {"name": "x"}}, tmp_path)

        assert config.default_version == ""
        assert config.preid == ""
        assert config.latest_only is False

    def test_latest_only_underscore(self, tmp_path: Path) -> None:
        """Test that latest_only is accepted as an alternative spelling."""
        config = CLIConfig.from_pyproject_dict(
            {"tool": {"verbump": {"latest_only": True}}}, tmp_path
        )

        assert config.latest_only is True

    @pytest.mark.parametrize(
        "table",
        [
            {"default": "1.2.3.4"},
            {"default": 1},
            {"default": "v1.0.0-01"},
            {"latest-only": "yes"},
            {"preid": ["rc"]},
        ],
    )
    def test_invalid_values(self, tmp_path: Path, table: dict) -> None:
        """Test that invalid configured values raise ConfigError."""
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject_dict({"tool": {"verbump": table}}, tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.verbump\n")

        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject(tmp_path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            CLIConfig.from_pyproject(tmp_path)


class TestLoadConfig:
    """Tests for find_project_root and load_config."""

    def test_find_project_root_from_subdirectory(self, temp_project: Path) -> None:
        """Test that the project root is found from a nested directory."""
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == temp_project.resolve()

    def test_find_project_root_none(self, isolated_cwd: Path) -> None:
        """Test that None is returned when no project exists."""
        assert find_project_root(isolated_cwd) is None

    def test_load_config_defaults(self, isolated_cwd: Path) -> None:
        """Test that defaults are used outside a project."""
        config = load_config()

        assert config.default_version == ""
        assert config.has_pyproject() is False

    def test_load_config_directory_without_pyproject(self, tmp_path: Path) -> None:
        """Test loading from a directory without pyproject.toml."""
        config = load_config(tmp_path)

        assert config.project_dir == tmp_path
        assert config.latest_only is False

    def test_load_config_project(self, temp_project: Path) -> None:
        """Test loading from an explicit project directory."""
        assert load_config(temp_project).preid == "rc"
