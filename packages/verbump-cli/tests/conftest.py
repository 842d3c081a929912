# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory without a pyproject.toml."""
    work_dir = tmp_path / "cwd"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    return work_dir


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with [tool.verbump] settings."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.verbump]
default = "v0.1"
preid = "rc"
latest-only = true
"""
    )

    yield project_dir


@pytest.fixture
def git_repo(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating a git repository with the given tags."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    def _make(*tags: str) -> Path:
        repo_dir = tmp_path / "repo"
        repo_dir.mkdir()

        def git(*args: str) -> None:
            subprocess.run(
                [
                    "git",
                    "-c",
                    "user.name=Test Author",
                    "-c",
                    "user.email=test@example.com",
                    "-c",
                    "commit.gpgsign=false",
                    "-c",
                    "tag.gpgsign=false",
                    *args,
                ],
                cwd=repo_dir,
                check=True,
                capture_output=True,
            )

        git("init", "-q")
        git("commit", "-q", "--allow-empty", "-m", "Initial commit")
        for tag in tags:
            git("tag", tag)
        return repo_dir

    return _make
