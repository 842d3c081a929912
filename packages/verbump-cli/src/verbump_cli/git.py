# SPDX-License-Identifier: MIT
"""Read tag names from a local git repository."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


class GitTagError(Exception):
    """Raised when tags cannot be read from a repository."""

    pass


def _repository_dir(path: Optional[str | Path]) -> Path:
    """Resolve the directory git should run in.

    A regular file resolves to its parent directory.
    """
    if path is None or str(path) == "":
        return Path.cwd()

    repo_path = Path(path)
    if not repo_path.exists():
        raise GitTagError(f"Repository path does not exist: {repo_path}")
    if repo_path.is_file():
        return repo_path.parent
    return repo_path


def read_tags(path: Optional[str | Path] = None, git_executable: str = "git") -> list[str]:
    """Return the short names of all tags in a git repository.

    Args:
        path: Any path inside the repository (defaults to cwd)
        git_executable: git command to run

    Returns:
        Tag names in the order git lists them

    Raises:
        GitTagError: If the path is invalid, git is missing or fails
    """
    repo_dir = _repository_dir(path)

    cmd = [git_executable, "-C", str(repo_dir), "tag", "--list"]

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitTagError(f"git executable not found: {git_executable}") from None

    if result.returncode != 0:
        raise GitTagError(f"git tag failed in {repo_dir}:\n{result.stderr.strip()}")

    return [line.strip() for line in result.stdout.splitlines() if line.strip()]
