# SPDX-License-Identifier: MIT
"""Choose, list or increment versions for one CLI invocation.

The command line only parses options into a RunRequest; everything it
decides is done here so it can be exercised without click or git.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from verbump_version import increment_version, release_type_from_name, sorted_valid

from .git import read_tags

TagReader = Callable[[Path], list[str]]


class RequestError(Exception):
    """Raised when a RunRequest combines options that cannot be used together."""

    pass


@dataclass(frozen=True)
class RunRequest:
    """Parameters of a single run.

    Attributes:
        versions: Raw versions given on the command line
        increment: Release type name, empty to only list versions
        preid: Pre-release identifier for pre* increments
        default_version: Version added to the candidates, if any
        repo_dir: Read candidates from the tags of this repository
        latest_only: Only report the latest version
    """

    versions: tuple[str, ...] = ()
    increment: str = ""
    preid: str = ""
    default_version: str = ""
    repo_dir: Optional[Path] = None
    latest_only: bool = False


@dataclass
class RunResult:
    """Outcome of a run.

    Attributes:
        candidates: Every raw version considered
        valid: Valid candidates in ascending order
        output: Text to print, or None when there is nothing to print
    """

    candidates: list[str] = field(default_factory=list)
    valid: list[str] = field(default_factory=list)
    output: Optional[str] = None

    @property
    def dropped(self) -> int:
        """Number of candidates that were not valid versions."""
        return len(self.candidates) - len(self.valid)


def check_request(request: RunRequest) -> None:
    """Validate the combination of versions and repository.

    Raises:
        RequestError: If no source of versions is given, or more than one
            version is given together with a repository
    """
    if not request.versions and request.repo_dir is None:
        raise RequestError("at least one version needs to be provided")

    if len(request.versions) > 1 and request.repo_dir is not None:
        raise RequestError("versions are not allowed when specifying a git repository")


def collect_candidates(request: RunRequest, tag_reader: TagReader = read_tags) -> list[str]:
    """Merge the default version, explicit versions and repository tags."""
    candidates: list[str] = []
    if request.default_version:
        candidates.append(request.default_version)

    candidates.extend(request.versions)

    if request.repo_dir is not None:
        candidates.extend(tag_reader(request.repo_dir))

    return candidates


def execute(request: RunRequest, tag_reader: TagReader = read_tags) -> RunResult:
    """Run a request.

    Without an increment the valid versions are listed in ascending order
    (or only the latest one). With an increment the latest valid version is
    incremented. Nothing is output when no candidate is valid.

    Raises:
        RequestError: If the request is not usable
        InvalidVersionError: If the increment produces an invalid version
        ReleaseTypeError: If the increment name is not a public release type
        GitTagError: If repository tags cannot be read
    """
    check_request(request)

    # Resolve the release type before touching the repository
    release_type = release_type_from_name(request.increment) if request.increment else None

    candidates = collect_candidates(request, tag_reader)
    valid = sorted_valid(candidates)
    result = RunResult(candidates=candidates, valid=valid)

    if not valid:
        return result

    if release_type is None:
        result.output = valid[-1] if request.latest_only else " ".join(valid)
    else:
        result.output = increment_version(valid[-1], release_type, request.preid)

    return result
