# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and incrementing.

This package parses tolerant SemVer 2.0.0 strings (optional ``v`` prefix,
omitted minor/patch), orders them by SemVer precedence, filters batches of
raw candidates and computes the next version for a release type.

Example:
    >>> from verbump_version import parse_version, compare_versions, increment_version
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
    >>> increment_version("1.2.3", "premajor", "rc")
    '2.0.0-rc.0'
"""

__version__ = "0.1.0"

from .semver import (
    Identifier,
    Version,
    parse_version,
    format_version,
    validate,
    is_valid_semver,
    major_version,
    minor_version,
    patch_version,
    prerelease_identifiers,
    InvalidVersionError,
    SEMVER_PATTERN,
    UINT64_MAX,
)
from .compare import (
    compare_versions,
    version_key,
)
from .listing import (
    filter_valid,
    sorted_valid,
    latest_valid,
)
from .increment import (
    ReleaseType,
    ReleaseTypeError,
    UnknownReleaseTypeError,
    InternalOnlyReleaseTypeError,
    release_type_from_name,
    increment_version,
)

__all__ = [
    # Version parsing
    "Identifier",
    "Version",
    "parse_version",
    "format_version",
    "validate",
    "is_valid_semver",
    "major_version",
    "minor_version",
    "patch_version",
    "prerelease_identifiers",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    "UINT64_MAX",
    # Version comparison
    "compare_versions",
    "version_key",
    # Batch processing
    "filter_valid",
    "sorted_valid",
    "latest_valid",
    # Increments
    "ReleaseType",
    "ReleaseTypeError",
    "UnknownReleaseTypeError",
    "InternalOnlyReleaseTypeError",
    "release_type_from_name",
    "increment_version",
]
