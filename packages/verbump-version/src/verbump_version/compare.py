# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

A release has higher precedence than any pre-release of the same core.
Numeric identifiers sort below alphanumeric ones; build metadata is ignored.
"""

from __future__ import annotations

from typing import Union

from .semver import Identifier, Version, parse_version


def _compare_identifier(id1: Identifier, id2: Identifier) -> int:
    num1 = id1.is_numeric
    num2 = id2.is_numeric

    if num1 and num2:
        n1, n2 = id1.numeric_value, id2.numeric_value
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0
    if num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if num2:
        return 1
    if id1.text != id2.text:
        return -1 if id1.text < id2.text else 1
    return 0


def _compare_prerelease(pre1: tuple[Identifier, ...], pre2: tuple[Identifier, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty sequence (a release) has higher precedence than any
    non-empty one (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for id1, id2 in zip(pre1, pre2):
        result = _compare_identifier(id1, id2)
        if result != 0:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "v1.0")
        0
        >>> compare_versions("1.0.0-alpha.10", "1.0.0-alpha.9")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key that orders versions like compare_versions.

    Versions that compare equal produce equal keys, so the stable
    ``sorted`` keeps their input order.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Release sorts after every pre-release of the same core
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease:
            if identifier.is_numeric:
                parts.append((0, identifier.numeric_value, ""))
            else:
                parts.append((1, 0, identifier.text))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
