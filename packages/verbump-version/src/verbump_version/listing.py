# SPDX-License-Identifier: MIT
"""Best-effort processing of batches of raw version strings.

Unlike parse_version, these helpers never raise for malformed entries:
they are meant for heterogeneous inputs such as repository tag lists,
where anything that is not a version is simply skipped.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .compare import version_key
from .semver import InvalidVersionError, Version, format_version, parse_version


def _valid_versions(raws: Iterable[str]) -> list[Version]:
    versions: list[Version] = []
    for raw in raws:
        try:
            versions.append(parse_version(raw))
        except InvalidVersionError:
            continue
    return versions


def filter_valid(raws: Iterable[str]) -> list[str]:
    """Return the valid entries of raws in canonical form, in input order.

    Examples:
        >>> filter_valid(["v1.2", "latest", "2.0.0-rc.1"])
        ['1.2.0', '2.0.0-rc.1']
    """
    return [format_version(v) for v in _valid_versions(raws)]


def sorted_valid(raws: Iterable[str]) -> list[str]:
    """Return the valid entries of raws in canonical form, sorted ascending.

    The sort is stable: entries of equal precedence (e.g. differing only in
    build metadata) keep their input order.

    Examples:
        >>> sorted_valid(["1.10.0", "1.9.0", "nope", "1.9.0-beta"])
        ['1.9.0-beta', '1.9.0', '1.10.0']
    """
    return [format_version(v) for v in sorted(_valid_versions(raws), key=version_key)]


def latest_valid(raws: Iterable[str]) -> Optional[str]:
    """Return the greatest valid entry of raws, or None if there is none."""
    ordered = sorted_valid(raws)
    if not ordered:
        return None
    return ordered[-1]
