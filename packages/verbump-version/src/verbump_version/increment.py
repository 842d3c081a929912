# SPDX-License-Identifier: MIT
"""Version increments by release type.

The increment rules follow npm's node-semver:

- ``major``/``minor``/``patch`` bump the named component and drop any
  pre-release, except that a pre-release of an already bumped core
  (``1.0.0-5`` for major, ``1.2.0-5`` for minor) is promoted to its
  release without a further bump.
- ``premajor``/``preminor``/``prepatch`` bump the core and then start a
  pre-release counter on it.
- ``prerelease`` bumps the counter of an existing pre-release, or acts like
  ``prepatch`` on a release version.

Every increment runs in two phases: a transition of the version core,
followed for the ``pre*`` types by a bump of the pre-release counter.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Callable, Union

from .semver import Identifier, Version, parse_version, validate

# Name of the raw counter bump. It is recognised by release_type_from_name
# only so that it can be rejected with a dedicated error.
INTERNAL_STEP_NAME = "pre"


class ReleaseType(Enum):
    """Release types that can be requested by callers."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    def __str__(self) -> str:
        return self.value


class ReleaseTypeError(ValueError):
    """Base class for release type lookup failures."""

    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        super().__init__(message)


class UnknownReleaseTypeError(ReleaseTypeError):
    """Raised when a release type name is not recognised."""

    def __init__(self, name: str):
        choices = ", ".join(rt.value for rt in ReleaseType)
        super().__init__(name, f"Unknown release type: {name!r} (expected one of: {choices})")


class InternalOnlyReleaseTypeError(ReleaseTypeError):
    """Raised when a release type name is reserved for internal use."""

    def __init__(self, name: str):
        super().__init__(name, f"Release type {name!r} is for internal use only")


def release_type_from_name(name: Union[str, ReleaseType]) -> ReleaseType:
    """Look up a public release type by name.

    Matching ignores case and surrounding whitespace.

    Raises:
        InternalOnlyReleaseTypeError: If name is the internal counter step
        UnknownReleaseTypeError: If name is not a release type

    Examples:
        >>> release_type_from_name(" PreMinor ")
        <ReleaseType.PREMINOR: 'preminor'>
    """
    if isinstance(name, ReleaseType):
        return name

    normalized = str(name).strip().lower()
    if normalized == INTERNAL_STEP_NAME:
        raise InternalOnlyReleaseTypeError(name)
    try:
        return ReleaseType(normalized)
    except ValueError:
        raise UnknownReleaseTypeError(name) from None


def _bump_major(v: Version) -> Version:
    return Version(v.major + 1, 0, 0)


def _bump_minor(v: Version) -> Version:
    return Version(v.major, v.minor + 1, 0)


def _bump_patch(v: Version) -> Version:
    return Version(v.major, v.minor, v.patch + 1)


def _major(v: Version) -> Version:
    # 1.0.0-5 is already a pre-major: promote it to 1.0.0
    if v.minor == 0 and v.patch == 0 and v.prerelease:
        return v.release()
    return _bump_major(v)


def _minor(v: Version) -> Version:
    # 1.2.0-5 is already a pre-minor: promote it to 1.2.0
    if v.patch == 0 and v.prerelease:
        return v.release()
    return _bump_minor(v)


def _prerelease(v: Version) -> Version:
    if v.prerelease:
        return v
    return _bump_patch(v)


def _bump_counter(v: Version, identifier: str) -> Version:
    """Bump the pre-release counter of v.

    Without an identifier the right-most numeric identifier is incremented,
    or ``0`` is appended if there is none. With an identifier, a pre-release
    of the form ``identifier.N...`` has N incremented; anything else is
    replaced by ``identifier.0``.
    """
    ids = list(v.prerelease)

    if identifier:
        if len(ids) >= 2 and ids[0].text == identifier and ids[1].is_numeric:
            ids[1] = ids[1].bumped()
        else:
            ids = [Identifier(identifier), Identifier("0")]
    else:
        for index in range(len(ids) - 1, -1, -1):
            if ids[index].is_numeric:
                ids[index] = ids[index].bumped()
                break
        else:
            ids.append(Identifier("0"))

    return replace(v, prerelease=tuple(ids))


# Core transition per release type, and whether the counter step follows it.
_TRANSITIONS: dict[ReleaseType, tuple[Callable[[Version], Version], bool]] = {
    ReleaseType.MAJOR: (_major, False),
    ReleaseType.MINOR: (_minor, False),
    ReleaseType.PATCH: (_bump_patch, False),
    ReleaseType.PREMAJOR: (_bump_major, True),
    ReleaseType.PREMINOR: (_bump_minor, True),
    ReleaseType.PREPATCH: (_bump_patch, True),
    ReleaseType.PRERELEASE: (_prerelease, True),
}


def increment_version(
    version_string: str,
    release_type: Union[str, ReleaseType],
    identifier: str = "",
) -> str:
    """Return the version that follows version_string for a release type.

    Args:
        version_string: The version to increment
        release_type: A ReleaseType or its name
        identifier: Optional pre-release track such as "alpha" or "rc",
            used by the pre* release types

    Returns:
        The next version in canonical form

    Raises:
        InvalidVersionError: If version_string is invalid, or identifier
            cannot form a valid pre-release
        ReleaseTypeError: If release_type is given as an unusable name

    Examples:
        >>> increment_version("1.2.3", "minor")
        '1.3.0'
        >>> increment_version("1.2.0-5", "minor")
        '1.2.0'
        >>> increment_version("1.2.3", "prerelease", "beta")
        '1.2.4-beta.0'
        >>> increment_version("1.2.4-beta.0", "prerelease", "beta")
        '1.2.4-beta.1'
    """
    release_type = release_type_from_name(release_type)
    version = parse_version(version_string)

    transition, bump_counter = _TRANSITIONS[release_type]
    result = transition(version)
    if bump_counter:
        result = _bump_counter(result, identifier)

    # Re-parse so an unusable identifier or an overflowing core is reported
    return validate(str(result))
