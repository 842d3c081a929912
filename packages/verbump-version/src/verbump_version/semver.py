# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

The parser is tolerant on input and canonical on output:
- An optional leading ``v`` or ``V`` is accepted and dropped.
- The version core may have one, two or three numeric components
  (``1``, ``1.2``, ``1.2.3``); missing components default to 0.
- Pre-release: ``-alpha``, ``-alpha.1``, ``-rc.2``, ``-0.3.7``
- Build metadata: ``+build``, ``+build.123``, ``+20240101``

Formatting always renders ``MAJOR.MINOR.PATCH[-prerelease][+build]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

UINT64_MAX = 2**64 - 1

# Loose grammar: optional v prefix, 1-3 core components, SemVer identifiers.
# Leading zeros in numeric prerelease identifiers are rejected after matching.
SEMVER_PATTERN = re.compile(
    r"[vV]?(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+))?"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<buildmetadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Identifier:
    """A single dot-separated pre-release identifier.

    An identifier made only of ASCII digits is numeric and compares by value;
    anything else is alphanumeric and compares by ASCII order.
    """

    text: str

    def __str__(self) -> str:
        return self.text

    @property
    def is_numeric(self) -> bool:
        """Return True if the identifier consists only of digits."""
        return _NUMERIC_IDENTIFIER.fullmatch(self.text) is not None

    @property
    def numeric_value(self) -> int:
        """Return the integer value of a numeric identifier."""
        if not self.is_numeric:
            raise ValueError(f"Identifier {self.text!r} is not numeric")
        return int(self.text)

    def bumped(self) -> "Identifier":
        """Return a numeric identifier incremented by one."""
        return Identifier(str(self.numeric_value + 1))


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, empty for a release
        build: Build metadata identifiers, ignored for precedence
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = field(default=())
    build: tuple[str, ...] = field(default=())

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def release(self) -> "Version":
        """Return the same version core without pre-release or build metadata."""
        return Version(self.major, self.minor, self.patch)


def _core_component(version_string: str, raw: str | None) -> int:
    if raw is None:
        return 0
    value = int(raw)
    if value > UINT64_MAX:
        raise InvalidVersionError(
            version_string, f"Version component {raw} exceeds 64-bit range: {version_string}"
        )
    return value


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string of the form
            [v]MAJOR[.MINOR[.PATCH]][-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string is not a valid version

    Examples:
        >>> parse_version("1.2.3").major
        1
        >>> str(parse_version("v1.2"))
        '1.2.0'
        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    prerelease: tuple[Identifier, ...] = ()
    if match.group("prerelease"):
        prerelease = tuple(Identifier(part) for part in match.group("prerelease").split("."))
        for identifier in prerelease:
            if identifier.is_numeric and len(identifier.text) > 1 and identifier.text[0] == "0":
                raise InvalidVersionError(
                    version_string,
                    f"Numeric pre-release identifier has a leading zero: {identifier.text}",
                )

    build: tuple[str, ...] = ()
    if match.group("buildmetadata"):
        build = tuple(match.group("buildmetadata").split("."))

    return Version(
        major=_core_component(version_string, match.group("major")),
        minor=_core_component(version_string, match.group("minor")),
        patch=_core_component(version_string, match.group("patch")),
        prerelease=prerelease,
        build=build,
    )


def format_version(version: Version) -> str:
    """Render a Version in canonical form.

    The output has no ``v`` prefix and exactly three core components;
    pre-release and build metadata are appended only when present.
    """
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        text += "-" + ".".join(str(identifier) for identifier in version.prerelease)
    if version.build:
        text += "+" + ".".join(version.build)
    return text


def validate(version_string: str) -> str:
    """Check a version string and return its canonical form.

    Raises:
        InvalidVersionError: If the string is not a valid version

    Examples:
        >>> validate("v1.2")
        '1.2.0'
    """
    return format_version(parse_version(version_string))


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("1.0.0.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def major_version(version_string: str) -> int:
    """Return the major component of a version string."""
    return parse_version(version_string).major


def minor_version(version_string: str) -> int:
    """Return the minor component of a version string."""
    return parse_version(version_string).minor


def patch_version(version_string: str) -> int:
    """Return the patch component of a version string."""
    return parse_version(version_string).patch


def prerelease_identifiers(version_string: str) -> list[str]:
    """Return the pre-release identifiers of a version string.

    A release version yields an empty list.

    Examples:
        >>> prerelease_identifiers("1.0.0-alpha.1")
        ['alpha', '1']
        >>> prerelease_identifiers("1.0.0")
        []
    """
    return [identifier.text for identifier in parse_version(version_string).prerelease]
