# SPDX-License-Identifier: MIT
"""Version records consumed by the comparator and range evaluator.

Supports MAJOR.MINOR[.PATCH] with optional pre-release and build metadata:
- Patch level: optional, a missing patch level compares as 0
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Same identifier rules as the SemVer 2.0.0 suggested regex, with PATCH optional
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"(?:\.(?P<patch>0|[1-9]\d*))?"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class InvalidVersionError(Exception):
    """A string could not be turned into a Version.

    Also surfaces from the ~ and ^ predicates when their upper bound cannot
    be synthesized.
    """

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Not a version: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version record.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Optional patch level; None is treated as 0 when comparing
        prerelease: Optional pre-release tag (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata, never used for ordering
    """

    major: int
    minor: int
    patch: Optional[int] = None
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        """Return the version as written, omitting an absent patch level."""
        version = f"{self.major}.{self.minor}"
        if self.patch is not None:
            version += f".{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    @property
    def patch_level(self) -> int:
        """Return the patch level used for ordering."""
        return self.patch if self.patch is not None else 0

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return MAJOR.MINOR.PATCH with the effective patch level filled in."""
        return f"{self.major}.{self.minor}.{self.patch_level}"


def parse_version(version_string: str) -> Version:
    """Build a Version from ``MAJOR.MINOR[.PATCH][-prerelease][+build]``.

    The range predicates use this to synthesize two-part upper bounds such
    as ``"1.3"``, so an omitted patch level is kept as None rather than 0.

    Raises:
        InvalidVersionError: If the string does not match SEMVER_PATTERN, or a
            numeric field is too long to convert to an int

    Examples:
        >>> parse_version("2.0")
        Version(major=2, minor=0, patch=None, prerelease=None, build=None)
        >>> str(parse_version(" 1.3.0-rc.1+exp.sha.5114f85 "))
        '1.3.0-rc.1+exp.sha.5114f85'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.match(version_string)
    if match is None:
        raise InvalidVersionError(version_string)

    major, minor, patch = match.group("major", "minor", "patch")
    try:
        return Version(
            major=int(major),
            minor=int(minor),
            patch=None if patch is None else int(patch),
            prerelease=match.group("prerelease"),
            build=match.group("buildmetadata"),
        )
    except ValueError as exc:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise InvalidVersionError(version_string, f"Numeric field out of range: {exc}") from exc


def is_valid_semver(version_string: str) -> bool:
    """Return True if parse_version() would accept the string."""
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
