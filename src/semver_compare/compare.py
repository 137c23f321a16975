# SPDX-License-Identifier: MIT
"""Version ordering following semver.org precedence rules.

Ordering is decided by MAJOR.MINOR.PATCH first (a missing patch level counts
as 0), then by the pre-release tag. A release sorts above every pre-release
of the same triple. Build metadata is ignored.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .semver import Version, parse_version


class ComparisonResult(IntEnum):
    """Outcome of comparing a left operand ``a`` with a right operand ``b``."""

    A_IS_LESS = -1
    EQUAL = 0
    A_IS_GREATER = 1


def _order(val1: Union[int, str], val2: Union[int, str]) -> ComparisonResult:
    if val1 == val2:
        return ComparisonResult.EQUAL
    return ComparisonResult.A_IS_LESS if val1 < val2 else ComparisonResult.A_IS_GREATER


def _is_numeric(part: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return part.isascii() and part.isdigit()


def _compare_numeric(part1: str, part2: str) -> ComparisonResult:
    """Compare two digit strings as integers of unbounded length."""
    digits1 = part1.lstrip("0")
    digits2 = part2.lstrip("0")
    if len(digits1) != len(digits2):
        return _order(len(digits1), len(digits2))
    # Same length, so string order is numeric order
    return _order(digits1, digits2)


def compare_core(v1: Version, v2: Version) -> ComparisonResult:
    """Compare the MAJOR.MINOR.PATCH parts of two versions."""
    for val1, val2 in (
        (v1.major, v2.major),
        (v1.minor, v2.minor),
        (v1.patch_level, v2.patch_level),
    ):
        if val1 != val2:
            return _order(val1, val2)
    return ComparisonResult.EQUAL


def compare_prerelease(pre1: str, pre2: str) -> ComparisonResult:
    """Compare two pre-release tags.

    Both tags are split on ``.`` and walked identifier by identifier:

    - two numeric identifiers compare as integers, so ``2 < 10``
    - a numeric identifier is always lower than an alphanumeric one
    - two alphanumeric identifiers compare in ASCII order
    - when one tag is a prefix of the other, the longer tag is greater

    Returns:
        A_IS_LESS, EQUAL or A_IS_GREATER for ``pre1`` relative to ``pre2``
    """
    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for i, p1 in enumerate(parts1):
        if i >= len(parts2):
            return ComparisonResult.A_IS_GREATER
        p2 = parts2[i]

        is_num1 = _is_numeric(p1)
        is_num2 = _is_numeric(p2)

        if is_num1 and is_num2:
            result = _compare_numeric(p1, p2)
            if result != ComparisonResult.EQUAL:
                return result
        elif is_num1:
            return ComparisonResult.A_IS_LESS
        elif is_num2:
            return ComparisonResult.A_IS_GREATER
        elif p1 != p2:
            return _order(p1, p2)

    if len(parts1) < len(parts2):
        return ComparisonResult.A_IS_LESS
    return ComparisonResult.EQUAL


def compare(v1: Version, v2: Version) -> ComparisonResult:
    """Compare two version records.

    Examples:
        >>> compare(Version(1, 0, 0), Version(1, 0))
        <ComparisonResult.EQUAL: 0>
        >>> compare(Version(1, 0, 0, "alpha"), Version(1, 0, 0))
        <ComparisonResult.A_IS_LESS: -1>
    """
    result = compare_core(v1, v2)
    if result != ComparisonResult.EQUAL:
        return result

    if v1.prerelease is None and v2.prerelease is None:
        return ComparisonResult.EQUAL
    if v2.prerelease is None:
        return ComparisonResult.A_IS_LESS  # Pre-release < release
    if v1.prerelease is None:
        return ComparisonResult.A_IS_GREATER  # Release > pre-release

    return compare_prerelease(v1.prerelease, v2.prerelease)


def compare_versions(
    version1: Union[str, Version], version2: Union[str, Version]
) -> ComparisonResult:
    """Compare two versions given as strings or Version objects.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        A ComparisonResult, which also compares equal to -1, 0 or 1

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <ComparisonResult.A_IS_LESS: -1>
        >>> compare_versions("1.0.0-alpha.10", "1.0.0-alpha.2")
        <ComparisonResult.A_IS_GREATER: 1>
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare(v1, v2)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key that orders versions exactly like compare().

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Release: (1,) sorts after any pre-release key (0, ...)
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if _is_numeric(part):
                digits = part.lstrip("0")
                parts.append((0, len(digits), digits))
            else:
                parts.append((1, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch_level, prerelease_key)
