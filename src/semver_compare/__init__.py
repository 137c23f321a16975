# SPDX-License-Identifier: MIT
"""Semantic version ordering and range membership.

This package compares semantic versions using semver.org precedence and
answers dependency-constraint questions such as ``~1.2.3``, ``^1.2.3`` and
``@<commit>``.

Example:
    >>> from semver_compare import parse_version, compare, is_compatible
    >>>
    >>> compare(parse_version("1.0.0-alpha.2"), parse_version("1.0.0-alpha.10"))
    <ComparisonResult.A_IS_LESS: -1>
    >>>
    >>> is_compatible(parse_version("1.2.3"), parse_version("2.0.0-beta"))
    False
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    ComparisonResult,
    compare,
    compare_core,
    compare_prerelease,
    compare_versions,
    version_key,
)
from .ranges import (
    OPERATORS,
    UnknownOperatorError,
    avoid,
    equal_non_version,
    equals,
    is_approximately,
    is_compatible,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    matches,
)

__all__ = [
    # Version records
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Ordering
    "ComparisonResult",
    "compare",
    "compare_core",
    "compare_prerelease",
    "compare_versions",
    "version_key",
    # Range predicates
    "equals",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_less_than",
    "is_less_than_or_equal_to",
    "avoid",
    "is_approximately",
    "is_compatible",
    "equal_non_version",
    "OPERATORS",
    "matches",
    "UnknownOperatorError",
]
