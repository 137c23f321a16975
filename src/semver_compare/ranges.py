# SPDX-License-Identifier: MIT
"""Range membership predicates for dependency constraints.

Every predicate takes ``(a, b)`` where ``a`` is the version written in the
constraint and ``b`` is the candidate being checked. Names describe where
``b`` sits relative to ``a``: ``is_greater_than(a, b)`` is true when ``b > a``.

Operators:
    =   equals                      >   is_greater_than
    !   avoid                       >=  is_greater_than_or_equal_to
    ~   is_approximately            <   is_less_than
    ^   is_compatible               <=  is_less_than_or_equal_to
    @   equal_non_version (opaque pins such as commit hashes)
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from .compare import ComparisonResult, compare
from .semver import InvalidVersionError, Version, parse_version

logger = logging.getLogger(__name__)


class UnknownOperatorError(ValueError):
    """Raised when a constraint uses an operator with no predicate."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Unknown version operator: {operator!r}")


def equals(a: Version, b: Version) -> bool:
    """Return True if ``b`` is the same version as ``a``."""
    return compare(a, b) == ComparisonResult.EQUAL


def is_greater_than(a: Version, b: Version) -> bool:
    """Return True if ``b > a``."""
    return compare(a, b) == ComparisonResult.A_IS_LESS


def is_greater_than_or_equal_to(a: Version, b: Version) -> bool:
    """Return True if ``b >= a``."""
    return compare(a, b) != ComparisonResult.A_IS_GREATER


def is_less_than(a: Version, b: Version) -> bool:
    """Return True if ``b < a``."""
    return compare(a, b) == ComparisonResult.A_IS_GREATER


def is_less_than_or_equal_to(a: Version, b: Version) -> bool:
    """Return True if ``b <= a``."""
    return compare(a, b) != ComparisonResult.A_IS_LESS


def avoid(a: Version, b: Version) -> bool:
    """Return True if ``b`` should be avoided according to ``!a``."""
    return not equals(a, b)


def _upper_bound(major: int, minor: int) -> Version:
    """Synthesize the exclusive ``MAJOR.MINOR`` bound of a ~ or ^ range."""
    try:
        bound = f"{major}.{minor}"
    except ValueError as exc:
        # str(int) is capped by sys.get_int_max_str_digits()
        raise InvalidVersionError("<upper bound>", f"Cannot build upper bound: {exc}") from exc
    return parse_version(bound)


def _is_unstable_boundary(upper: Version, b: Version, bound_by_minor: bool) -> bool:
    """Check whether ``b`` is a pre-release of the excluded upper boundary.

    Pre-releases sort below their release, so ``2.0.0-alpha < 2.0.0`` and the
    plain ``< upper`` test alone would let them in.
    """
    if b.prerelease is None or b.major != upper.major:
        return False
    if bound_by_minor and b.minor != upper.minor:
        return False
    logger.debug("Rejecting %s: pre-release of excluded upper bound %s", b, upper)
    return True


def is_approximately(a: Version, b: Version) -> bool:
    """Return True if ``b`` satisfies ``~a``.

    The upper bound is exclusive:

        ~1.2.3  ->  >=1.2.3 <1.3.0
        ~1.2    ->  >=1.2   <2.0.0
        ~1.2.0  ->  >=1.2.0 <2.0.0

    A pre-release of the upper bound (``1.3.0-beta`` for ``~1.2.3``) never
    matches.

    Raises:
        InvalidVersionError: If the upper bound cannot be built, which only
            happens if the version record itself is malformed
    """
    if not is_greater_than_or_equal_to(a, b):
        return False

    bound_by_minor = a.patch_level > 0
    if bound_by_minor:
        upper = _upper_bound(a.major, a.minor + 1)
    else:
        upper = _upper_bound(a.major + 1, 0)

    if not is_less_than(upper, b):
        return False

    return not _is_unstable_boundary(upper, b, bound_by_minor)


def is_compatible(a: Version, b: Version) -> bool:
    """Return True if ``b`` satisfies ``^a``, i.e. ``>=a <(a.major + 1).0.0``.

    Pre-releases of the next major version never match.

    Raises:
        InvalidVersionError: If the upper bound cannot be built
    """
    if not is_greater_than_or_equal_to(a, b):
        return False

    upper = _upper_bound(a.major + 1, 0)
    if not is_less_than(upper, b):
        return False

    return not _is_unstable_boundary(upper, b, bound_by_minor=False)


def equal_non_version(a: str, b: str) -> bool:
    """Return True if pin ``b`` is exactly ``a`` (``@a``, e.g. a commit hash).

    No version parsing happens; the match is case-sensitive.
    """
    return a == b


OPERATORS: dict[str, Callable[..., bool]] = {
    "=": equals,
    "==": equals,
    ">": is_greater_than,
    ">=": is_greater_than_or_equal_to,
    "<": is_less_than,
    "<=": is_less_than_or_equal_to,
    "!": avoid,
    "!=": avoid,
    "~": is_approximately,
    "^": is_compatible,
    "@": equal_non_version,
}


def matches(operator: str, a: Union[str, Version], b: Union[str, Version]) -> bool:
    """Check whether candidate ``b`` satisfies the constraint ``<operator><a>``.

    Args:
        operator: One of the keys of OPERATORS
        a: The version (or pin, for ``@``) written in the constraint
        b: The candidate version (or pin)

    Returns:
        True if ``b`` satisfies the constraint

    Raises:
        UnknownOperatorError: If the operator is not recognised
        InvalidVersionError: If a version string cannot be parsed

    Examples:
        >>> matches("^", "1.2.3", "1.9.9")
        True
        >>> matches(">", "1.2.3", "1.2.4")
        True
        >>> matches("@", "a1b2c3", "A1B2C3")
        False
    """
    try:
        predicate = OPERATORS[operator]
    except KeyError:
        raise UnknownOperatorError(operator) from None

    if predicate is equal_non_version:
        return equal_non_version(str(a), str(b))

    v1 = parse_version(a) if isinstance(a, str) else a
    v2 = parse_version(b) if isinstance(b, str) else b
    return predicate(v1, v2)
