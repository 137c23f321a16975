# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering and range predicates.

These tests verify that:
- compare() is a total order (reflexive, antisymmetric, transitive)
- version_key() sorts exactly like compare()
- avoid() is the negation of equals() and the relational predicates agree
- ~ and ^ never admit versions outside their bounds
"""

from __future__ import annotations

import functools

from hypothesis import given, settings, strategies as st

from semver_compare import (
    ComparisonResult,
    Version,
    avoid,
    compare,
    equals,
    is_approximately,
    is_compatible,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Small ranges make equal triples and shared pre-release prefixes likely
numeric_identifiers = st.integers(0, 12).map(str)
alphanumeric_identifiers = st.sampled_from(["alpha", "beta", "rc", "x", "Z", "0a", "a-1"])
identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)

prerelease_tags = st.lists(identifiers, min_size=1, max_size=4).map(".".join)


@st.composite
def versions(draw, max_field: int = 3):
    """Generate a Version, sometimes without a patch level or with a pre-release."""
    return Version(
        major=draw(st.integers(0, max_field)),
        minor=draw(st.integers(0, max_field)),
        patch=draw(st.one_of(st.none(), st.integers(0, max_field))),
        prerelease=draw(st.one_of(st.none(), prerelease_tags)),
    )


# =============================================================================
# Ordering laws
# =============================================================================


class TestTotalOrder:
    """compare() must be a strict total order."""

    @given(a=versions())
    @settings(max_examples=200)
    def test_reflexive(self, a):
        """Every version equals itself."""
        assert compare(a, a) == ComparisonResult.EQUAL

    @given(a=versions(), b=versions())
    @settings(max_examples=300)
    def test_antisymmetric(self, a, b):
        """Swapping operands negates the result."""
        assert compare(a, b) == -compare(b, a)

    @given(a=versions(), b=versions(), c=versions())
    @settings(max_examples=300)
    def test_transitive(self, a, b, c):
        """a <= b and b <= c implies a <= c."""
        ordered = sorted([a, b, c], key=functools.cmp_to_key(compare))
        assert compare(ordered[0], ordered[1]) <= 0
        assert compare(ordered[1], ordered[2]) <= 0
        assert compare(ordered[0], ordered[2]) <= 0

    @given(a=versions(), b=versions())
    @settings(max_examples=300)
    def test_version_key_agrees(self, a, b):
        """version_key() orders pairs exactly like compare()."""
        ka, kb = version_key(a), version_key(b)
        expected = (ka > kb) - (ka < kb)
        assert compare(a, b) == expected

    @given(a=versions())
    @settings(max_examples=100)
    def test_release_above_prerelease(self, a):
        """A release sorts above every pre-release of the same triple."""
        release = Version(a.major, a.minor, a.patch)
        if a.prerelease is not None:
            assert compare(a, release) == ComparisonResult.A_IS_LESS


# =============================================================================
# Predicate identities
# =============================================================================


class TestPredicates:
    """Relational predicates are views over a single compare() call."""

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_avoid_is_not_equals(self, a, b):
        """avoid(a, b) == not equals(a, b)."""
        assert avoid(a, b) is (not equals(a, b))

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_polarity(self, a, b):
        """Each predicate tests where b sits relative to a."""
        result = compare(b, a)
        assert is_greater_than(a, b) is (result > 0)
        assert is_greater_than_or_equal_to(a, b) is (result >= 0)
        assert is_less_than(a, b) is (result < 0)
        assert is_less_than_or_equal_to(a, b) is (result <= 0)

    @given(a=versions(max_field=5), b=versions(max_field=5))
    @settings(max_examples=300)
    def test_compatible_bounds(self, a, b):
        """^a admits only a <= b < next major, and no pre-release of next major."""
        if is_compatible(a, b):
            assert compare(a, b) <= 0
            assert b.major == a.major

    @given(a=versions(max_field=5), b=versions(max_field=5))
    @settings(max_examples=300)
    def test_approximately_bounds(self, a, b):
        """~a stays inside ^a and within the same minor when a has a patch level."""
        if is_approximately(a, b):
            assert is_compatible(a, b)
            if a.patch_level > 0:
                assert b.minor == a.minor
