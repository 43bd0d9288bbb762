# SPDX-License-Identifier: MIT
"""Version ranges as intervals with unbounded, inclusive or exclusive edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .parser import parse_version
from .version import Ordering, Version, compare


@dataclass(frozen=True, slots=True)
class Unbounded:
    """An interval edge that admits every version on its side."""


@dataclass(frozen=True, slots=True)
class Inclusive:
    """An interval edge that admits its own version."""

    version: Version


@dataclass(frozen=True, slots=True)
class Exclusive:
    """An interval edge that excludes its own version."""

    version: Version


Bound = Union[Unbounded, Inclusive, Exclusive]

UNBOUNDED = Unbounded()


def _check_bound(name: str, bound: object) -> None:
    if not isinstance(bound, (Unbounded, Inclusive, Exclusive)):
        raise TypeError(f"{name} bound must be Unbounded, Inclusive or Exclusive, got {bound!r}")
    if not isinstance(bound, Unbounded) and not isinstance(bound.version, Version):
        raise TypeError(f"{name} bound must wrap a Version, got {bound.version!r}")


@dataclass(frozen=True, slots=True)
class VersionRange:
    """An immutable interval of versions.

    A range whose lower edge lies above its upper edge is valid and simply
    matches nothing.

    Attributes:
        lower: Lower edge of the interval
        upper: Upper edge of the interval

    Example:
        >>> from strata import parse_version
        >>> r = VersionRange(Inclusive(parse_version("1.0.0")), Exclusive(parse_version("2.0.0")))
        >>> str(r)
        '[1.0.0,2.0.0)'
        >>> parse_version("1.5.0") in r
        True
    """

    lower: Bound
    upper: Bound

    def __post_init__(self) -> None:
        _check_bound("lower", self.lower)
        _check_bound("upper", self.upper)

    @classmethod
    def between(
        cls,
        lower: Optional[Version],
        upper: Optional[Version],
        lower_inclusive: bool = True,
        upper_inclusive: bool = False,
    ) -> "VersionRange":
        """Create a range from optional edge versions; None means unbounded."""
        return cls(
            _make_bound(lower, lower_inclusive),
            _make_bound(upper, upper_inclusive),
        )

    @classmethod
    def exactly(cls, version: Version) -> "VersionRange":
        """Create the range matching only ``version`` (and its build variants)."""
        return cls(Inclusive(version), Inclusive(version))

    @classmethod
    def any(cls) -> "VersionRange":
        """Create the range matching every version."""
        return cls(UNBOUNDED, UNBOUNDED)

    def is_satisfied_by(self, version: Union[Version, str]) -> bool:
        """Return True if ``version`` lies within this range.

        Args:
            version: A Version, or version text to parse first

        Raises:
            ParseError: If ``version`` is text that is not a valid version
        """
        if isinstance(version, str):
            version = parse_version(version)
        return is_satisfied_by(self, version)

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (Version, str)):
            return False
        return self.is_satisfied_by(version)

    def __str__(self) -> str:
        """Return the interval form, e.g. ``[1.2.0,1.3.0)``."""
        if isinstance(self.lower, Unbounded):
            lower = "("
        elif isinstance(self.lower, Inclusive):
            lower = f"[{self.lower.version}"
        else:
            lower = f"({self.lower.version}"

        if isinstance(self.upper, Unbounded):
            upper = ")"
        elif isinstance(self.upper, Inclusive):
            upper = f"{self.upper.version}]"
        else:
            upper = f"{self.upper.version})"

        return f"{lower},{upper}"


def _make_bound(version: Optional[Version], inclusive: bool) -> Bound:
    if version is None:
        return UNBOUNDED
    return Inclusive(version) if inclusive else Exclusive(version)


def _satisfies_lower(bound: Bound, version: Version) -> bool:
    if isinstance(bound, Unbounded):
        return True
    if isinstance(bound, Inclusive):
        return compare(version, bound.version) is not Ordering.LESS
    return compare(version, bound.version) is Ordering.GREATER


def _satisfies_upper(bound: Bound, version: Version) -> bool:
    if isinstance(bound, Unbounded):
        return True
    if isinstance(bound, Inclusive):
        return compare(version, bound.version) is not Ordering.GREATER
    return compare(version, bound.version) is Ordering.LESS


def is_satisfied_by(version_range: VersionRange, version: Version) -> bool:
    """Check whether a version lies within a range.

    Args:
        version_range: The range to test against
        version: The version to test

    Returns:
        True if the version is above the lower edge and below the upper edge

    Examples:
        >>> from strata import parse_version, parse_version_range
        >>> is_satisfied_by(parse_version_range("(,4.5.6)"), parse_version("4.5.6"))
        False
        >>> is_satisfied_by(parse_version_range("(,4.5.6)"), parse_version("4.5.5"))
        True
    """
    return _satisfies_lower(version_range.lower, version) and _satisfies_upper(
        version_range.upper, version
    )
