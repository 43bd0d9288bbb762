# SPDX-License-Identifier: MIT
"""Version model and precedence ordering.

Precedence follows semantic versioning:
- major, minor and patch compare numerically
- a release outranks any pre-release of the same core version
- pre-release identifiers compare element by element; numeric identifiers
  compare by value, alphanumeric ones by ASCII ordinal, and numeric
  identifiers always sort before alphanumeric ones
- build metadata is ignored
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable, Union

_IDENTIFIER_CHARS = frozenset("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-")


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: Any, right: Any) -> "Ordering":
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """Pre-release identifier made only of digits, compared by value."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Numeric identifier must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"Numeric identifier must not be negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """Pre-release identifier compared byte for byte."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"Alphanumeric identifier must be a string, got {type(self.value).__name__}"
            )
        if not self.value or not _IDENTIFIER_CHARS.issuperset(self.value):
            raise ValueError(f"Invalid alphanumeric identifier: {self.value!r}")

    def __str__(self) -> str:
        return self.value


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


def identifier_of(text: str) -> Identifier:
    """Classify a raw pre-release component.

    Only digits with no leading zero (or exactly "0") is numeric; anything
    else, including digits with a leading zero, is alphanumeric.

    Examples:
        >>> identifier_of("11")
        NumericIdentifier(value=11)
        >>> identifier_of("011")
        AlphanumericIdentifier(value='011')
    """
    if text.isascii() and text.isdigit() and (text == "0" or not text.startswith("0")):
        return NumericIdentifier(int(text))
    return AlphanumericIdentifier(text)


def _compare_identifiers(left: Identifier, right: Identifier) -> Ordering:
    left_numeric = isinstance(left, NumericIdentifier)
    right_numeric = isinstance(right, NumericIdentifier)
    if left_numeric and right_numeric:
        return Ordering.of(left.value, right.value)
    if left_numeric:
        return Ordering.LESS
    if right_numeric:
        return Ordering.GREATER
    # str comparison on ASCII text is ordinal
    return Ordering.of(left.value, right.value)


def _compare_prerelease(
    left: tuple[Identifier, ...], right: tuple[Identifier, ...]
) -> Ordering:
    if not left and not right:
        return Ordering.EQUAL
    if not left:
        return Ordering.GREATER  # Release > pre-release
    if not right:
        return Ordering.LESS

    for ident1, ident2 in zip(left, right):
        result = _compare_identifiers(ident1, ident2)
        if result is not Ordering.EQUAL:
            return result

    return Ordering.of(len(left), len(right))


def _check_component(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _coerce_prerelease(identifiers: Iterable[Union[Identifier, str, int]]) -> tuple[Identifier, ...]:
    if isinstance(identifiers, str):
        raise TypeError("Pre-release identifiers must be a sequence, not a string")
    result = []
    for ident in identifiers:
        if isinstance(ident, (NumericIdentifier, AlphanumericIdentifier)):
            result.append(ident)
        elif isinstance(ident, int) and not isinstance(ident, bool):
            result.append(NumericIdentifier(ident))
        elif isinstance(ident, str):
            result.append(identifier_of(ident))
        else:
            raise TypeError(f"Invalid pre-release identifier: {ident!r}")
    return tuple(result)


def _coerce_build(identifiers: Iterable[str]) -> tuple[str, ...]:
    if isinstance(identifiers, str):
        raise TypeError("Build metadata identifiers must be a sequence, not a string")
    result = tuple(identifiers)
    for ident in result:
        if not isinstance(ident, str) or not ident or not _IDENTIFIER_CHARS.issuperset(ident):
            raise ValueError(f"Invalid build metadata identifier: {ident!r}")
    return result


@functools.total_ordering
@dataclass(frozen=True, eq=False, slots=True)
class Version:
    """An immutable parsed version.

    Equality, hashing and ordering follow precedence: two versions that
    differ only in build metadata are equal.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifiers, empty for a release
        build: Build metadata identifiers

    Example:
        >>> Version(1, 2, 3, prerelease=("alpha", 1))
        Version(major=1, minor=2, patch=3, prerelease=(AlphanumericIdentifier(value='alpha'), NumericIdentifier(value=1)), build=())
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = field(default=())
    build: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)
        object.__setattr__(self, "prerelease", _coerce_prerelease(self.prerelease))
        object.__setattr__(self, "build", _coerce_build(self.build))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(str(ident) for ident in self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    @property
    def core(self) -> tuple[int, int, int]:
        """Return the (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def compare(left: Version, right: Version) -> Ordering:
    """Compare two versions by precedence.

    Args:
        left: First version
        right: Second version

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Examples:
        >>> compare(Version(1, 0, 0), Version(2, 0, 0))
        <Ordering.LESS: -1>
        >>> compare(Version(1, 0, 0, build=("a",)), Version(1, 0, 0, build=("b",)))
        <Ordering.EQUAL: 0>
    """
    result = Ordering.of(left.core, right.core)
    if result is not Ordering.EQUAL:
        return result

    # Build metadata is ignored
    return _compare_prerelease(left.prerelease, right.prerelease)
