# SPDX-License-Identifier: MIT
"""Parsing and comparison of semantic versions and version ranges.

This package parses versions (MAJOR.MINOR.PATCH with optional pre-release
and build metadata, using arbitrary-precision integers) and version ranges
(interval notation, wildcard shorthand, comparisons and caret ranges), and
checks whether a version satisfies a range.

Example:
    >>> from strata import parse_version, parse_version_range, compare
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> compare(parse_version("1.0.0-rc.1"), parse_version("1.0.0"))
    <Ordering.LESS: -1>
    >>>
    >>> parse_version_range("[1.0.0,2.0.0)").is_satisfied_by(version)
    True
    >>> str(parse_version_range("1.2.+"))
    '[1.2.0-0,1.3.0-0)'
"""

import logging

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    ParseError,
)
from .tokenizer import (
    Token,
    TokenKind,
    tokenize,
)
from .version import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    Ordering,
    Version,
    compare,
    identifier_of,
)
from .parser import (
    VersionParser,
    is_valid_version,
    parse_version,
    parse_version_parts,
)
from .range import (
    UNBOUNDED,
    Bound,
    Exclusive,
    Inclusive,
    Unbounded,
    VersionRange,
    is_satisfied_by,
)
from .range_parser import (
    VersionRangeParser,
    parse_version_range,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "ParseError",
    "ConfigError",
    # Tokenizer
    "Token",
    "TokenKind",
    "tokenize",
    # Versions
    "Version",
    "Identifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "identifier_of",
    "Ordering",
    "compare",
    "VersionParser",
    "parse_version",
    "parse_version_parts",
    "is_valid_version",
    # Ranges
    "Bound",
    "Unbounded",
    "Inclusive",
    "Exclusive",
    "UNBOUNDED",
    "VersionRange",
    "is_satisfied_by",
    "VersionRangeParser",
    "parse_version_range",
]
