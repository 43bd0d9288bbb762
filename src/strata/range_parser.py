# SPDX-License-Identifier: MIT
"""Recursive-descent parser for version ranges.

Supported expressions, all normalized to a :class:`VersionRange` interval:
- interval notation: ``[1.0.0,2.0.0)``, ``(,4.5.6]``, ``[1.2.3,)``
- bare versions: ``1.2.3`` → ``[1.2.3,1.2.3]``
- wildcards: ``+`` or ``*`` → ``(,)``, ``1.+`` → ``[1.0.0-0,2.0.0-0)``,
  ``1.2.+`` → ``[1.2.0-0,1.3.0-0)``
- comparisons: ``>1.0.0``, ``>=1.0.0``, ``<2.0.0``, ``<=2.0.0``
- caret ranges: ``^1.2.3`` → ``[1.2.3,2.0.0)``, ``^0.2.3`` → ``[0.2.3,0.3.0)``
"""

from __future__ import annotations

import logging

from .errors import ParseError
from .parser import VersionParser
from .range import Exclusive, Inclusive, VersionRange
from .tokenizer import TokenKind, TokenStream
from .version import NumericIdentifier, Version

logger = logging.getLogger(__name__)


class VersionRangeParser:
    """Parses a version range expression.

    The first significant token selects the syntax; every syntax is
    translated into lower and upper bounds here, so ranges never carry a
    wildcard representation.
    """

    def __init__(self, text: str) -> None:
        self.stream = TokenStream(text)
        self.versions = VersionParser(self.stream)

    def parse(self) -> VersionRange:
        stream = self.stream

        if stream.at(TokenKind.OPEN_BRACKET, TokenKind.OPEN_PAREN):
            result = self._parse_interval()
        elif stream.at(TokenKind.GREATER, TokenKind.LESS):
            result = self._parse_comparison()
        elif stream.at(TokenKind.CARET):
            result = self._parse_caret()
        elif stream.at(TokenKind.WILDCARD):
            stream.advance()
            result = VersionRange.any()
        elif stream.at(TokenKind.NUMBER):
            result = self._parse_prefix()
        else:
            raise stream.error("version range")

        stream.expect_end()
        return result

    def _parse_interval(self) -> VersionRange:
        stream = self.stream
        lower_inclusive = stream.advance().kind is TokenKind.OPEN_BRACKET

        lower = None
        if not stream.at(TokenKind.COMMA):
            lower = self.versions.parse_version()
        stream.expect(TokenKind.COMMA)

        upper = None
        if not stream.at(TokenKind.CLOSE_BRACKET, TokenKind.CLOSE_PAREN):
            upper = self.versions.parse_version()
        upper_inclusive = (
            stream.expect(TokenKind.CLOSE_BRACKET, TokenKind.CLOSE_PAREN).kind
            is TokenKind.CLOSE_BRACKET
        )

        return VersionRange.between(lower, upper, lower_inclusive, upper_inclusive)

    def _parse_comparison(self) -> VersionRange:
        stream = self.stream
        greater_than = stream.advance().kind is TokenKind.GREATER
        inclusive = stream.at(TokenKind.EQUALS)
        if inclusive:
            stream.advance()

        version = self.versions.parse_version()
        if greater_than:
            return VersionRange.between(version, None, lower_inclusive=inclusive)
        return VersionRange.between(None, version, upper_inclusive=inclusive)

    def _parse_caret(self) -> VersionRange:
        self.stream.expect(TokenKind.CARET)
        lower = self.versions.parse_version()

        if lower.major != 0:
            upper = Version(lower.major + 1, 0, 0)
        elif lower.minor != 0:
            upper = Version(0, lower.minor + 1, 0)
        else:
            upper = Version(0, 0, lower.patch + 1)

        logger.debug("Normalized caret range ^%s to [%s,%s)", lower, lower, upper)
        return VersionRange(Inclusive(lower), Exclusive(upper))

    def _parse_prefix(self) -> VersionRange:
        """Parse ``M.+``, ``M.N.+`` or a bare version."""
        stream = self.stream

        if stream.peek(1).kind is TokenKind.DOT and stream.peek(2).kind is TokenKind.WILDCARD:
            major = self.versions.parse_core_component()
            stream.advance()
            stream.advance()
            lower = _release_floor(major, 0)
            upper = _release_floor(major + 1, 0)
        elif (
            stream.peek(1).kind is TokenKind.DOT
            and stream.peek(2).kind is TokenKind.NUMBER
            and stream.peek(3).kind is TokenKind.DOT
            and stream.peek(4).kind is TokenKind.WILDCARD
        ):
            major = self.versions.parse_core_component()
            stream.advance()
            minor = self.versions.parse_core_component()
            stream.advance()
            stream.advance()
            lower = _release_floor(major, minor)
            upper = _release_floor(major, minor + 1)
        else:
            return VersionRange.exactly(self.versions.parse_version())

        logger.debug("Normalized wildcard range to [%s,%s)", lower, upper)
        return VersionRange(Inclusive(lower), Exclusive(upper))


def _release_floor(major: int, minor: int) -> Version:
    """Return ``major.minor.0-0``, the lowest version with that core."""
    return Version(major, minor, 0, prerelease=(NumericIdentifier(0),))


def parse_version_range(text: str) -> VersionRange:
    """Parse a version range expression.

    Args:
        text: Interval, wildcard, comparison or caret range text

    Returns:
        The normalized VersionRange

    Raises:
        ParseError: If the text is not a valid range. The message is
            suitable for showing to end users.

    Examples:
        >>> str(parse_version_range("1.2.+"))
        '[1.2.0-0,1.3.0-0)'
        >>> str(parse_version_range("+"))
        '(,)'
    """
    if not isinstance(text, str):
        raise TypeError(f"Version range must be a string, got {type(text).__name__}")
    try:
        return VersionRangeParser(text).parse()
    except ParseError as e:
        logger.debug("Failed to parse version range %r: %s", text, e.message)
        raise
