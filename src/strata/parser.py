# SPDX-License-Identifier: MIT
"""Recursive-descent parser for version strings.

Grammar:
    version    := int "." int "." int ["-" prerelease] ["+" buildmeta]
    prerelease := identifier ("." identifier)*
    buildmeta  := identifier ("." identifier)*
    identifier := (digit | letter | "-")+

Core components and numeric pre-release identifiers must not have leading
zeros. Build metadata identifiers are opaque.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import ParseError
from .tokenizer import IDENTIFIER_PARTS, Token, TokenKind, TokenStream
from .version import Identifier, Version, identifier_of

logger = logging.getLogger(__name__)


class VersionParser:
    """Parses a single version from a token stream.

    The parser can run over a stream it does not own, which is how the range
    parser embeds versions inside intervals while keeping error offsets
    relative to the whole range text.
    """

    def __init__(self, stream: TokenStream) -> None:
        self.stream = stream

    def parse(self) -> Version:
        """Parse a complete version and require the input to end after it."""
        version = self.parse_version()
        if not self.stream.at(TokenKind.END_OF_INPUT):
            if version.build:
                raise self.stream.error("end of input")
            if version.prerelease:
                raise self.stream.error("'+' or end of input")
            raise self.stream.error("'-', '+' or end of input")
        return version

    def parse_version(self) -> Version:
        """Parse a version and stop at the first token that cannot extend it."""
        major = self.parse_core_component()
        self.stream.expect(TokenKind.DOT)
        minor = self.parse_core_component()
        self.stream.expect(TokenKind.DOT)
        patch = self.parse_core_component()

        prerelease: tuple[Identifier, ...] = ()
        build: tuple[str, ...] = ()

        if self.stream.at(TokenKind.HYPHEN):
            self.stream.advance()
            prerelease = self._parse_prerelease()

        if self.stream.at(TokenKind.PLUS):
            self.stream.advance()
            build = self._parse_build_metadata()

        return Version(major, minor, patch, prerelease, build)

    def parse_core_component(self) -> int:
        token = self.stream.expect(TokenKind.NUMBER)
        if len(token.text) > 1 and token.text.startswith("0"):
            raise ParseError(
                f"numeric component must not contain leading zeros at offset {token.offset}",
                token.offset,
                self.stream.source,
            )
        return int(token.text)

    def _parse_prerelease(self) -> tuple[Identifier, ...]:
        identifiers = [self._parse_prerelease_identifier()]
        while self.stream.at(TokenKind.DOT):
            self.stream.advance()
            identifiers.append(self._parse_prerelease_identifier())
        return tuple(identifiers)

    def _parse_prerelease_identifier(self) -> Identifier:
        first, text = self._parse_identifier()
        if text.isdigit() and len(text) > 1 and text.startswith("0"):
            raise ParseError(
                f"numeric identifier must not contain leading zeros at offset {first.offset}",
                first.offset,
                self.stream.source,
            )
        return identifier_of(text)

    def _parse_build_metadata(self) -> tuple[str, ...]:
        identifiers = [self._parse_identifier()[1]]
        while self.stream.at(TokenKind.DOT):
            self.stream.advance()
            identifiers.append(self._parse_identifier()[1])
        return tuple(identifiers)

    def _parse_identifier(self) -> tuple[Token, str]:
        """Glue adjacent number, identifier and hyphen tokens into one identifier."""
        if not self.stream.at(*IDENTIFIER_PARTS):
            raise self.stream.error("identifier")
        first = self.stream.current
        parts = []
        while self.stream.at(*IDENTIFIER_PARTS):
            parts.append(self.stream.advance().text)
        return first, "".join(parts)


def parse_version(text: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        text: A string of the form MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        The parsed Version

    Raises:
        ParseError: If the text is not a valid version. The message is
            suitable for showing to end users.

    Examples:
        >>> str(parse_version("1.0.0-alpha.1+build.5"))
        '1.0.0-alpha.1+build.5'
    """
    if not isinstance(text, str):
        raise TypeError(f"Version must be a string, got {type(text).__name__}")
    try:
        return VersionParser(TokenStream(text)).parse()
    except ParseError as e:
        logger.debug("Failed to parse version %r: %s", text, e.message)
        raise


def parse_version_parts(
    core: str, prerelease: Optional[str] = None, build: Optional[str] = None
) -> Version:
    """Parse a version from separately supplied parts.

    Examples:
        >>> str(parse_version_parts("1.2.3", "rc.1", "abc"))
        '1.2.3-rc.1+abc'
    """
    text = core
    if prerelease is not None:
        text += f"-{prerelease}"
    if build is not None:
        text += f"+{build}"
    return parse_version(text)


def is_valid_version(text: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
    """
    if not isinstance(text, str):
        return False
    try:
        parse_version(text)
    except ParseError:
        return False
    return True
