# SPDX-License-Identifier: MIT
"""Lexical scanning shared by the version and version range parsers.

The tokenizer classifies characters locally and never backtracks:
- digit runs become NUMBER tokens
- runs starting with a letter (letters, digits, hyphens) become IDENTIFIER
- single punctuation characters map to their own token kinds

``+`` is a WILDCARD when it starts the input or directly follows a ``.``,
otherwise it is the PLUS separator introducing build metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ParseError


class TokenKind(Enum):
    """Kinds of tokens produced by :func:`tokenize`."""

    NUMBER = "number"
    IDENTIFIER = "identifier"
    DOT = "'.'"
    HYPHEN = "'-'"
    PLUS = "'+'"
    COMMA = "','"
    OPEN_BRACKET = "'['"
    CLOSE_BRACKET = "']'"
    OPEN_PAREN = "'('"
    CLOSE_PAREN = "')'"
    WILDCARD = "wildcard"
    GREATER = "'>'"
    LESS = "'<'"
    EQUALS = "'='"
    CARET = "'^'"
    END_OF_INPUT = "end of input"

    @property
    def label(self) -> str:
        """Return the description used in error messages."""
        return self.value


_PUNCTUATION = {
    ".": TokenKind.DOT,
    "-": TokenKind.HYPHEN,
    ",": TokenKind.COMMA,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "*": TokenKind.WILDCARD,
    ">": TokenKind.GREATER,
    "<": TokenKind.LESS,
    "=": TokenKind.EQUALS,
    "^": TokenKind.CARET,
}

# Kinds that may be glued together into a single dotted identifier
IDENTIFIER_PARTS = frozenset({TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.HYPHEN})


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token tagged with its starting offset in the source text."""

    kind: TokenKind
    text: str
    offset: int

    def describe(self) -> str:
        """Return a short description of the token for error messages."""
        if self.kind is TokenKind.END_OF_INPUT:
            return "end of input"
        if self.kind in (TokenKind.NUMBER, TokenKind.IDENTIFIER):
            return f"{self.kind.label} '{self.text}'"
        return f"'{self.text}'"


def tokenize(text: str) -> list[Token]:
    """Split text into tokens terminated by an END_OF_INPUT token.

    Whitespace around the whole input is ignored; offsets still refer to the
    original, untrimmed text.

    Args:
        text: Version or version range text

    Returns:
        List of tokens, the last one always of kind END_OF_INPUT

    Raises:
        ParseError: If the text contains whitespace between tokens or a
            character that belongs to no token

    Examples:
        >>> [t.kind.name for t in tokenize("1.+")]
        ['NUMBER', 'DOT', 'WILDCARD', 'END_OF_INPUT']
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected text to be a string, got {type(text).__name__}")

    start = len(text) - len(text.lstrip())
    end = len(text.rstrip())

    tokens: list[Token] = []
    previous: Optional[Token] = None
    pos = start
    while pos < end:
        char = text[pos]

        if _is_digit(char):
            run_end = pos
            while run_end < end and _is_digit(text[run_end]):
                run_end += 1
            token = Token(TokenKind.NUMBER, text[pos:run_end], pos)
        elif _is_letter(char):
            run_end = pos
            while run_end < end and (
                _is_letter(text[run_end]) or _is_digit(text[run_end]) or text[run_end] == "-"
            ):
                run_end += 1
            token = Token(TokenKind.IDENTIFIER, text[pos:run_end], pos)
        elif char == "+":
            at_component = previous is None or previous.kind is TokenKind.DOT
            kind = TokenKind.WILDCARD if at_component else TokenKind.PLUS
            token = Token(kind, char, pos)
        elif char in _PUNCTUATION:
            token = Token(_PUNCTUATION[char], char, pos)
        elif char.isspace():
            raise ParseError(f"unexpected whitespace at offset {pos}", pos, text)
        else:
            raise ParseError(f"unexpected character {char!r} at offset {pos}", pos, text)

        tokens.append(token)
        previous = token
        pos += len(token.text)

    tokens.append(Token(TokenKind.END_OF_INPUT, "", end))
    return tokens


class TokenStream:
    """Cursor over a token list with single and multi-token lookahead."""

    def __init__(self, text: str) -> None:
        self.source = text
        self._tokens = tokenize(text)
        self._index = 0

    @property
    def current(self) -> Token:
        return self._tokens[self._index]

    def peek(self, offset: int = 1) -> Token:
        """Return the token ``offset`` positions ahead without consuming it."""
        if offset < 0:
            raise ValueError("offset < 0")
        index = min(self._index + offset, len(self._tokens) - 1)
        return self._tokens[index]

    def at(self, *kinds: TokenKind) -> bool:
        """Return True if the current token is one of ``kinds``."""
        return self.current.kind in kinds

    def advance(self) -> Token:
        """Consume and return the current token.

        END_OF_INPUT is never consumed past; it keeps being returned.
        """
        token = self.current
        if token.kind is not TokenKind.END_OF_INPUT:
            self._index += 1
        return token

    def expect(self, *kinds: TokenKind) -> Token:
        """Consume the current token if it is one of ``kinds``, else fail."""
        if self.current.kind in kinds:
            return self.advance()
        raise self.error(" or ".join(kind.label for kind in kinds))

    def expect_end(self) -> None:
        """Fail unless all tokens have been consumed."""
        if not self.at(TokenKind.END_OF_INPUT):
            raise self.error("end of input")

    def error(self, expected: str, token: Optional[Token] = None) -> ParseError:
        """Build a ParseError describing what was expected at ``token``."""
        token = token or self.current
        return ParseError(
            f"expected {expected} at offset {token.offset}, found {token.describe()}",
            token.offset,
            self.source,
        )
