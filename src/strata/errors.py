# SPDX-License-Identifier: MIT
"""Exceptions raised by strata."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when version or version range text cannot be parsed.

    Attributes:
        message: Human-readable description of what was expected
        offset: 0-based offset of the failure in ``source``
        source: The text that was being parsed
    """

    def __init__(self, message: str, offset: int, source: str = ""):
        self.message = message
        self.offset = offset
        self.source = source
        super().__init__(self.message)

    def pointer(self) -> str:
        """Return the source text with a caret under the failing offset.

        Example:
            >>> ParseError("expected '.' at offset 3, found end of input", 3, "1.2").pointer()
            "expected '.' at offset 3, found end of input\\n1.2\\n   ^"
        """
        return f"{self.message}\n{self.source}\n{' ' * self.offset}^"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass
