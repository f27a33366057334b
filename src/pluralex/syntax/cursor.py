"""Immutable cursor infrastructure for template scanning.

Implements the immutable cursor pattern used by the template parser.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Sub-parsers return ParseResult on success, None to signal
      "not a placeholder here, treat as literal text"
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{0}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        '0'
        >>> cursor.current  # Original unchanged (immutability)
        '{'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def startswith(self, prefix: str) -> bool:
        """Check whether the remaining input starts with prefix."""
        return self.source.startswith(prefix, self.pos)

    def find(self, char: str) -> int:
        """Absolute offset of the next occurrence of char, or len(source)."""
        index = self.source.find(char, self.pos)
        return len(self.source) if index == -1 else index

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def advance_to(self, pos: int) -> "Cursor":
        """Return new cursor at absolute offset pos (clamped to EOF)."""
        return Cursor(self.source, min(pos, len(self.source)))

    def slice_to(self, end: int) -> str:
        """Source text from the current position up to end (exclusive)."""
        return self.source[self.pos : end]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parsed value together with the cursor positioned after it."""

    value: T
    cursor: Cursor
