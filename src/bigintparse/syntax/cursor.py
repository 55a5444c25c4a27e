"""Immutable cursor over a bounded window of the input text.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - The window [pos, end) selects a sub-range of a larger string without
      copying it; offsets reported in diagnostics are offsets into source

Affix Matching:
    match() compares a locale affix against the text at the cursor. A no-break
    space (U+00A0) or narrow no-break space (U+202F) in the affix also matches
    a plain SPACE in the text, since users rarely type the former.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from bigintparse.constants import SPACE_REPLACING_CHARS
from bigintparse.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position tracker within source[pos:end].

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency
        3. Explicit end bound - Sub-range scanning without slicing
        4. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor("12345", 1, 3)
        >>> cursor.current
        '2'
        >>> cursor.advance(2).is_eof
        True
        >>> cursor.remaining
        '23'
    """

    source: str
    pos: int
    end: int

    @classmethod
    def over(cls, source: str, start: int = 0, end: int | None = None) -> "Cursor":
        """Create a cursor over source[start:end].

        Args:
            source: Full text
            start: First offset of the window
            end: Offset one past the window (default: len(source))

        Returns:
            Cursor at the start of the window
        """
        return cls(source, start, len(source) if end is None else end)

    @property
    def is_eof(self) -> bool:
        """Check if at end of the window.

        Returns:
            True if position >= window end
        """
        return self.pos >= self.end

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of the window
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_end(self.end)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed text of the window."""
        return self.source[self.pos : self.end]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond the window end
        """
        target_pos = self.pos + offset
        if target_pos >= self.end:
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, self.end)
        return Cursor(self.source, new_pos, self.end)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source substring from current position to end_pos
        """
        return self.source[self.pos : end_pos]

    def skip_chars(self, chars: frozenset[str]) -> "Cursor":
        """Skip a maximal run of characters from a set.

        Args:
            chars: Characters to skip

        Returns:
            New cursor advanced past all consecutive members of chars

        Example:
            >>> Cursor.over("  \\t7").skip_chars(frozenset(" \\t")).pos
            3
        """
        pos = self.pos
        source = self.source
        while pos < self.end and source[pos] in chars:
            pos += 1
        if pos == self.pos:
            return self
        return Cursor(source, pos, self.end)

    def match(self, affix: str) -> "Cursor | None":
        """Consume affix if the text at the cursor matches it.

        Args:
            affix: Locale string (sign, symbol or separator); may be longer
                than one character

        Returns:
            New cursor past the affix, or None if affix is empty or does not
            match in full before the window end

        Example:
            >>> Cursor.over("1\\u00a0234", 1).match("\\u00a0").pos
            2
            >>> Cursor.over("1 234", 1).match("\\u00a0").pos
            2
            >>> Cursor.over("1 234", 1).match("") is None
            True
        """
        length = len(affix)
        if not length or self.pos + length > self.end:
            return None
        source = self.source
        for offset, expected in enumerate(affix):
            actual = source[self.pos + offset]
            if actual != expected and not (actual == " " and expected in SPACE_REPLACING_CHARS):
                return None
        return Cursor(source, self.pos + length, self.end)


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Scanner result containing the scanned value and new cursor position.

    Type Parameters:
        T: The type of the scanned value

    Example:
        >>> cursor = Cursor.over("12")
        >>> result = ParseResult("1", cursor.advance())
        >>> result.value
        '1'
        >>> result.cursor.current
        '2'
    """

    value: T
    cursor: Cursor
