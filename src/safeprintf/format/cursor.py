# topmark:header:start
#
#   project      : SafePrintf
#   file         : cursor.py
#   file_relpath : src/safeprintf/format/cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Forward-only read position into a format string."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class FormatCursor:
    """A read position into an immutable format string.

    The cursor only ever moves forward; a new cursor is created for every top-level
    format call.

    Args:
        text (str): The format string.
        pos (int): Initial offset.

    Attributes:
        text (str): The format string.
        pos (int): Current offset; ``len(text)`` when exhausted.
    """

    __slots__ = ("pos", "text")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"FormatCursor(pos={self.pos}, rest={self.rest!r})"

    @property
    def at_end(self) -> bool:
        """True when no characters remain."""
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        """The unread remainder of the format string."""
        return self.text[self.pos :]

    def peek(self) -> str:
        """Return the next character, or ``""`` at the end."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self, count: int = 1) -> str:
        """Consume and return up to ``count`` characters."""
        start = self.pos
        self.pos = min(self.pos + count, len(self.text))
        return self.text[start : self.pos]

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters satisfying ``predicate``."""
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def find(self, char: str) -> int:
        """Return the offset of the next ``char`` at or after the cursor, or -1."""
        return self.text.find(char, self.pos)
