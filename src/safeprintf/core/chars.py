# topmark:header:start
#
#   project      : SafePrintf
#   file         : chars.py
#   file_relpath : src/safeprintf/core/chars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Narrow character kinds.

Python has no dedicated character type, so a one-character ``str`` and a small ``int``
are indistinguishable from strings and integers. These thin subclasses mark values
that should behave like C's ``char``, ``signed char`` and ``unsigned char``: they render
as a glyph, except under an integer conversion (``%d``, ``%x``...) where they render
their numeric code.

The ``ctypes`` types ``c_char``, ``c_byte`` and ``c_ubyte`` are treated the same way by
the renderer.
"""

from __future__ import annotations


class Char(str):
    """A single character (C ``char``).

    Raises:
        ValueError: If the value is not exactly one character long.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Char:  # noqa: D102
        if len(value) != 1:
            raise ValueError(f"Char requires exactly one character, got {value!r}")
        return super().__new__(cls, value)

    @property
    def code(self) -> int:
        """Numeric code point of the character."""
        return ord(self)

    def __repr__(self) -> str:
        return f"Char({str(self)!r})"


class _ByteChar(int):
    """Shared behavior of the small-integer character kinds."""

    __slots__ = ()

    MIN: int = 0
    MAX: int = 255

    def __new__(cls, value: int) -> _ByteChar:  # noqa: D102
        if not cls.MIN <= value <= cls.MAX:
            raise ValueError(f"{cls.__name__} out of range [{cls.MIN}, {cls.MAX}]: {value}")
        return super().__new__(cls, value)

    @property
    def code(self) -> int:
        """Numeric value of the character."""
        return int(self)

    @property
    def glyph(self) -> str:
        """The character itself, decoded as Latin-1."""
        return chr(int(self) & 0xFF)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class SignedChar(_ByteChar):
    """A C ``signed char``: an integer in ``[-128, 127]``."""

    __slots__ = ()

    MIN = -128
    MAX = 127


class UnsignedChar(_ByteChar):
    """A C ``unsigned char``: an integer in ``[0, 255]``."""

    __slots__ = ()
