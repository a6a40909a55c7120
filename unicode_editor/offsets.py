"""Conversion between code-point indices and UTF-16 code-unit offsets."""

from __future__ import annotations

from .exceptions import SelectionError


def _width(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Return the number of UTF-16 code units needed to encode `text`.

    Examples:
        utf16_length("a𝐀")  # 3
    """
    return sum(_width(char) for char in text)


def to_utf16(text: str, index: int) -> int:
    """Convert a code-point index into `text` to a UTF-16 offset."""
    return utf16_length(text[:index])


def from_utf16(text: str, offset: int) -> int:
    """Convert a UTF-16 offset into `text` to a code-point index.

    Args:
        text: Text the offset refers to.
        offset: Offset in UTF-16 code units.

    Returns:
        int: Matching code-point index.

    Raises:
        SelectionError: If the offset is out of range or lands between the two
            halves of a surrogate pair.

    Examples:
        from_utf16("a𝐀b", 3)  # 2
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise SelectionError(offset, offset, utf16_length(text), "offsets must be integers")
    if offset < 0:
        raise SelectionError(offset, offset, utf16_length(text), "offset out of range")

    units = 0
    for index, char in enumerate(text):
        if units == offset:
            return index
        units += _width(char)
        if units > offset:
            raise SelectionError(offset, offset, utf16_length(text), "offset splits a surrogate pair")

    if units == offset:
        return len(text)
    raise SelectionError(offset, offset, units, "offset out of range")
