"""Character stepping and word detection over styled text."""

from __future__ import annotations

from .codec import decode, is_high_surrogate, is_low_surrogate
from .constants import WORD_EXTRA_CHARS
from .models import CharKind, CharSpan, TextSpan


def previous_char(text: str, offset: int) -> CharSpan | None:
    """Return the character ending at `offset`, or None at the buffer start.

    A literal surrogate pair is returned as one character, so the result
    never starts between its two halves.

    Examples:
        previous_char("ab", 2)  # CharSpan(start=1, end=2, text="b")
        previous_char("ab", 0)  # None
    """
    if offset <= 0:
        return None
    end = offset
    start = end - 1
    if start > 0 and is_low_surrogate(text[start]) and is_high_surrogate(text[start - 1]):
        start -= 1
    return CharSpan(start, end, text[start:end])


def next_char(text: str, offset: int) -> CharSpan | None:
    """Return the character starting at `offset`, or None at the buffer end.

    Examples:
        next_char("ab", 0)  # CharSpan(start=0, end=1, text="a")
        next_char("ab", 2)  # None
    """
    if offset >= len(text):
        return None
    start = offset
    end = start + 1
    if end < len(text) and is_high_surrogate(text[start]) and is_low_surrogate(text[end]):
        end += 1
    return CharSpan(start, end, text[start:end])


def splits_surrogate_pair(text: str, offset: int) -> bool:
    """Check whether `offset` falls between the halves of a surrogate pair."""
    return (
        0 < offset < len(text)
        and is_high_surrogate(text[offset - 1])
        and is_low_surrogate(text[offset])
    )


def is_word_char(char: str) -> bool:
    """Tell whether a character belongs to a word.

    Letters and digits count in any style, as does the underscore, so word
    boundaries do not depend on styling.

    Examples:
        is_word_char("𝐇")  # True
        is_word_char("_")  # True
        is_word_char("-")  # False
    """
    if char in WORD_EXTRA_CHARS:
        return True
    return decode(char).kind is not CharKind.OTHER


def expand_to_word(text: str, offset: int) -> TextSpan | None:
    """Grow a caret position to the word around it.

    Args:
        text: Buffer to inspect.
        offset: Caret position.

    Returns:
        TextSpan | None: Maximal run of word characters touching `offset`, or
            None when neither neighbour is a word character.

    Examples:
        expand_to_word("hello_world 42", 2)  # TextSpan(start=0, end=11)
        expand_to_word("  ", 1)  # None
    """
    start = offset
    end = offset

    left = previous_char(text, start)
    while left is not None and is_word_char(left.text):
        start = left.start
        left = previous_char(text, start)

    right = next_char(text, end)
    while right is not None and is_word_char(right.text):
        end = right.end
        right = next_char(text, end)

    if start == end:
        return None
    return TextSpan(start, end)
