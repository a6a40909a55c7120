"""Mapping between ASCII letters/digits and Mathematical Alphanumeric Symbols.

Each style occupies a contiguous Unicode block laid out A-Z, a-z (and 0-9 for
bold), with one exception: the italic block has no small ``h``. That slot
(U+1D455) is unassigned and the glyph lives at U+210E instead.
"""

from __future__ import annotations

from collections.abc import Iterator

from .constants import (
    ASCII_DIGIT_START,
    ASCII_LOWER_START,
    ASCII_UPPER_START,
    BOLD_DIGIT_START,
    BOLD_ITALIC_LOWER_START,
    BOLD_ITALIC_UPPER_START,
    BOLD_LOWER_START,
    BOLD_UPPER_START,
    DIGIT_COUNT,
    HIGH_SURROGATE_END,
    HIGH_SURROGATE_START,
    ITALIC_LOWER_START,
    ITALIC_SMALL_H,
    ITALIC_SMALL_H_HOLE,
    ITALIC_UPPER_START,
    LETTER_COUNT,
    LOW_SURROGATE_END,
    LOW_SURROGATE_START,
    SMALL_H_INDEX,
)
from .models import CharacterNode, CharKind

# (block start, kind, bold, italic), checked in order
_DECODE_BLOCKS: tuple[tuple[int, CharKind, bool, bool], ...] = (
    (ASCII_UPPER_START, CharKind.UPPER, False, False),
    (ASCII_LOWER_START, CharKind.LOWER, False, False),
    (ASCII_DIGIT_START, CharKind.DIGIT, False, False),
    (BOLD_UPPER_START, CharKind.UPPER, True, False),
    (BOLD_LOWER_START, CharKind.LOWER, True, False),
    (ITALIC_UPPER_START, CharKind.UPPER, False, True),
    (ITALIC_LOWER_START, CharKind.LOWER, False, True),
    (BOLD_DIGIT_START, CharKind.DIGIT, True, False),
    (BOLD_ITALIC_UPPER_START, CharKind.UPPER, True, True),
    (BOLD_ITALIC_LOWER_START, CharKind.LOWER, True, True),
)

# (bold, italic) -> block start, per kind
_ENCODE_BLOCKS: dict[CharKind, dict[tuple[bool, bool], int]] = {
    CharKind.UPPER: {
        (False, False): ASCII_UPPER_START,
        (True, False): BOLD_UPPER_START,
        (False, True): ITALIC_UPPER_START,
        (True, True): BOLD_ITALIC_UPPER_START,
    },
    CharKind.LOWER: {
        (False, False): ASCII_LOWER_START,
        (True, False): BOLD_LOWER_START,
        (False, True): ITALIC_LOWER_START,
        (True, True): BOLD_ITALIC_LOWER_START,
    },
}


def is_high_surrogate(ch: str) -> bool:
    return len(ch) == 1 and HIGH_SURROGATE_START <= ord(ch) <= HIGH_SURROGATE_END


def is_low_surrogate(ch: str) -> bool:
    return len(ch) == 1 and LOW_SURROGATE_START <= ord(ch) <= LOW_SURROGATE_END


def code_point(fragment: str) -> int | None:
    """Return the code point a one-character fragment represents.

    A literal high+low surrogate pair (as produced by ``surrogatepass``
    decoding) is combined into the supplementary-plane code point it encodes.

    Args:
        fragment: One character, or one surrogate pair.

    Returns:
        int | None: The code point, or None when the fragment is not a single
            logical character.

    Examples:
        code_point("A")  # 65
        code_point("\\ud835\\udc00")  # 0x1D400
    """
    if len(fragment) == 1:
        return ord(fragment)
    if len(fragment) == 2 and is_high_surrogate(fragment[0]) and is_low_surrogate(fragment[1]):
        high = ord(fragment[0]) - HIGH_SURROGATE_START
        low = ord(fragment[1]) - LOW_SURROGATE_START
        return 0x10000 + (high << 10) + low
    return None


def iter_chars(text: str) -> Iterator[str]:
    """Yield logical characters, keeping literal surrogate pairs together.

    Examples:
        list(iter_chars("a\\ud835\\udc00b"))  # ["a", "\\ud835\\udc00", "b"]
    """
    i = 0
    length = len(text)
    while i < length:
        if i + 1 < length and is_high_surrogate(text[i]) and is_low_surrogate(text[i + 1]):
            yield text[i : i + 2]
            i += 2
        else:
            yield text[i]
            i += 1


def decode(char: str) -> CharacterNode:
    """Decode one character into its kind, alphabet index, and style.

    Recognizes plain ASCII letters and digits, the bold, italic, and
    bold-italic Latin blocks, the bold digit block, and the standalone italic
    small ``h`` (U+210E). Everything else, including the unassigned U+1D455,
    decodes to `CharKind.OTHER` with `raw` set to the input.

    Args:
        char: A single character (or literal surrogate pair).

    Returns:
        CharacterNode: Decoded identity of the character.

    Examples:
        decode("a")  # CharacterNode(kind=LOWER, index=0, bold=False, italic=False, raw="a")
        decode("𝐁")  # CharacterNode(kind=UPPER, index=1, bold=True, italic=False, raw="𝐁")
        decode("ℎ")  # CharacterNode(kind=LOWER, index=7, bold=False, italic=True, raw="ℎ")
    """
    cp = code_point(char)
    if cp is None:
        return CharacterNode(kind=CharKind.OTHER, raw=char)

    if cp == ITALIC_SMALL_H:
        return CharacterNode(CharKind.LOWER, SMALL_H_INDEX, bold=False, italic=True, raw=char)
    if cp == ITALIC_SMALL_H_HOLE:
        return CharacterNode(kind=CharKind.OTHER, raw=char)

    for start, kind, bold, italic in _DECODE_BLOCKS:
        size = DIGIT_COUNT if kind is CharKind.DIGIT else LETTER_COUNT
        if start <= cp < start + size:
            return CharacterNode(kind, cp - start, bold=bold, italic=italic, raw=char)

    return CharacterNode(kind=CharKind.OTHER, raw=char)


def encode(node: CharacterNode, bold: bool, italic: bool) -> str:
    """Render a decoded character with the requested style pair.

    Digits only exist in a bold variant, so a digit is encoded bold whenever
    `bold` is requested and plain otherwise; `italic` is ignored for digits.
    Italic small ``h`` is emitted as U+210E.

    Args:
        node: Character to render.
        bold: Whether the output should be bold.
        italic: Whether the output should be italic.

    Returns:
        str: The styled character, or `node.raw` for `CharKind.OTHER`.

    Examples:
        encode(decode("h"), bold=False, italic=True)  # "ℎ"
        encode(decode("7"), bold=False, italic=True)  # "7"
    """
    if node.kind is CharKind.OTHER or node.index is None:
        return node.raw

    if node.kind is CharKind.DIGIT:
        start = BOLD_DIGIT_START if bold else ASCII_DIGIT_START
        return chr(start + node.index)

    if node.kind is CharKind.LOWER and italic and not bold and node.index == SMALL_H_INDEX:
        return chr(ITALIC_SMALL_H)

    return chr(_ENCODE_BLOCKS[node.kind][(bold, italic)] + node.index)
