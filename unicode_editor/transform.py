"""Style transformations over whole strings."""

from __future__ import annotations

from .codec import decode, encode, iter_chars
from .models import CharKind, StyleAxis


def toggle(text: str, axis: StyleAxis) -> str:
    """Flip one style axis on every letter and digit in `text`.

    The other axis keeps its current value per character, so toggling bold
    on italic text yields bold-italic text. Characters the codec does not
    recognize are copied unchanged. Applying the same toggle twice returns
    the original text.

    Args:
        text: Text to transform.
        axis: Axis to flip.

    Returns:
        str: Transformed text.

    Examples:
        toggle("Hello", StyleAxis.BOLD)  # "𝐇𝐞𝐥𝐥𝐨"
        toggle("𝐇𝐞𝐥𝐥𝐨", StyleAxis.BOLD)  # "Hello"
    """
    axis = StyleAxis(axis)
    out = []
    for char in iter_chars(text):
        node = decode(char)
        if node.kind is CharKind.OTHER:
            out.append(node.raw)
            continue
        bold = not node.bold if axis is StyleAxis.BOLD else node.bold
        italic = not node.italic if axis is StyleAxis.ITALIC else node.italic
        out.append(encode(node, bold, italic))
    return "".join(out)


def apply_styles(text: str, bold: bool = False, italic: bool = False) -> str:
    """Re-encode every letter and digit with exactly the given style pair.

    Unlike `toggle`, the current style of each character is ignored.

    Examples:
        apply_styles("𝐇i", italic=True)  # "𝐻𝑖"
    """
    return "".join(encode(decode(char), bold, italic) for char in iter_chars(text))


def to_plain(text: str) -> str:
    """Replace styled letters and digits with their ASCII counterparts."""
    return apply_styles(text, bold=False, italic=False)
