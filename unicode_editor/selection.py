"""Apply style toggles to a selection or to the word under the caret."""

from __future__ import annotations

from .boundaries import expand_to_word, splits_surrogate_pair
from .exceptions import SelectionError
from .models import StyleAxis, TextSpan
from .transform import toggle


def validate_span(buffer: str, span: TextSpan) -> None:
    """Reject spans that do not describe a valid range of `buffer`.

    Args:
        buffer: Text the span refers to.
        span: Offsets to check, in code points.

    Raises:
        SelectionError: If an offset is not an integer, lies outside
            ``[0, len(buffer)]``, `end` precedes `start`, or an offset falls
            inside a surrogate pair.
    """
    length = len(buffer)
    for value in (span.start, span.end):
        if isinstance(value, bool) or not isinstance(value, int):
            raise SelectionError(span.start, span.end, length, "offsets must be integers")
    if span.start < 0 or span.end > length:
        raise SelectionError(span.start, span.end, length, "offset out of range")
    if span.end < span.start:
        raise SelectionError(span.start, span.end, length, "end precedes start")
    if splits_surrogate_pair(buffer, span.start) or splits_surrogate_pair(buffer, span.end):
        raise SelectionError(span.start, span.end, length, "offset splits a surrogate pair")


def apply_style(buffer: str, selection: TextSpan, axis: StyleAxis) -> tuple[str, TextSpan]:
    """Toggle `axis` over the selection, or over the word at an empty selection.

    Text outside the affected span is copied verbatim. When the selection is
    empty and the caret is not inside a word, the buffer and selection are
    returned unchanged.

    Args:
        buffer: Full text.
        selection: Current selection; an empty span is a caret.
        axis: Style axis to toggle.

    Returns:
        tuple[str, TextSpan]: New buffer and the span covering the rewritten
            text.

    Raises:
        SelectionError: If `selection` is invalid for `buffer`.

    Examples:
        apply_style("Hello", TextSpan(0, 5), StyleAxis.BOLD)  # ("𝐇𝐞𝐥𝐥𝐨", TextSpan(0, 5))
        apply_style("a b", TextSpan(1, 1), StyleAxis.BOLD)  # ("𝐚 b", TextSpan(0, 1))
    """
    validate_span(buffer, selection)

    if selection.is_empty:
        span = expand_to_word(buffer, selection.start)
        if span is None:
            return buffer, selection
    else:
        span = selection

    replaced = toggle(buffer[span.start : span.end], axis)
    new_buffer = buffer[: span.start] + replaced + buffer[span.end :]
    return new_buffer, TextSpan(span.start, span.start + len(replaced))
