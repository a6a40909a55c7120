"""Entry points called by the surrounding text widget.

Every function takes the buffer and offsets explicitly and returns a complete
new snapshot. Focus handling, clipboard writes, and key capture stay with the
caller.
"""

from __future__ import annotations

import logging

from .config import EditorConfig, validate_config
from .exceptions import BufferTooLargeError, SelectionError
from .lists import continue_list, toggle_list_lines
from .models import (
    EnterResult,
    ListResult,
    ListType,
    SessionState,
    StyleAxis,
    StyleResult,
    TextSpan,
)
from .offsets import from_utf16, to_utf16
from .selection import apply_style

logger = logging.getLogger(__name__)

_HOTKEYS = {
    "b": StyleAxis.BOLD,
    "i": StyleAxis.ITALIC,
}


def _prepare(buffer: str, config: EditorConfig | None) -> EditorConfig:
    config = config or EditorConfig()
    validate_config(config)
    if len(buffer) > config.max_buffer_length:
        raise BufferTooLargeError(len(buffer), config.max_buffer_length)
    return config


def _to_span(buffer: str, start: int, end: int, config: EditorConfig) -> TextSpan:
    if config.offset_unit == "utf16":
        if isinstance(start, int) and isinstance(end, int) and end < start:
            raise SelectionError(start, end, len(buffer), "end precedes start")
        return TextSpan(from_utf16(buffer, start), from_utf16(buffer, end))
    return TextSpan(start, end)


def _from_index(buffer: str, index: int, config: EditorConfig) -> int:
    if config.offset_unit == "utf16":
        return to_utf16(buffer, index)
    return index


def toggle_style(
    buffer: str,
    selection_start: int,
    selection_end: int,
    axis: StyleAxis,
    config: EditorConfig | None = None,
) -> StyleResult:
    """Toggle bold or italic on the selection, or on the word at the caret.

    Args:
        buffer: Current text.
        selection_start: Selection start, in the configured offset unit.
        selection_end: Selection end; equal to `selection_start` for a caret.
        axis: Axis to toggle (`StyleAxis` or ``"bold"``/``"italic"``).
        config: Engine configuration; defaults to `EditorConfig()`.

    Returns:
        StyleResult: New buffer and the selection covering the restyled text.
            A caret outside any word returns the input unchanged.

    Raises:
        SelectionError: If the offsets are invalid for `buffer`.
        BufferTooLargeError: If `buffer` exceeds `max_buffer_length`.
        ConfigError: If `config` fails validation.

    Examples:
        toggle_style("Hello", 0, 5, "bold")  # StyleResult("𝐇𝐞𝐥𝐥𝐨", 0, 5)
    """
    config = _prepare(buffer, config)
    span = _to_span(buffer, selection_start, selection_end, config)
    new_buffer, new_span = apply_style(buffer, span, StyleAxis(axis))
    if new_buffer == buffer and new_span == span:
        logger.debug("No word at offset %d; nothing to style", span.start)
    else:
        logger.debug("Toggled %s on [%d, %d)", StyleAxis(axis).value, new_span.start, new_span.end)
    return StyleResult(
        buffer=new_buffer,
        selection_start=_from_index(new_buffer, new_span.start, config),
        selection_end=_from_index(new_buffer, new_span.end, config),
    )


def toggle_list(
    buffer: str,
    selection_start: int,
    selection_end: int,
    list_type: ListType,
    state: SessionState | None = None,
    config: EditorConfig | None = None,
) -> ListResult:
    """Toggle bullets or numbers on the lines touched by the selection.

    Args:
        buffer: Current text.
        selection_start: Selection start, in the configured offset unit.
        selection_end: Selection end.
        list_type: `ListType` or ``"bullets"``/``"numbers"``.
        state: Session list state; defaults to a fresh `SessionState`.
        config: Engine configuration; defaults to `EditorConfig()`.

    Returns:
        ListResult: New buffer, selection over the rewritten lines, and the
            updated session state.

    Raises:
        SelectionError: If the offsets are invalid for `buffer`.
        BufferTooLargeError: If `buffer` exceeds `max_buffer_length`.
        ConfigError: If `config` fails validation.
    """
    config = _prepare(buffer, config)
    span = _to_span(buffer, selection_start, selection_end, config)
    result = toggle_list_lines(buffer, span, ListType(list_type), state, config)
    if config.offset_unit == "code_point":
        return result
    return ListResult(
        buffer=result.buffer,
        selection_start=_from_index(result.buffer, result.selection_start, config),
        selection_end=_from_index(result.buffer, result.selection_end, config),
        state=result.state,
    )


def handle_enter(
    buffer: str,
    caret: int,
    state: SessionState | None = None,
    config: EditorConfig | None = None,
) -> EnterResult:
    """Handle an Enter keypress, continuing or ending a list.

    Args:
        buffer: Current text.
        caret: Caret position, in the configured offset unit.
        state: Session list state; defaults to a fresh `SessionState`.
        config: Engine configuration; defaults to `EditorConfig()`.

    Returns:
        EnterResult: ``consumed=False`` (with the input echoed back) when the
            caller should insert a plain newline itself.

    Raises:
        SelectionError: If `caret` is invalid for `buffer`.
        BufferTooLargeError: If `buffer` exceeds `max_buffer_length`.
        ConfigError: If `config` fails validation.

    Examples:
        handle_enter("1. item", 7)  # EnterResult(True, "1. item\\n2. ", 11, ...)
    """
    config = _prepare(buffer, config)
    index = _to_span(buffer, caret, caret, config).start
    result = continue_list(buffer, index, state, config)
    if not result.consumed:
        return EnterResult(consumed=False, buffer=buffer, caret=caret, state=result.state)
    if config.offset_unit == "code_point":
        return result
    return EnterResult(
        consumed=True,
        buffer=result.buffer,
        caret=_from_index(result.buffer, result.caret, config),
        state=result.state,
    )


def resolve_hotkey(key: str, ctrl: bool = False, meta: bool = False) -> StyleAxis | None:
    """Map a Ctrl/Cmd key combination to the style axis it toggles.

    Examples:
        resolve_hotkey("B", ctrl=True)  # StyleAxis.BOLD
        resolve_hotkey("i", meta=True)  # StyleAxis.ITALIC
        resolve_hotkey("b")  # None
    """
    if not (ctrl or meta) or not key:
        return None
    return _HOTKEYS.get(key.lower())
