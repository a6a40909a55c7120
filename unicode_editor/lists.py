"""Bulleted and numbered list handling for line-oriented text."""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from .config import EditorConfig
from .constants import MAX_LIST_NUMBER_DIGITS
from .models import EnterResult, ListMode, ListResult, ListType, SessionState, TextSpan
from .selection import validate_span

logger = logging.getLogger(__name__)


def bullet_pattern(config: EditorConfig | None = None) -> re.Pattern[str]:
    """Build the matcher for a bulleted line: indent, marker, one space."""
    config = config or EditorConfig()
    return re.compile(rf"^(?P<indent>\s*){re.escape(config.bullet_marker)} ")


def number_pattern(config: EditorConfig | None = None) -> re.Pattern[str]:
    """Build the matcher for a numbered line: indent, ASCII digits, delimiter, one space.

    At most `MAX_LIST_NUMBER_DIGITS` digits are read as a number; a longer run
    makes the line plain text.
    """
    config = config or EditorConfig()
    digits = f"[0-9]{{1,{MAX_LIST_NUMBER_DIGITS}}}"
    delimiter = re.escape(config.number_delimiter)
    return re.compile(rf"^(?P<indent>\s*)(?P<number>{digits}){delimiter} ")


def classify_line(line: str, config: EditorConfig | None = None) -> ListMode:
    """Return the list kind a single line belongs to, judged by its prefix.

    Examples:
        classify_line("  • item")  # ListMode.BULLETED
        classify_line("12. item")  # ListMode.NUMBERED
        classify_line("item")  # ListMode.NONE
    """
    if bullet_pattern(config).match(line):
        return ListMode.BULLETED
    if number_pattern(config).match(line):
        return ListMode.NUMBERED
    return ListMode.NONE


def get_line_range(buffer: str, start: int, end: int) -> TextSpan:
    """Extend `[start, end)` outwards to the nearest line breaks or buffer edges.

    Examples:
        get_line_range("one\\ntwo\\nthree", 5, 5)  # TextSpan(start=4, end=7)
    """
    line_start = buffer.rfind("\n", 0, start) + 1
    line_end = buffer.find("\n", end)
    if line_end == -1:
        line_end = len(buffer)
    return TextSpan(line_start, line_end)


def _strip_marker(line: str, pattern: re.Pattern[str]) -> str:
    match = pattern.match(line)
    if match is None:
        return line
    return match.group("indent") + line[match.end() :]


def _split_indent(line: str) -> tuple[str, str]:
    content = line.lstrip()
    return line[: len(line) - len(content)], content


def _add_bullets(lines: list[str], config: EditorConfig) -> list[str]:
    numbers = number_pattern(config)
    result = []
    for line in lines:
        indent, content = _split_indent(_strip_marker(line, numbers))
        result.append(f"{indent}{config.bullet_marker} {content}")
    return result


def _add_numbers(lines: list[str], config: EditorConfig) -> tuple[list[str], int]:
    bullets = bullet_pattern(config)
    result = []
    number = 1
    for line in lines:
        indent, content = _split_indent(_strip_marker(line, bullets))
        # Blank lines and empty items do not consume a number
        if not content:
            result.append(indent)
            continue
        result.append(f"{indent}{number}{config.number_delimiter} {content}")
        number += 1
    return result, number


def toggle_list_lines(
    buffer: str,
    selection: TextSpan,
    list_type: ListType,
    state: SessionState | None = None,
    config: EditorConfig | None = None,
) -> ListResult:
    """Toggle a list marker type on every line touched by `selection`.

    When any touched line already carries the requested marker, the marker is
    removed from every touched line and list mode ends. Otherwise the marker is
    added: bullets go on every line (replacing a number marker), numbers are
    assigned from 1 to lines with content (replacing a bullet marker) while blank
    lines are skipped.

    Args:
        buffer: Full text.
        selection: Selection whose lines are rewritten.
        list_type: Marker type to toggle.
        state: Current session state; defaults to a fresh `SessionState`.
        config: Marker configuration; defaults to `EditorConfig()`.

    Returns:
        ListResult: New buffer, a selection covering the rewritten lines, and the
            updated session state.

    Raises:
        SelectionError: If `selection` is invalid for `buffer`.

    Examples:
        toggle_list_lines("one\\ntwo", TextSpan(0, 7), ListType.NUMBERS)
        # ListResult(buffer="1. one\\n2. two", selection_start=0, selection_end=13, ...)
    """
    config = config or EditorConfig()
    state = state or SessionState()
    list_type = ListType(list_type)
    validate_span(buffer, selection)

    block = get_line_range(buffer, selection.start, selection.end)
    lines = buffer[block.start : block.end].split("\n")
    if list_type is ListType.BULLETS:
        target, target_mode = bullet_pattern(config), ListMode.BULLETED
    else:
        target, target_mode = number_pattern(config), ListMode.NUMBERED

    if any(classify_line(line, config) is target_mode for line in lines):
        new_lines = [_strip_marker(line, target) for line in lines]
        new_state = SessionState()
        logger.debug("Removed %s from %d line(s)", list_type.value, len(lines))
    elif list_type is ListType.BULLETS:
        new_lines = _add_bullets(lines, config)
        new_state = replace(state, list_mode=ListMode.BULLETED)
        logger.debug("Bulleted %d line(s)", len(lines))
    else:
        new_lines, next_number = _add_numbers(lines, config)
        new_state = SessionState(list_mode=ListMode.NUMBERED, next_number=next_number)
        logger.debug("Numbered %d item(s)", next_number - 1)

    new_block = "\n".join(new_lines)
    new_buffer = buffer[: block.start] + new_block + buffer[block.end :]
    return ListResult(
        buffer=new_buffer,
        selection_start=block.start,
        selection_end=block.start + len(new_block),
        state=new_state,
    )


def _insert(buffer: str, caret: int, text: str, state: SessionState) -> EnterResult:
    return EnterResult(
        consumed=True,
        buffer=buffer[:caret] + text + buffer[caret:],
        caret=caret + len(text),
        state=state,
    )


def _exit_list(buffer: str, line_start: int, caret: int, indent: str) -> EnterResult:
    # The empty item keeps its indent and the caret moves to the next line
    return EnterResult(
        consumed=True,
        buffer=buffer[:line_start] + indent + "\n" + buffer[caret:],
        caret=line_start + len(indent) + 1,
        state=SessionState(),
    )


def continue_list(
    buffer: str,
    caret: int,
    state: SessionState | None = None,
    config: EditorConfig | None = None,
) -> EnterResult:
    """Decide what an Enter keypress does inside list text.

    The current line (from its start up to the caret) is inspected:

    - a bullet or number marker with no content ends the list: the marker is
      removed but its indent stays, the caret moves to the start of the next
      line, and the session state resets;
    - a bullet line with content continues with a new bullet at the same
      indentation;
    - a numbered line with content continues with the next number;
    - a line without a marker continues the list remembered in `state`, if any.

    Otherwise the key is not consumed and the caller inserts its own newline.

    Args:
        buffer: Full text.
        caret: Caret position.
        state: Current session state; defaults to a fresh `SessionState`.
        config: Marker configuration; defaults to `EditorConfig()`.

    Returns:
        EnterResult: Whether the key was consumed, with the resulting buffer,
            caret, and session state.

    Raises:
        SelectionError: If `caret` is invalid for `buffer`.

    Examples:
        continue_list("1. item", 7)
        # EnterResult(consumed=True, buffer="1. item\\n2. ", caret=11, ...)
    """
    config = config or EditorConfig()
    state = state or SessionState()
    validate_span(buffer, TextSpan(caret, caret))

    line_start = buffer.rfind("\n", 0, caret) + 1
    current = buffer[line_start:caret]

    bullet = bullet_pattern(config).match(current)
    if bullet:
        if not current[bullet.end() :].strip():
            logger.debug("Empty bullet item at %d; leaving list mode", line_start)
            return _exit_list(buffer, line_start, caret, bullet.group("indent"))
        marker = f"\n{bullet.group('indent')}{config.bullet_marker} "
        return _insert(buffer, caret, marker, replace(state, list_mode=ListMode.BULLETED))

    number = number_pattern(config).match(current)
    if number:
        if not current[number.end() :].strip():
            logger.debug("Empty numbered item at %d; leaving list mode", line_start)
            return _exit_list(buffer, line_start, caret, number.group("indent"))
        next_value = int(number.group("number")) + 1
        marker = f"\n{number.group('indent')}{next_value}{config.number_delimiter} "
        return _insert(
            buffer,
            caret,
            marker,
            SessionState(list_mode=ListMode.NUMBERED, next_number=next_value + 1),
        )

    indent, _ = _split_indent(current)
    if state.list_mode is ListMode.BULLETED:
        logger.debug("Restoring bullet marker from session state")
        return _insert(buffer, caret, f"\n{indent}{config.bullet_marker} ", state)
    if state.list_mode is ListMode.NUMBERED:
        logger.debug("Restoring number %d from session state", state.next_number)
        marker = f"\n{indent}{state.next_number}{config.number_delimiter} "
        return _insert(buffer, caret, marker, replace(state, next_number=state.next_number + 1))

    return EnterResult(consumed=False, buffer=buffer, caret=caret, state=state)
