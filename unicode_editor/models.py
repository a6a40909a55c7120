"""Data models for unicode-editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CharKind(Enum):
    """Classification of a decoded character.

    Attributes:
        UPPER: Latin capital letter, plain or styled.
        LOWER: Latin small letter, plain or styled.
        DIGIT: Decimal digit, plain or styled.
        OTHER: Anything the codec does not recognize.
    """

    UPPER = auto()
    LOWER = auto()
    DIGIT = auto()
    OTHER = auto()


class StyleAxis(str, Enum):
    """Independent styling axes that can be toggled on a character."""

    BOLD = "bold"
    ITALIC = "italic"


class ListType(str, Enum):
    """List kinds a block of lines can be toggled into."""

    BULLETS = "bullets"
    NUMBERS = "numbers"


class ListMode(Enum):
    """Session list mode deciding how Enter continues a list."""

    NONE = auto()
    BULLETED = auto()
    NUMBERED = auto()


@dataclass(frozen=True)
class CharacterNode:
    """Decoded identity of one logical character.

    Attributes:
        kind: Character classification.
        index: Zero-based position in the alphabet (0-25) or digit value (0-9);
            None for `CharKind.OTHER`.
        bold: Whether the character is rendered bold.
        italic: Whether the character is rendered italic.
        raw: Original text fragment, emitted verbatim for `CharKind.OTHER`.
    """

    kind: CharKind
    index: int | None = None
    bold: bool = False
    italic: bool = False
    raw: str = ""


@dataclass(frozen=True)
class TextSpan:
    """Half-open `[start, end)` range of offsets into a buffer."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start


@dataclass(frozen=True)
class CharSpan:
    """A single character located in a buffer, with its offsets."""

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class SessionState:
    """List-continuation memory owned by the editing session.

    Attributes:
        list_mode: Mode Enter continues when the current line has no marker.
        next_number: Number the next numbered item receives.
    """

    list_mode: ListMode = ListMode.NONE
    next_number: int = 1


@dataclass(frozen=True)
class StyleResult:
    """New buffer and selection after a style toggle."""

    buffer: str
    selection_start: int
    selection_end: int


@dataclass(frozen=True)
class ListResult:
    """New buffer, selection, and session state after a list toggle."""

    buffer: str
    selection_start: int
    selection_end: int
    state: SessionState


@dataclass(frozen=True)
class EnterResult:
    """Outcome of an Enter keypress.

    Attributes:
        consumed: False when the caller should insert its own newline; the
            remaining fields then echo the input unchanged.
        buffer: Buffer after handling the key.
        caret: Caret offset after handling the key.
        state: Session state after handling the key.
    """

    consumed: bool
    buffer: str
    caret: int
    state: SessionState
