"""
unicode-editor: plain-text bold/italic styling through Unicode letters.

Styled text stays plain text: letters and digits are swapped for their
Mathematical Alphanumeric Symbols counterparts, so the result pastes anywhere.
The package can be used both as a CLI tool and as a library.

CLI Usage:
    unicode-editor style --bold "Hello"

Library Usage:
    from unicode_editor import StyleAxis, toggle_style

    result = toggle_style("Hello world", 0, 5, StyleAxis.BOLD)
    print(result.buffer)  # "𝐇𝐞𝐥𝐥𝐨 world"
"""

__version__ = "0.1.0"

from .codec import decode, encode
from .config import ConfigError, EditorConfig
from .editor import handle_enter, resolve_hotkey, toggle_list, toggle_style
from .exceptions import BufferTooLargeError, EditorError, FileAccessError, SelectionError
from .models import (
    CharacterNode,
    CharKind,
    EnterResult,
    ListMode,
    ListResult,
    ListType,
    SessionState,
    StyleAxis,
    StyleResult,
    TextSpan,
)
from .transform import apply_styles, to_plain, toggle

__all__ = [
    # Entry points
    "toggle_style",
    "toggle_list",
    "handle_enter",
    "resolve_hotkey",
    # Transformations
    "decode",
    "encode",
    "toggle",
    "apply_styles",
    "to_plain",
    # Data models
    "CharacterNode",
    "CharKind",
    "EnterResult",
    "ListMode",
    "ListResult",
    "ListType",
    "SessionState",
    "StyleAxis",
    "StyleResult",
    "TextSpan",
    # Configuration
    "EditorConfig",
    # Exceptions
    "BufferTooLargeError",
    "ConfigError",
    "EditorError",
    "FileAccessError",
    "SelectionError",
    # Version
    "__version__",
]
