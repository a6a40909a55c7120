"""Package-specific exception types."""

from __future__ import annotations


class EditorError(ValueError):
    """Base class for caller contract violations.

    Raised when an entry point receives input it cannot act on. Operations that
    simply have nothing to do (no word under the caret, an Enter key that is not
    part of a list) return their input instead of raising.
    """


class SelectionError(EditorError):
    """Raised when selection or caret offsets are invalid for a buffer.

    Args:
        start: Offending start offset (or caret).
        end: Offending end offset (or caret).
        length: Length of the buffer in the caller's offset unit.
        reason: Short description of the violation.
    """

    def __init__(self, start: int, end: int, length: int, reason: str):
        self.start = start
        self.end = end
        self.length = length
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Invalid selection [{self.start}, {self.end}) for buffer of length {self.length}: {self.reason}"


class BufferTooLargeError(EditorError):
    """Raised when a buffer exceeds the configured maximum length.

    Args:
        length: Length of the rejected buffer.
        limit: Maximum allowed length.
    """

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Buffer of length {self.length} exceeds the limit of {self.limit}")


class FileAccessError(EditorError):
    """Raised when a file named on the command line cannot be used as a buffer.

    Args:
        path: Offending path.
        reason: Short description of the problem.
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
