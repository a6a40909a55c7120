"""Reading and rewriting the files named by ``--file``."""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .constants import MAX_UTF8_CHAR_BYTES
from .exceptions import BufferTooLargeError, FileAccessError


@dataclass(frozen=True)
class SourceFile:
    """Text loaded from disk plus the stat snapshot taken before reading.

    Attributes:
        path: Resolved path of the file.
        text: Decoded content, line endings untouched.
        snapshot: `os.stat_result` captured before the read; a rewrite is refused
            when the file no longer matches it.
    """

    path: Path
    text: str
    snapshot: os.stat_result


def resolve_source(raw_path: str, base_dir: Path) -> Path:
    """Resolve a user-supplied path to a regular file inside `base_dir`.

    Raises:
        FileAccessError: If any component is a symlink, the path cannot be
            resolved, is not a regular file, or lies outside `base_dir`.
    """
    path = Path(raw_path).expanduser()
    if any(part.is_symlink() for part in (path, *path.parents)):
        raise FileAccessError(path, "symlinks are not followed")

    try:
        resolved = path.resolve(strict=True)
    except OSError as error:
        raise FileAccessError(path, f"cannot be resolved ({error.strerror})") from error

    if not resolved.is_file():
        raise FileAccessError(resolved, "not a regular file")
    if not resolved.is_relative_to(base_dir):
        raise FileAccessError(resolved, f"outside of the working directory {base_dir}")
    return resolved


def _take_snapshot(path: Path) -> os.stat_result:
    snapshot = os.stat(path, follow_symlinks=False)
    if not stat.S_ISREG(snapshot.st_mode):
        raise FileAccessError(path, "not a regular file")
    return snapshot


def _fingerprint(snapshot: os.stat_result) -> tuple:
    return (snapshot.st_ino, snapshot.st_dev, snapshot.st_size, snapshot.st_mtime_ns)


def read_source(path: Path, max_length: int) -> SourceFile:
    """Read a UTF-8 file that the editor may hold as a single buffer.

    The byte size is checked before reading: a file of more than
    ``max_length * 4`` bytes cannot decode to `max_length` code points or fewer.

    Args:
        path: File to read, usually from `resolve_source`.
        max_length: The configured `max_buffer_length`.

    Returns:
        SourceFile: Content and the snapshot used by `rewrite_source`.

    Raises:
        FileAccessError: If the file is not regular, too many bytes, or not UTF-8.
        BufferTooLargeError: If the decoded text exceeds `max_length`.
        OSError: If the file cannot be read.
    """
    snapshot = _take_snapshot(path)
    byte_limit = max_length * MAX_UTF8_CHAR_BYTES
    if snapshot.st_size > byte_limit:
        raise FileAccessError(path, f"larger than {byte_limit} bytes")

    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as error:
        raise FileAccessError(path, f"Invalid UTF-8 at byte {error.start}") from error

    if len(text) > max_length:
        raise BufferTooLargeError(len(text), max_length)
    return SourceFile(path=path, text=text, snapshot=snapshot)


def _keep_owner(temp_path: Path, source: SourceFile, warn: Callable[[str], None] | None):
    if not hasattr(os, "chown"):
        return
    try:
        os.chown(temp_path, source.snapshot.st_uid, source.snapshot.st_gid)
    except PermissionError:
        if warn is not None:
            warn(f"Warning: could not preserve ownership of {source.path.name}")


def rewrite_source(
    source: SourceFile, content: str, warn: Callable[[str], None] | None = None
):
    """Replace the file behind `source` with `content` in one `os.replace`.

    The new file keeps the original permission bits and, where allowed, its
    owner. A failed write leaves the original untouched and no temp file behind.

    Raises:
        FileAccessError: If the file changed on disk since `source` was read.
        OSError: If the temp file cannot be written or moved into place.
    """
    if _fingerprint(_take_snapshot(source.path)) != _fingerprint(source.snapshot):
        raise FileAccessError(source.path, "changed on disk since it was read; not overwriting")

    descriptor, temp_name = tempfile.mkstemp(
        dir=source.path.parent, prefix=f".{source.path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(descriptor, "wb") as stream:
            stream.write(content.encode("utf-8"))
            stream.flush()
            os.fsync(stream.fileno())
        os.chmod(temp_path, stat.S_IMODE(source.snapshot.st_mode))
        _keep_owner(temp_path, source, warn)
        os.replace(temp_path, source.path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise
