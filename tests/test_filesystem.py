from __future__ import annotations

import os
import socket
from pathlib import Path

import pytest

from unicode_editor.exceptions import BufferTooLargeError, EditorError, FileAccessError
from unicode_editor.filesystem import read_source, resolve_source, rewrite_source


def _note(tmp_path: Path, content: str = "Hello\n", name: str = "note.txt") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_resolve_source_accepts_any_extension(tmp_path: Path):
    target = _note(tmp_path, name="post.social")

    assert resolve_source(str(target), tmp_path) == target.resolve()


def test_resolve_source_missing_file(tmp_path: Path):
    with pytest.raises(FileAccessError, match="cannot be resolved"):
        resolve_source(str(tmp_path / "missing.txt"), tmp_path)


def test_resolve_source_rejects_directory(tmp_path: Path):
    folder = tmp_path / "folder"
    folder.mkdir()

    with pytest.raises(FileAccessError, match="not a regular file"):
        resolve_source(str(folder), tmp_path)


def test_resolve_source_rejects_symlink(tmp_path: Path):
    target = _note(tmp_path)
    link = tmp_path / "alias.txt"
    os.symlink(target, link)

    with pytest.raises(FileAccessError, match="symlinks"):
        resolve_source(str(link), tmp_path)


def test_resolve_source_rejects_path_outside_base(tmp_path: Path):
    base = tmp_path / "work"
    base.mkdir()
    outside = _note(tmp_path)

    with pytest.raises(FileAccessError) as exc_info:
        resolve_source(str(outside), base)

    assert exc_info.value.path == outside.resolve()
    assert isinstance(exc_info.value, EditorError)


def test_read_source_keeps_line_endings(tmp_path: Path):
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"a\r\nb\n")

    source = read_source(target, 100)

    assert source.text == "a\r\nb\n"
    assert source.path == target
    assert source.snapshot.st_size == 5


def test_read_source_counts_code_points_not_bytes(tmp_path: Path):
    # Five styled letters: twenty UTF-8 bytes
    styled = _note(tmp_path, "\U0001d407\U0001d41e\U0001d425\U0001d425\U0001d428")
    assert len(read_source(styled, 5).text) == 5

    plain = _note(tmp_path, "Hello", name="plain.txt")
    with pytest.raises(BufferTooLargeError):
        read_source(plain, 4)


def test_read_source_refuses_oversized_file_before_reading(tmp_path: Path, monkeypatch):
    target = _note(tmp_path, "abcdefghi")

    def _fail(self):
        raise AssertionError("file should not be read")

    monkeypatch.setattr(Path, "read_bytes", _fail)
    with pytest.raises(FileAccessError, match="larger than 8 bytes"):
        read_source(target, 2)


def test_read_source_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "binary.txt"
    target.write_bytes(b"ok\xff")

    with pytest.raises(FileAccessError, match="Invalid UTF-8 at byte 2"):
        read_source(target, 100)


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="Unix sockets not available")
def test_read_source_rejects_socket(tmp_path: Path):
    socket_path = tmp_path / "s.txt"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(str(socket_path))
    except OSError:  # pragma: no cover
        pytest.skip("Unable to create socket")
    finally:
        sock.close()

    with pytest.raises(FileAccessError, match="not a regular file"):
        read_source(socket_path, 100)


def test_rewrite_source_replaces_content(tmp_path: Path):
    target = _note(tmp_path)
    target.chmod(0o600)
    source = read_source(target, 100)

    rewrite_source(source, "\U0001d407i\n")

    assert target.read_text(encoding="utf-8") == "\U0001d407i\n"
    assert target.stat().st_mode & 0o777 == 0o600
    assert [path.name for path in tmp_path.iterdir()] == ["note.txt"]


def test_rewrite_source_refuses_changed_file(tmp_path: Path):
    target = _note(tmp_path)
    source = read_source(target, 100)
    target.write_text("Changed elsewhere\n", encoding="utf-8")

    with pytest.raises(FileAccessError, match="changed on disk"):
        rewrite_source(source, "new\n")

    assert target.read_text(encoding="utf-8") == "Changed elsewhere\n"


def test_rewrite_source_cleans_up_after_failed_replace(tmp_path: Path, monkeypatch):
    target = _note(tmp_path)
    source = read_source(target, 100)

    def _deny_replace(*args, **kwargs):
        raise PermissionError("read-only directory")

    monkeypatch.setattr(os, "replace", _deny_replace)
    with pytest.raises(PermissionError):
        rewrite_source(source, "new\n")

    assert target.read_text(encoding="utf-8") == "Hello\n"
    assert [path.name for path in tmp_path.iterdir()] == ["note.txt"]


def test_rewrite_source_warns_when_ownership_cannot_be_kept(tmp_path: Path, monkeypatch):
    target = _note(tmp_path)
    source = read_source(target, 100)
    warnings = []

    def _deny_chown(*args, **kwargs):
        raise PermissionError("no")

    monkeypatch.setattr(os, "chown", _deny_chown, raising=False)
    rewrite_source(source, "new\n", warn=warnings.append)

    assert target.read_text(encoding="utf-8") == "new\n"
    assert warnings == ["Warning: could not preserve ownership of note.txt"]
