from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest

from unicode_editor import __version__
from unicode_editor.cli import cli

BOLD_HELLO = "\U0001d407\U0001d41e\U0001d425\U0001d425\U0001d428"


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_style_bold_text_argument(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["style", "--bold", "Hello"])

    assert result.exit_code == 0
    assert result.output == f"{BOLD_HELLO}\n"


def test_style_reads_stdin(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["style", "--bold"], input="Hello\n")

    assert result.exit_code == 0
    assert result.output == f"{BOLD_HELLO}\n"


def test_style_bold_and_italic(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["style", "--bold", "--italic", "Hi"])

    assert result.exit_code == 0
    assert result.output == "\U0001d46f\U0001d48a\n"


def test_style_caret_toggles_word(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(
        cli, ["style", "--bold", "--start", "8", "--end", "8", "say the Hello"]
    )

    assert result.exit_code == 0
    assert result.output == f"say the {BOLD_HELLO}\n"


def test_style_requires_an_axis(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["style", "Hello"])

    assert result.exit_code != 0
    assert "--bold or --italic" in result.output


def test_style_rejects_bad_selection(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["style", "--bold", "--start", "4", "--end", "2", "Hello"])

    assert result.exit_code != 0
    assert "end precedes start" in result.output


def test_apply_and_plain(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    styled = cli_runner.invoke(cli, ["apply", "--bold", "Hello"])
    assert styled.exit_code == 0
    assert styled.output == f"{BOLD_HELLO}\n"

    plain = cli_runner.invoke(cli, ["plain", BOLD_HELLO])
    assert plain.exit_code == 0
    assert plain.output == "Hello\n"


def test_list_numbers_from_stdin(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["list", "numbers"], input="one\ntwo\n\nthree\n")

    assert result.exit_code == 0
    assert result.output == "1. one\n2. two\n\n3. three\n"


def test_list_toggles_off(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["list", "bullets"], input="• one\n• two\n")

    assert result.exit_code == 0
    assert result.output == "one\ntwo\n"


def test_list_uses_marker_override(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["--bullet-marker", "-", "list", "bullets", "one"])

    assert result.exit_code == 0
    assert result.output == "- one\n"


def test_list_uses_config_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.unicode-editor]
        number_delimiter = ")"
        """,
    )

    result = cli_runner.invoke(cli, ["list", "numbers", "one"])

    assert result.exit_code == 0
    assert result.output == "1) one\n"


def test_invalid_config_override(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["--bullet-marker", "ab", "list", "bullets", "one"])

    assert result.exit_code != 0
    assert "bullet_marker" in result.output


def test_rejects_invalid_list_type(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["list", "letters", "one"])

    assert result.exit_code != 0


def test_file_input_prints_result(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "note.txt", "Hello\n")

    result = cli_runner.invoke(cli, ["style", "--bold", "--file", str(target)])

    assert result.exit_code == 0
    assert result.output == f"{BOLD_HELLO}\n"
    assert target.read_text(encoding="utf-8") == "Hello\n"


def test_file_in_place(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "list.txt", "one\r\ntwo\n")
    target.chmod(0o640)

    result = cli_runner.invoke(cli, ["list", "bullets", "--file", str(target), "--in-place"])

    assert result.exit_code == 0
    assert result.output == ""
    assert target.read_bytes().decode("utf-8") == "• one\r\n• two\n"
    assert target.stat().st_mode & 0o777 == 0o640
    assert [path.name for path in tmp_path.iterdir()] == ["list.txt"]


def test_in_place_requires_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["plain", "--in-place", "Hello"])

    assert result.exit_code != 0
    assert "--in-place requires --file" in result.output


def test_text_and_file_are_exclusive(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "note.txt", "Hello\n")

    result = cli_runner.invoke(cli, ["plain", "--file", str(target), "Hello"])

    assert result.exit_code != 0
    assert "either TEXT or --file" in result.output


def test_file_outside_working_directory(cli_runner, tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    outside = _write(tmp_path, "note.txt", "Hello\n")

    result = cli_runner.invoke(cli, ["plain", "--file", str(outside)])

    assert result.exit_code != 0
    assert "outside of the working directory" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["plain"],
        ["apply", "--bold"],
        ["style", "--italic"],
        ["list", "numbers"],
    ],
)
def test_file_without_in_place_leaves_file_alone(cli_runner, tmp_path, monkeypatch, args):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "note.txt", "one\n")
    before = target.stat().st_mtime_ns

    result = cli_runner.invoke(cli, [*args, "--file", str(target)])

    assert result.exit_code == 0
    assert result.output != ""
    assert target.read_text(encoding="utf-8") == "one\n"
    assert target.stat().st_mtime_ns == before


def test_file_longer_than_buffer_limit(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.unicode-editor]
        max_buffer_length = 3
        """,
    )
    target = _write(tmp_path, "note.txt", "Hello\n")

    result = cli_runner.invoke(cli, ["plain", "--file", str(target)])

    assert result.exit_code != 0
    assert "exceeds the limit of 3" in result.output


def test_file_invalid_utf8(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "binary.txt"
    target.write_bytes(b"\xff\xfe\x00")

    result = cli_runner.invoke(cli, ["plain", "--file", str(target)])

    assert result.exit_code != 0
    assert "Invalid UTF-8" in result.output


def test_verbose_configures_debug_logging(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    result = cli_runner.invoke(cli, ["--verbose", "style", "--bold", "Hello"])

    assert result.exit_code == 0
    assert result.output == f"{BOLD_HELLO}\n"
    assert calls[0]["level"] == logging.DEBUG
