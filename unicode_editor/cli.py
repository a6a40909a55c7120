"""
Styles plain text with Unicode bold/italic letters and toggles list markers.
Reads TEXT, a file, or stdin, and prints the result or rewrites the file in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import __version__
from .config import ConfigError, EditorConfig, build_config
from .editor import toggle_list, toggle_style
from .exceptions import EditorError
from .filesystem import SourceFile, read_source, resolve_source, rewrite_source
from .models import ListType, StyleAxis
from .offsets import utf16_length
from .transform import apply_styles, to_plain

__all__ = ["cli"]

logger = logging.getLogger(__name__)


def _input_options(command):
    command = click.argument("text", required=False)(command)
    command = click.option(
        "--in-place", is_flag=True, help="Rewrite the file given with --file."
    )(command)
    command = click.option(
        "--file",
        "filepath",
        type=click.Path(exists=True, dir_okay=False),
        help="Read input from a file instead of TEXT or stdin.",
    )(command)
    return command


def _read_source(
    config: EditorConfig, text: str | None, filepath: str | None, in_place: bool
) -> tuple[str, SourceFile | None]:
    if text is not None and filepath is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")
    if in_place and filepath is None:
        raise click.UsageError("--in-place requires --file.")
    if text is not None:
        return text, None
    if filepath is None:
        return click.get_text_stream("stdin").read(), None

    try:
        source = read_source(
            resolve_source(filepath, Path.cwd().resolve()), config.max_buffer_length
        )
    except EditorError as error:
        raise click.BadParameter(str(error), param_hint="'--file'") from error
    except OSError as error:
        raise click.ClickException(str(error)) from error

    logger.debug("Read %d characters from %s", len(source.text), source.path)
    return source.text, source


def _write_result(result: str, source: SourceFile | None, in_place: bool):
    if source is None or not in_place:
        click.echo(result, nl=not result.endswith("\n"))
        return
    try:
        rewrite_source(source, result, warn=lambda message: click.echo(message, err=True))
    except (EditorError, OSError) as error:
        raise click.ClickException(str(error)) from error
    logger.debug("Rewrote %s", source.path)


def _buffer_length(buffer: str, config: EditorConfig) -> int:
    return utf16_length(buffer) if config.offset_unit == "utf16" else len(buffer)


@click.group()
@click.version_option(version=__version__, prog_name="unicode-editor")
@click.option("--verbose", is_flag=True, help="Log decisions to stderr.")
@click.option("--bullet-marker", help="Character used for bulleted lines.")
@click.option("--number-delimiter", help="Character following list numbers.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool = False,
    bullet_marker: str | None = None,
    number_delimiter: str | None = None,
):
    """
    Style text with Unicode mathematical letters and toggle list markers.

    Configuration is read from the nearest `pyproject.toml`
    (``[tool.unicode-editor]``) or `.unicode-editor.toml`; command-line
    options take precedence.

    Examples:
        unicode-editor style --bold "Hello"
        echo "one" | unicode-editor list numbers
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        ctx.obj = build_config(
            Path.cwd(),
            bullet_marker=bullet_marker,
            number_delimiter=number_delimiter,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error


@cli.command()
@click.option("--bold", is_flag=True, help="Toggle bold.")
@click.option("--italic", is_flag=True, help="Toggle italic.")
@click.option("--start", type=int, default=0, show_default=True, help="Selection start offset.")
@click.option("--end", type=int, help="Selection end offset (default: end of input).")
@_input_options
@click.pass_obj
def style(
    config: EditorConfig,
    text: str | None,
    filepath: str | None,
    in_place: bool,
    bold: bool,
    italic: bool,
    start: int,
    end: int | None,
):
    """
    Toggle bold and/or italic over a selection.

    An empty selection (``--start`` equal to ``--end``) toggles the word at
    that offset.
    """
    axes = [axis for axis, wanted in ((StyleAxis.BOLD, bold), (StyleAxis.ITALIC, italic)) if wanted]
    if not axes:
        raise click.UsageError("Pass at least one of --bold or --italic.")

    buffer, source = _read_source(config, text, filepath, in_place)
    if end is None:
        end = _buffer_length(buffer, config)

    for axis in axes:
        try:
            result = toggle_style(buffer, start, end, axis, config)
        except EditorError as error:
            raise click.BadParameter(str(error)) from error
        buffer, start, end = result.buffer, result.selection_start, result.selection_end

    _write_result(buffer, source, in_place)


@cli.command()
@click.option("--bold/--no-bold", default=False, help="Render letters and digits bold.")
@click.option("--italic/--no-italic", default=False, help="Render letters italic.")
@_input_options
@click.pass_obj
def apply(
    config: EditorConfig,
    text: str | None,
    filepath: str | None,
    in_place: bool,
    bold: bool,
    italic: bool,
):
    """Render every letter and digit in exactly the requested style."""
    buffer, source = _read_source(config, text, filepath, in_place)
    _write_result(apply_styles(buffer, bold=bold, italic=italic), source, in_place)


@cli.command()
@_input_options
@click.pass_obj
def plain(config: EditorConfig, text: str | None, filepath: str | None, in_place: bool):
    """Replace styled letters and digits with plain ASCII."""
    buffer, source = _read_source(config, text, filepath, in_place)
    _write_result(to_plain(buffer), source, in_place)


@cli.command(name="list")
@click.argument("list_type", type=click.Choice([member.value for member in ListType]))
@_input_options
@click.pass_obj
def list_command(
    config: EditorConfig,
    list_type: str,
    text: str | None,
    filepath: str | None,
    in_place: bool,
):
    """Toggle bullets or numbers on every line of the input."""
    buffer, source = _read_source(config, text, filepath, in_place)
    # A trailing newline does not open another line to mark
    end = _buffer_length(buffer.rstrip("\n"), config)
    try:
        result = toggle_list(buffer, 0, end, list_type, config=config)
    except EditorError as error:
        raise click.BadParameter(str(error)) from error
    _write_result(result.buffer, source, in_place)


if __name__ == "__main__":
    cli()
