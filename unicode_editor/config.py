"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import (
    DEFAULT_BULLET_MARKER,
    DEFAULT_MAX_BUFFER_LENGTH,
    DEFAULT_NUMBER_DELIMITER,
    OFFSET_UNITS,
)


@dataclass
class EditorConfig:
    """Configuration for the editing engine.

    Attributes:
        bullet_marker: Character that marks a bulleted line.
        number_delimiter: Character that follows the number of a numbered line.
        offset_unit: Unit of caller-supplied offsets, ``"code_point"`` or
            ``"utf16"``.
        max_buffer_length: Maximum buffer length accepted by the entry points.

    Examples:
        EditorConfig(bullet_marker="-", offset_unit="utf16")
    """

    # Lists
    bullet_marker: str = DEFAULT_BULLET_MARKER
    number_delimiter: str = DEFAULT_NUMBER_DELIMITER

    # Offsets
    offset_unit: str = "code_point"

    # Limits
    max_buffer_length: int = DEFAULT_MAX_BUFFER_LENGTH


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`offset_unit` must be one of: code_point, utf16")
    """


def load_config(search_path: Path) -> EditorConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.unicode-editor]`` table from `pyproject.toml` and the
    ``[unicode-editor]`` or ``[tool.unicode-editor]`` table from
    `.unicode-editor.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        EditorConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path("notes"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "unicode-editor")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".unicode-editor.toml",
            table_paths=[("unicode-editor",), ("tool", "unicode-editor")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return EditorConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> EditorConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> EditorConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return EditorConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return EditorConfig()

    try:
        return EditorConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: EditorConfig) -> None:
    """Validate an `EditorConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a list marker is not a single non-digit, non-space
            character, the offset unit is unknown, or the buffer limit is not a
            positive integer.

    Examples:
        validate_config(EditorConfig(bullet_marker="*"))
    """
    _ensure_marker("bullet_marker", config.bullet_marker)
    _ensure_marker("number_delimiter", config.number_delimiter)
    if config.bullet_marker == config.number_delimiter:
        raise ConfigError("`bullet_marker` and `number_delimiter` must differ")

    if config.offset_unit not in OFFSET_UNITS:
        raise ConfigError(f"`offset_unit` must be one of: {', '.join(OFFSET_UNITS)}")

    max_buffer_length = config.max_buffer_length
    if isinstance(max_buffer_length, bool) or not isinstance(max_buffer_length, int):
        raise ConfigError("`max_buffer_length` must be an integer")
    if max_buffer_length <= 0:
        raise ConfigError("`max_buffer_length` must be a positive integer")


def apply_overrides(config: EditorConfig, **overrides: object) -> EditorConfig:
    """Apply override values to an `EditorConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        EditorConfig: New configuration with the provided overrides applied.

    Raises:
        TypeError: If an override name is not defined on `EditorConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> EditorConfig:
    """Load, override, and validate configuration.

    Examples:
        config = build_config(Path.cwd(), bullet_marker="-")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_marker(key: str, value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError(f"`{key}` must be a single character")
    if value.isspace() or value.isdigit():
        raise ConfigError(f"`{key}` must not be whitespace or a digit")
