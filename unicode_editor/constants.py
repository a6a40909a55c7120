"""Constants used across the unicode-editor package."""

from __future__ import annotations

# Plain ASCII starting points
ASCII_UPPER_START = 0x41  # A
ASCII_LOWER_START = 0x61  # a
ASCII_DIGIT_START = 0x30  # 0

# Mathematical Bold: U+1D400 (A) .. U+1D433, digits U+1D7CE .. U+1D7D7
BOLD_UPPER_START = 0x1D400  # 𝐀
BOLD_LOWER_START = 0x1D41A  # 𝐚
BOLD_DIGIT_START = 0x1D7CE  # 𝟎

# Mathematical Italic: U+1D434 (A) .. U+1D467
ITALIC_UPPER_START = 0x1D434  # 𝐴
ITALIC_LOWER_START = 0x1D44E  # 𝑎
# U+1D455 is unassigned; italic small h lives at U+210E (Planck constant)
ITALIC_SMALL_H_HOLE = 0x1D455
ITALIC_SMALL_H = 0x210E  # ℎ
SMALL_H_INDEX = 7

# Mathematical Bold Italic: U+1D468 (A) .. U+1D49B
BOLD_ITALIC_UPPER_START = 0x1D468  # 𝑨
BOLD_ITALIC_LOWER_START = 0x1D482  # 𝒂

LETTER_COUNT = 26
DIGIT_COUNT = 10

# UTF-16 surrogate ranges
HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

WORD_EXTRA_CHARS = frozenset("_")

# List defaults
DEFAULT_BULLET_MARKER = "•"
DEFAULT_NUMBER_DELIMITER = "."
DEFAULT_MAX_BUFFER_LENGTH = 1_000_000
OFFSET_UNITS = ("code_point", "utf16")
# Longer digit runs are not read as list numbers
MAX_LIST_NUMBER_DIGITS = 9

# Upper bound on UTF-8 bytes per code point, for sizing files before decoding
MAX_UTF8_CHAR_BYTES = 4
