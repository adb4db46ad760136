"""
Utility functions shared by the hexdump importer and exporter.
"""

from typing import Iterable

from ..config import (
    HEX_DIGITS,
    OFFSET_WIDTHS,
    PLACEHOLDER_CHAR,
    PRINTABLE_RANGE,
    WIDE_OFFSET_WIDTH,
)


def offset_width(total: int) -> int:
    """
    Pick the number of hex digits used for the offset column.

    Args:
        total (int): Total number of bytes being dumped

    Returns:
        int: 4, 8 or 16
    """

    for limit, width in OFFSET_WIDTHS:
        if total <= limit:
            return width

    return WIDE_OFFSET_WIDTH


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def is_printable(value: int) -> bool:
    """Check whether a byte value maps to a printable ASCII character."""

    low, high = PRINTABLE_RANGE
    return low <= value <= high


def to_ascii_char(value: int) -> str:
    """Map a byte to its gutter character."""

    return chr(value) if is_printable(value) else PLACEHOLDER_CHAR


def to_ascii(data: Iterable[int]) -> str:
    """Render bytes as gutter text, non-printable bytes as placeholders."""

    return ''.join(to_ascii_char(b) for b in data)


def gutter_padding(count: int, per_line: int) -> str:
    """
    Build the filler placed before the ASCII gutter of a line.

    Every byte slot missing from a partial line is worth three columns
    ("XX "), followed by the single space separating hex and gutter.

    Args:
        count (int): Number of bytes on the line
        per_line (int): Number of bytes a full line holds

    Returns:
        str: Padding string
    """

    missing = max(0, per_line - count)
    return '   ' * missing + ' '


def token_length(word: str) -> int:
    """Length of a token in UTF-8 bytes."""

    return len(word.encode('utf-8', errors='surrogatepass'))


def parse_hex_byte(word: str) -> int:
    """
    Parse a two byte hex token into a byte value.

    An optional leading '+' is accepted, so "+f" reads as 0x0F.

    Args:
        word (str): Token of two UTF-8 bytes

    Returns:
        int: The byte value

    Raises:
        ValueError: If the token is not a two byte hex number
    """

    digits = word[1:] if word.startswith('+') else word

    if token_length(word) != 2 or not digits or not all(c in HEX_DIGITS for c in digits):
        raise ValueError(f"Not a hex byte: {word!r}")

    return int(digits, 16)
