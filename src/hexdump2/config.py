"""
Default settings and formatting constants for hexdump conversion.
"""

from typing import Final, Tuple

DEFAULT_PER_LINE: Final[int] = 16

PRINTABLE_RANGE: Final[Tuple[int, int]] = (0x20, 0x7E)
PLACEHOLDER_CHAR: Final[str] = '.'

# (largest total byte count, offset digits)
OFFSET_WIDTHS: Final[Tuple[Tuple[int, int], ...]] = (
    (0xFFFF, 4),
    (0xFFFFFFFF, 8),
)
WIDE_OFFSET_WIDTH: Final[int] = 16

HEX_DIGITS: Final[str] = '0123456789ABCDEFabcdef'
