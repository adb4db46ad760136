"""
Utility package for hexdump formatting helpers.
"""

from .hex_utils import (
    offset_width,
    format_offset,
    is_printable,
    to_ascii_char,
    to_ascii,
    gutter_padding,
    parse_hex_byte,
    token_length
)
from .highlight import highlight_hexdump

__all__ = [
    'offset_width',
    'format_offset',
    'is_printable',
    'to_ascii_char',
    'to_ascii',
    'gutter_padding',
    'parse_hex_byte',
    'token_length',
    'highlight_hexdump'
]
