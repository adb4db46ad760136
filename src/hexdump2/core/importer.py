"""
Importer module for reading hexdump text back into bytes.

Lines are tokenized on single spaces and each token is classified by its
position and length only. This accepts plain byte lists, lines prefixed
with 4, 8 or 16 digit offsets, and lines followed by an ASCII gutter.
"""

import enum
import logging
from typing import Optional

from ..utils.hex_utils import parse_hex_byte, token_length

logger = logging.getLogger(__name__)


class LineState(enum.Enum):
    """Position of the classifier within a single line."""
    EXPECT_OFFSET_OR_BYTE = enum.auto()
    IN_BYTES = enum.auto()
    TRAILING = enum.auto()


class TokenKind(enum.Enum):
    """What a token turned out to be."""
    PADDING = enum.auto()
    OFFSET = enum.auto()
    BYTE = enum.auto()
    ANNOTATION = enum.auto()
    INVALID = enum.auto()


def classify_token(word: str, state: LineState) -> TokenKind:
    """
    Classify a single token of a hexdump line.

    Lengths are measured in UTF-8 bytes. A two byte token is only excused
    from byte parsing in the TRAILING state, which is how a narrow ASCII
    gutter looks.

    Args:
        word (str): The token
        state (LineState): Current classifier state

    Returns:
        TokenKind: Classification of the token
    """

    if not word:
        return TokenKind.PADDING

    length = token_length(word)

    if state is LineState.EXPECT_OFFSET_OR_BYTE and length > 2:
        return TokenKind.OFFSET

    if length != 2 or state is LineState.TRAILING:
        return TokenKind.ANNOTATION

    try:
        parse_hex_byte(word)
    except ValueError:
        return TokenKind.INVALID

    return TokenKind.BYTE


def _import_line(line: str, buffer: bytearray) -> Optional[str]:
    """
    Append the bytes of one line to the buffer.

    Returns:
        str: The offending token if the line is malformed, else None
    """

    words = line.strip().split(' ')
    last_index = len(words) - 1
    state = LineState.EXPECT_OFFSET_OR_BYTE
    had_padding = False

    for index, word in enumerate(words):
        # extra spacing before the last word marks it as a gutter
        if index == last_index and had_padding:
            state = LineState.TRAILING

        kind = classify_token(word, state)

        if kind is TokenKind.PADDING:
            had_padding = True
            continue

        if kind is TokenKind.INVALID:
            return word

        if kind is TokenKind.BYTE:
            buffer.append(parse_hex_byte(word))
            had_padding = False

        if state is LineState.EXPECT_OFFSET_OR_BYTE:
            state = LineState.IN_BYTES

    return None


def import_hexdump(data: str) -> Optional[bytes]:
    """
    Read a hexdump string into bytes.

    Args:
        data (str): Hexdump text, e.g. "0000 61 62 63 64 abcd"

    Returns:
        bytes: Parsed bytes or None if any line holds a malformed byte
    """

    buffer = bytearray()

    for line_number, line in enumerate(data.split('\n'), start=1):
        bad_word = _import_line(line, buffer)
        if bad_word is not None:
            logger.debug("Rejected token %r on line %d", bad_word, line_number)
            return None

    return bytes(buffer)
