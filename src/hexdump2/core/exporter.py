"""
Exporter module for formatting bytes as hexdump text.
"""

import io
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from ..config import DEFAULT_PER_LINE
from ..utils.hex_utils import format_offset, gutter_padding, offset_width, to_ascii

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Anything text can be written to, such as a file or io.StringIO."""

    def write(self, text: str) -> int: ...


class ExportError(Exception):
    """Base class for errors raised while exporting."""


class SinkError(ExportError):
    """The output target rejected a write."""


class BadOptionsError(ExportError):
    """The export options cannot produce a hexdump."""


@dataclass
class ExportOptions:
    """Layout of the exported hexdump."""
    per_line: int = DEFAULT_PER_LINE
    with_offsets: bool = False
    with_ascii: bool = False

    def validate(self) -> None:
        """Raise BadOptionsError unless per_line is a positive integer."""

        if isinstance(self.per_line, bool) or not isinstance(self.per_line, int):
            raise BadOptionsError(f"per_line must be an integer, got {self.per_line!r}")

        if self.per_line <= 0:
            raise BadOptionsError(f"per_line must be positive, got {self.per_line}")


def _write(target: TextSink, text: str) -> None:
    try:
        target.write(text)
    except (OSError, ValueError) as e:
        raise SinkError(f"Failed to write hexdump: {str(e)}") from e


def export_to(target: TextSink, values: Iterable[int], options: Optional[ExportOptions] = None) -> None:
    """
    Export bytes into a writable text target.

    Nothing written before a failing write is rolled back.

    Args:
        target (TextSink): Object with a write(str) method
        values (Iterable[int]): Bytes to dump
        options (ExportOptions): Layout, defaults to 16 bytes per line

    Raises:
        BadOptionsError: If the options are invalid
        SinkError: If the target fails to accept a write
    """

    options = options or ExportOptions()
    options.validate()

    values = bytes(values)
    total = len(values)
    width = offset_width(total)
    per_line = options.per_line

    line_count = 0
    line_start = 0

    for index, value in enumerate(values):
        if options.with_offsets and index % per_line == 0:
            _write(target, format_offset(index, width) + ' ')

        _write(target, f"{value:02X}")
        line_count += 1

        if index == total - 1:
            if options.with_ascii:
                _write(target, gutter_padding(line_count, per_line) + to_ascii(values[line_start:]))
            break

        if line_count == per_line:
            if options.with_ascii:
                _write(target, gutter_padding(line_count, per_line) + to_ascii(values[line_start:index + 1]))

            _write(target, '\n')
            line_count = 0
            line_start = index + 1
            continue

        _write(target, ' ')

    logger.debug("Exported %d bytes, %d per line", total, per_line)


def export(values: Iterable[int], options: Optional[ExportOptions] = None) -> str:
    """
    Export bytes into a hexdump string.

    Args:
        values (Iterable[int]): Bytes to dump
        options (ExportOptions): Layout, defaults to 16 bytes per line

    Returns:
        str: The hexdump text, without a trailing newline
    """

    target = io.StringIO()
    export_to(target, values, options)
    return target.getvalue()
