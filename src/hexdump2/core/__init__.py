"""
Core package for hexdump conversion.

This package implements both conversion directions. The importer reads
hexdump text back into bytes, tolerating offsets, extra spacing and ASCII
gutters. The exporter writes bytes out as fixed-width hexdump lines.
"""

from .importer import import_hexdump
from .exporter import (
    ExportOptions,
    ExportError,
    SinkError,
    BadOptionsError,
    export,
    export_to
)

__all__ = [
    'import_hexdump',
    'ExportOptions',
    'ExportError',
    'SinkError',
    'BadOptionsError',
    'export',
    'export_to'
]
