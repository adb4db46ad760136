"""
Convert between hexdump text and raw bytes.
"""

from .core import (
    import_hexdump,
    ExportOptions,
    ExportError,
    SinkError,
    BadOptionsError,
    export,
    export_to
)

__version__ = "0.1.0"

__all__ = [
    'import_hexdump',
    'ExportOptions',
    'ExportError',
    'SinkError',
    'BadOptionsError',
    'export',
    'export_to'
]
