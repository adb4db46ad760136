"""
Terminal colorization of hexdump text using Pygments.
"""

from typing import Optional

from pygments import highlight
from pygments.formatter import Formatter
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer


def highlight_hexdump(text: str, formatter: Optional[Formatter] = None) -> str:
    """
    Colorize hexdump text for display.

    Args:
        text (str): Hexdump text as produced by the exporter
        formatter (Formatter): Pygments formatter, terminal colors by default

    Returns:
        str: Highlighted text, always ending with a newline
    """

    return highlight(text, HexdumpLexer(), formatter or TerminalFormatter())
