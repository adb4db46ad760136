"""
Command line interface for hexdump2.
"""

import sys
import argparse
import logging
from typing import List, Optional

from .config import DEFAULT_PER_LINE
from .core.exporter import ExportError, ExportOptions, export
from .core.importer import import_hexdump
from .utils.highlight import highlight_hexdump

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hexdump2",
        description="hexdump2 - Convert between hexdump text and raw bytes"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    import_parser = commands.add_parser(
        "import",
        help="Read hexdump text and write raw bytes"
    )
    import_parser.add_argument(
        "input",
        nargs="?",
        type=str,
        help="Hexdump text file (stdin if omitted)"
    )
    import_parser.add_argument(
        "-o", "--output",
        type=str,
        help="Binary output file (stdout if omitted)"
    )

    export_parser = commands.add_parser(
        "export",
        help="Read raw bytes and write hexdump text"
    )
    export_parser.add_argument(
        "input",
        nargs="?",
        type=str,
        help="Binary input file (stdin if omitted)"
    )
    export_parser.add_argument(
        "-o", "--output",
        type=str,
        help="Text output file (stdout if omitted)"
    )
    export_parser.add_argument(
        "-n", "--per-line",
        type=int,
        default=DEFAULT_PER_LINE,
        help=f"Bytes per line (default: {DEFAULT_PER_LINE})"
    )
    export_parser.add_argument(
        "--offsets",
        action="store_true",
        help="Prefix each line with its offset"
    )
    export_parser.add_argument(
        "--ascii",
        action="store_true",
        help="Append a printable character gutter to each line"
    )
    export_parser.add_argument(
        "--color",
        action="store_true",
        help="Highlight output written to stdout"
    )
    return parser.parse_args(argv)


def run_import(args: argparse.Namespace) -> None:
    """Convert hexdump text into bytes."""

    if args.input:
        with open(args.input, 'r', encoding='utf-8') as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    data = import_hexdump(text)
    if data is None:
        source = args.input or "<stdin>"
        raise ValueError(f"{source} is not a valid hexdump")

    logger.info("Imported %d bytes", len(data))

    if args.output:
        with open(args.output, 'wb') as f:
            f.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def run_export(args: argparse.Namespace) -> None:
    """Convert bytes into hexdump text."""

    if args.input:
        with open(args.input, 'rb') as f:
            data = f.read()
    else:
        data = sys.stdin.buffer.read()

    options = ExportOptions(
        per_line=args.per_line,
        with_offsets=args.offsets,
        with_ascii=args.ascii
    )
    text = export(data, options)

    # escape codes only belong on a terminal
    if args.color and text and not args.output:
        text = highlight_hexdump(text)
    elif text:
        text += '\n'

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
    else:
        sys.stdout.write(text)

    logger.info("Exported %d bytes", len(data))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the application."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        if args.command == "import":
            run_import(args)
        else:
            run_export(args)
    except (ExportError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
