"""
Entry point for LINED.
"""

import argparse
import sys
from typing import List, Optional

from .core.config import EditorConfig
from .core.session import EditingSession
from .ui.input_handler import run_visual
from .ui.repl import Repl
from .utils.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    defaults = EditorConfig()
    parser = argparse.ArgumentParser(
        description="LINED - EDLIN-style Line Editor with a Fullscreen Visual Mode"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=defaults.max_lines,
        help=f"Most lines a document may hold (default: {defaults.max_lines})"
    )
    parser.add_argument(
        "--line-len",
        type=int,
        default=defaults.line_len,
        help=f"Line buffer size; lines hold one character less (default: {defaults.line_len})"
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=defaults.encoding,
        help=f"File encoding (default: {defaults.encoding})"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write a debug log to this file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level name (default: WARNING)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
        config = EditorConfig(
            max_lines=args.max_lines,
            line_len=args.line_len,
            encoding=args.encoding,
        )
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    session = EditingSession(config)
    repl = Repl(session, visual_runner=run_visual)

    if args.file:
        repl.open_initial(args.file)

    return repl.run()


if __name__ == "__main__":
    sys.exit(main())
