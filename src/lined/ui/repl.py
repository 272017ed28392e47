"""
Line-numbered command loop.
"""

import logging
import sys
from typing import Callable, Dict, Final, List, Optional, TextIO

from ..core.buffer import chomp
from ..core.commands import LineCommands
from ..core.errors import AllocationFailure, LinedError
from ..core.session import EditingSession

logger = logging.getLogger(__name__)

PROMPT: Final[str] = "* "

BANNER: Final[List[str]] = [
    "=================================================================",
    "                 L I N E D   Line Editor                          ",
    "=================================================================",
    "         Ready.  Type '?' for Help or 'V' for Visual Mode.       ",
    "",
]

HELP_TEXT: Final[List[str]] = [
    "Commands:",
    "  L [a][,b]             list lines",
    "  I [n]                 insert at n (end with a single '.')",
    "  D a[,b]               delete lines (address required)",
    "  E n                   edit (replace) line",
    "  R a[,b] /old/new/[g]  replace; 'g' = global per line",
    "  S [a][,b] /text/      search (case-insensitive)",
    "  O name                open (load) file",
    "  W [name]              write (save) file",
    "  V                     fullscreen visual editor mode",
    "  P                     print status",
    "  H or ?                help",
    "  Q                     quit",
]


class Repl:
    """Reads commands, runs them and echoes a status line after each."""

    def __init__(self, session: EditingSession, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 visual_runner: Optional[Callable[[EditingSession], None]] = None) -> None:
        self.session = session
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.commands = LineCommands(session, self.stdin, self.stdout)
        self.visual_runner = visual_runner
        self.command_handlers: Dict[str, Callable[[str], object]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[str, Callable[[str], object]]:
        """Map command letters to handlers taking the argument text."""

        return {
            'L': self.commands.list_lines,
            'I': self.commands.insert,
            'D': self.commands.delete,
            'E': self.commands.edit,
            'R': self.commands.replace,
            'S': self.commands.search,
            'O': self.commands.open_file,
            'W': self.commands.write_file,
            'V': self._visual,
            'P': self._print_status,
            'H': self._help,
            '?': self._help,
        }

    def echo(self, text: str = '') -> None:
        self.stdout.write(text + '\n')

    def banner(self) -> None:
        for line in BANNER:
            self.echo(line)

    def status_line(self) -> None:
        self.echo(self.session.status_line())

    def open_initial(self, filename: str) -> bool:
        """Load the file named on the command line, or start empty with that name."""

        try:
            self.session.open(filename)
        except LinedError as e:
            logger.warning("Could not open %s: %s", filename, e)
            self.echo(f"! couldn't open '{filename}' (starting empty)")
            self.session.filename = filename
            return False

        return True

    def execute(self, text: str) -> bool:
        """
        Run one command line.

        Returns:
            bool: False when the command was ``Q``
        """

        text = text.lstrip()
        if not text:
            return True

        cmd = text[0].upper()
        arg = text[1:].lstrip()

        if cmd == 'Q':
            return False

        handler = self.command_handlers.get(cmd)
        if handler is None:
            self.echo("?")
        else:
            logger.debug("Command %s %r", cmd, arg)
            try:
                handler(arg)
            except AllocationFailure as e:
                logger.error("Command %s failed: %s", cmd, e)
                self.echo(f"! {e}")
                if self.session.line_count == 0:
                    self.echo("! document is empty; reload it with O name")
            except LinedError as e:
                logger.warning("Command %s failed: %s", cmd, e)
                self.echo(f"! {e}")

        self.status_line()
        return True

    def run(self) -> int:
        """Loop until ``Q`` or end of input; returns the exit status."""

        self.banner()
        self.status_line()

        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                break

            if not self.execute(chomp(line)):
                break

        return 0

    def _visual(self, arg: str = '') -> None:
        if self.visual_runner is None:
            self.echo("! visual mode needs a terminal")
            return

        self.visual_runner(self.session)

    def _print_status(self, arg: str = '') -> None:
        a, b = self.session.last_range
        last = f"{a},{b}" if b else "(unset)"
        self.echo(f"Last range: {last}")

    def _help(self, arg: str = '') -> None:
        for line in HELP_TEXT:
            self.echo(line)
