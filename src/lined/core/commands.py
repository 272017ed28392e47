"""
Line commands: List, Insert, Delete, Edit, Replace, Search, Open and Write.

Each command takes the argument text that follows its command letter,
resolves it against the current document and reports through the output
stream. Errors are raised as ``LinedError`` subclasses for the caller to
report.
"""

import logging
from typing import List, Optional, TextIO

from .buffer import LineStore, chomp
from .errors import (
    AllocationFailure,
    IOFailure,
    MalformedRange,
    MalformedSubstitution,
    OutOfRangeLine,
)
from .ranges import Range, atoi, resolve, split_address
from .session import EditingSession
from .substitute import parse_between, parse_substitution, replace_in_line
from ..utils.search import SearchEngine, SearchResult

logger = logging.getLogger(__name__)

INSERT_SENTINEL = '.'


class LineCommands:
    """Runs line commands against an editing session."""

    def __init__(self, session: EditingSession, stdin: TextIO, stdout: TextIO) -> None:
        self.session = session
        self.stdin = stdin
        self.stdout = stdout

    @property
    def store(self) -> LineStore:
        return self.session.store

    def echo(self, text: str = '') -> None:
        self.stdout.write(text + '\n')

    def prompt(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> Optional[str]:
        """Read one input line without its line ending; None at end of input."""

        line = self.stdin.readline()
        if not line:
            return None

        return chomp(line)

    def _echo_line(self, idx: int) -> None:
        self.echo(f"{idx:05d}: {self.store.get_line(idx)}")

    def _resolve(self, address: str) -> Range:
        return resolve(address, self.store.line_count)

    def list_lines(self, arg: str = '') -> int:
        """``L [a][,b]``: print lines with their 0-based index."""

        rng = self._resolve(arg)

        if self.store.line_count == 0:
            self.echo("(empty)")
            return 0

        shown = 0
        for idx in rng.indices():
            self._echo_line(idx)
            shown += 1

        self.session.remember_range(rng.a, rng.b)
        return shown

    def insert(self, arg: str = '') -> int:
        """
        ``I [n]``: insert lines before line ``n`` until a lone ``.``.

        Lines already inserted are kept when the store fills up; the
        ``CapacityExceeded`` error is then re-raised for the caller.

        Returns:
            int: Number of lines inserted
        """

        count = self.store.line_count
        n = atoi(arg) if arg.strip() else count + 1
        if n < 1 or n > count + 1:
            n = count + 1

        pos = n - 1
        self.echo(f"-- Insert at  Line {n - 1:05d}  --")

        try:
            while True:
                self.prompt(f"{pos + 1:05d}: ")

                line = self.read_line()
                if line is None or line == INSERT_SENTINEL:
                    break

                try:
                    self.store.insert_line(pos, line)
                except MemoryError as e:
                    raise AllocationFailure() from e

                pos += 1
        finally:
            self.session.remember_range(n, pos)

        logger.debug("Inserted %d line(s) at %d", pos - (n - 1), n)
        return pos - (n - 1)

    def delete(self, arg: str) -> int:
        """``D a[,b]``: remove a range of lines."""

        if not arg.strip():
            raise MalformedRange("need D a[,b]")

        try:
            rng = self._resolve(arg)
        except MalformedRange as e:
            raise MalformedRange("need D a[,b]") from e

        if self.store.line_count == 0 or rng.is_empty:
            return 0

        removed = rng.b - rng.a + 1
        self.store.close_gap(rng.a - 1, removed)

        count = self.store.line_count
        self.session.remember_range(rng.a, rng.a if rng.a <= count else count)

        logger.debug("Deleted lines %d..%d", rng.a, rng.b)
        return removed

    def edit(self, arg: str) -> bool:
        """
        ``E n``: show line ``n`` and replace it with the next input line.

        Returns:
            bool: True if the line was replaced, False at end of input
        """

        if not arg.strip():
            raise MalformedRange("need E n")

        n = atoi(arg)
        if n < 1 or n > self.store.line_count:
            raise OutOfRangeLine()

        self._echo_line(n - 1)
        self.prompt(f"{n:05d}: ")

        line = self.read_line()
        if line is None:
            return False

        self.store.set_line(n - 1, line)
        self.session.remember_range(n, n)
        return True

    def replace(self, arg: str) -> int:
        """``R a[,b] /old/new/[g]``: substitute text in a range of lines."""

        address, pattern = split_address(arg)
        if pattern is None:
            raise MalformedSubstitution()

        rng = self._resolve(address)
        sub = parse_substitution(pattern)
        config = self.session.config

        total = 0
        for idx in rng.indices():
            line, made = replace_in_line(
                self.store.get_line(idx),
                sub.old,
                sub.new,
                sub.global_,
                config.line_len,
                config.replace_limit,
            )
            if made:
                self.store.set_line(idx, line)
                total += made

        self.echo(f"Replaced {total} occurrence(s).")
        self.session.remember_range(rng.a, rng.b)

        logger.debug("Replaced %d occurrence(s) of %r in %d..%d", total, sub.old, rng.a, rng.b)
        return total

    def search(self, arg: str) -> List[SearchResult]:
        """``S [a][,b] /text/`` or ``S text``: list lines containing text."""

        address, pattern = split_address(arg)

        if pattern is None:
            rng = self._resolve('')
            needle = arg.lstrip()
        else:
            rng = self._resolve(address)
            parsed = parse_between(pattern)
            if parsed is None:
                raise MalformedSubstitution("syntax: S a,b /text/")
            needle = parsed[0]

        results = SearchEngine(self.store).find_all(needle, rng)
        for result in results:
            self.echo(f"{result.index:05d}: {result.text}")

        self.echo(f"-- {len(results)} match(es)")
        self.session.remember_range(rng.a, rng.b)
        return results

    def open_file(self, arg: str) -> int:
        """``O name``: replace the document with a file."""

        name = arg.strip()
        if not name:
            raise IOFailure("need filename")

        count = self.session.open(name)
        self.echo(f"-- loaded {count} line(s)")
        return count

    def write_file(self, arg: str = '') -> int:
        """``W [name]``: save the document."""

        name = arg.strip()
        if not name and not self.session.filename:
            raise IOFailure("W needs filename (no current file)")

        target, count = self.session.write(name or None)
        self.echo(f"-- wrote {count} line(s) to {target}")
        return count
