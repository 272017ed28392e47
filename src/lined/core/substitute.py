"""
Substitution engine for the ``R`` command.
"""

from typing import NamedTuple, Optional, Tuple

from .errors import MalformedSubstitution

DEFAULT_REPLACE_LIMIT = 1024


class Substitution(NamedTuple):
    """A parsed ``/old/new/[g]`` specification."""

    old: str
    new: str
    global_: bool = False


def parse_between(text: str, delim: str = '/') -> Optional[Tuple[str, str]]:
    """
    Read a field enclosed in ``delim``.

    Returns:
        The field and the text after the closing delimiter, or None when
        either delimiter is missing.
    """

    if not text.startswith(delim):
        return None

    end = text.find(delim, 1)
    if end < 0:
        return None

    return text[1:end], text[end + 1:]


def parse_substitution(text: str) -> Substitution:
    """
    Parse ``/old/new/[g]``.

    Raises:
        MalformedSubstitution: Either field is missing a delimiter
    """

    parsed = parse_between(text.lstrip())
    if parsed is None:
        raise MalformedSubstitution()
    old, rest = parsed

    # The closing slash of "old" also opens "new".
    end = rest.find('/')
    if end < 0:
        raise MalformedSubstitution()
    new = rest[:end]

    flag = rest[end + 1:].lstrip()[:1]

    return Substitution(old, new, flag in ('g', 'G'))


def replace_in_line(line: str, old: str, new: str, global_: bool, line_len: int,
                    limit: int = DEFAULT_REPLACE_LIMIT) -> Tuple[str, int]:
    """
    Replace occurrences of ``old`` with ``new`` in a single line.

    Matching is case-sensitive and non-overlapping, left to right. Scanning
    resumes after the inserted text. A substitution that would make the
    line longer than ``line_len - 1`` characters stops the loop; the ones
    already applied stand.

    Args:
        line: Line to modify
        old: Text to find; empty means nothing to do
        new: Replacement text
        global_: Replace every occurrence instead of only the first
        line_len: Line buffer size, including the terminator slot
        limit: Most substitutions applied to one line

    Returns:
        Tuple[str, int]: The new line and the number of substitutions made
    """

    if not old:
        return line, 0

    made = 0
    pos = 0

    while made < limit:
        found = line.find(old, pos)
        if found < 0:
            break

        suffix = line[found + len(old):]
        if found + len(new) + len(suffix) > line_len - 1:
            break

        line = line[:found] + new + suffix
        pos = found + len(new)
        made += 1

        if not global_:
            break

    return line, made
