"""
Range resolver for the address part of line commands.

Addresses are 1-based and inclusive::

    ""      whole document
    ",N"    1..N
    "N"     N..N
    "N,M"   N..M   (M omitted means end of document)
"""

import string
from typing import NamedTuple, Optional, Tuple

from .errors import MalformedRange


class Range(NamedTuple):
    """A 1-based inclusive line range."""

    a: int
    b: int

    @property
    def is_empty(self) -> bool:
        return self.b < 1 or self.a > self.b

    def indices(self) -> range:
        """0-based indices covered by the range."""

        if self.is_empty:
            return range(0)

        return range(self.a - 1, self.b)


def atoi(text: str) -> int:
    """Read a leading, optionally signed integer and ignore the rest; 0 if none."""

    text = text.lstrip()
    sign = 1
    if text[:1] in ('+', '-'):
        sign = -1 if text[0] == '-' else 1
        text = text[1:]

    digits = ''
    for char in text:
        if char not in string.digits:
            break
        digits += char

    return sign * int(digits) if digits else 0


def _skip_digits(text: str) -> str:
    index = 0
    while index < len(text) and text[index] in string.digits:
        index += 1

    return text[index:]


def parse_range(text: str, line_count: int) -> Range:
    """
    Parse an address against the current document size.

    Args:
        text: Address text, e.g. ``"3,7"`` or ``",5"``
        line_count: Current number of lines

    Returns:
        Range: The unclamped range

    Raises:
        MalformedRange: The text is not an address
    """

    rest = text.lstrip()

    if not rest:
        return Range(1, line_count)

    if rest[0] == ',':
        last = atoi(rest[1:])
        return Range(1, last if last > 0 else line_count)

    if rest[0] not in string.digits:
        raise MalformedRange()

    first = atoi(rest)
    rest = _skip_digits(rest).lstrip()

    if rest.startswith(','):
        rest = rest[1:].lstrip()
        last = atoi(rest) if rest else line_count
    else:
        last = first

    return Range(first if first > 0 else 1, last if last > 0 else line_count)


def to_range_defaults(a: int, b: int, line_count: int) -> Range:
    """
    Clamp a range to the document and put its ends in order.

    An empty document always yields ``Range(0, 0)``.
    """

    if line_count <= 0:
        return Range(0, 0)

    if a < 1:
        a = 1

    if b < 1 or b > line_count:
        b = line_count

    if a > b:
        a, b = b, min(a, line_count)

    return Range(a, b)


def resolve(text: str, line_count: int) -> Range:
    """Parse and clamp in one step."""

    a, b = parse_range(text, line_count)
    return to_range_defaults(a, b, line_count)


def split_address(text: str) -> Tuple[str, Optional[str]]:
    """Split command text at the first ``/`` into address and pattern parts."""

    slash = text.find('/')
    if slash < 0:
        return text, None

    return text[:slash], text[slash:]
