"""
Error kinds raised by the line store and the line commands.

Every error is recovered at the command boundary: the REPL prints the message
prefixed with ``!`` and keeps reading commands.
"""


class LinedError(Exception):
    """Base class for all recoverable editor errors."""


class CapacityExceeded(LinedError):
    """The line store is full."""

    def __init__(self, message: str = "out of space") -> None:
        super().__init__(message)


class AllocationFailure(LinedError):
    """Memory ran out while building lines."""

    def __init__(self, message: str = "alloc failed") -> None:
        super().__init__(message)


class MalformedRange(LinedError):
    """The address portion of a command does not parse."""

    def __init__(self, message: str = "bad range") -> None:
        super().__init__(message)


class MalformedSubstitution(LinedError):
    """A ``/old/new/`` or ``/text/`` pattern is missing a delimiter."""

    def __init__(self, message: str = "syntax: R a,b /old/new/[g]") -> None:
        super().__init__(message)


class OutOfRangeLine(LinedError):
    """A single line number lies outside ``[1, line_count]``."""

    def __init__(self, message: str = "bad line") -> None:
        super().__init__(message)


class IOFailure(LinedError):
    """A file could not be opened, read or written."""
