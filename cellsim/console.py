"""Text console input and output, with validated number entry."""

import sys

from cellsim.exceptions import (
    InvalidInputException,
    InvalidSpectrumException,
    OutOfRangeException,
)

_DIGITS = frozenset("0123456789")


def parse_int(text, min_val, max_val):
    """Parse a typed line as an integer within ``[min_val, max_val]``.

    Only the part before the first newline counts; an optional leading
    minus is allowed. A blank line reads as zero, as the original entry
    routine did.
    """
    if not text:
        raise InvalidInputException()
    negative = text.startswith("-")
    if text == "-":
        raise InvalidInputException()
    body = text[1:] if negative else text
    body = body.split("\n", 1)[0]
    if not set(body) <= _DIGITS:
        raise InvalidInputException()
    value = int(body) if body else 0
    if negative:
        value = -value
    if value < min_val or value > max_val:
        raise OutOfRangeException()
    return value


def validate_spectrum(assigned, max_allowed):
    """Raise InvalidSpectrumException if ``assigned`` exceeds ``max_allowed``."""
    if assigned > max_allowed:
        raise InvalidSpectrumException()


class Console:
    """Reads from one stream and writes to an output and an error stream."""

    def __init__(self, stdin=None, stdout=None, stderr=None):
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr

    def write(self, text):
        """Write text (or a number) to the output stream."""
        self.stdout.write(str(text))
        self.stdout.flush()

    def error(self, text):
        """Write text (or a number) to the error stream."""
        self.stderr.write(str(text))
        self.stderr.flush()

    def _raw_line(self):
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line

    def read_line(self):
        """Return the next input line without its newline; EOFError at end."""
        return self._raw_line().rstrip("\n")

    def read_int(self, min_val, max_val):
        """Read a line and return it as an integer within the given range."""
        return parse_int(self._raw_line(), min_val, max_val)