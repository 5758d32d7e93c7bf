import sys
from abc import ABC, abstractmethod


def has_console():
    # Same rule as an attached console: both ends must be terminals,
    # otherwise input or output has been redirected.
    return sys.stdin.isatty() and sys.stdout.isatty()


def strip_line_terminator(line):
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


class LineSource(ABC):
    @abstractmethod
    def read_line(self):
        """Blocks until a line is available and returns it without its
        line terminator. Returns None once the input is exhausted."""

    def is_interactive(self):
        return False


class StreamLineSource(LineSource):
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self):
        line = self.stream.readline()
        if not line:
            return None
        return strip_line_terminator(line)

    def is_interactive(self):
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())


class IterableLineSource(LineSource):
    def __init__(self, lines):
        self._lines = iter(lines)

    def read_line(self):
        line = next(self._lines, None)
        if line is None:
            return None
        return strip_line_terminator(line)
