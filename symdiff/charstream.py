"""Character-level access to one line of input."""
import math
import re

from .exceptions import ParseFailure

END_OF_LINE = "\n"

_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")


class CharStream:
    """A cursor over a single line of text.

    ``peek`` returns ``END_OF_LINE`` once the cursor has passed the last
    character, so callers never need to check the length themselves.
    """

    def __init__(self, line):
        self.line = line.rstrip("\r\n")
        self.pos = 0

    def peek(self):
        if self.pos < len(self.line):
            return self.line[self.pos]
        return END_OF_LINE

    def advance(self):
        ch = self.peek()
        if self.pos < len(self.line):
            self.pos += 1
        return ch

    def skip_blanks(self):
        while self.pos < len(self.line) and self.line[self.pos].isspace():
            self.pos += 1

    def read_number(self):
        match = _NUMBER.match(self.line, self.pos)
        if match is None:
            raise ParseFailure(
                f'Expected a number but found "{self.peek().strip()}".')
        value = float(match.group())
        if not math.isfinite(value):
            raise ParseFailure(
                f"Number {match.group()} is too large.")
        self.pos = match.end()
        return value

    def at_end_of_line(self):
        return self.pos >= len(self.line)

    def consume_line(self):
        """Discard and return everything after the cursor."""
        rest = self.line[self.pos:]
        self.pos = len(self.line)
        return rest
