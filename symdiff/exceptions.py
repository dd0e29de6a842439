"""Errors raised while reading expressions and running stack code."""


class ParseFailure(Exception):
    """A syntax error found in the input line.

    ``remainder`` holds the rest of the line that was discarded when the
    failure unwound out of the parser; it is empty until then.
    """

    def __init__(self, message, remainder=""):
        super().__init__(message)
        self.message = message
        self.remainder = remainder


class StackMachineError(Exception):
    """A stack program that does not leave exactly one value."""
