"""Recursive-descent parser for expressions in x.

Grammar, lowest precedence first::

    expression := ['-'] term { ('+' | '-') term }
    term       := factor { ('*' | '/') factor }
    factor     := number | 'x' | 'X' | '(' expression ')'

Chains of operators at one level fold to the left.
"""
import logging

from .charstream import CharStream, END_OF_LINE
from .exceptions import ParseFailure
from .expressions import Add, Sub, Mul, Div, Neg, Number, Symbol

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
OPERATORS = {'+': Add, '-': Sub, '*': Mul, '/': Div}


class Parser:
    """Build an expression tree from a :class:`CharStream`."""

    def __init__(self, stream):
        self.stream = stream

    def parse(self):
        """Parse a complete line and return the root of its tree.

        On failure the rest of the line is discarded and attached to the
        raised :class:`ParseFailure` as ``remainder``.
        """
        try:
            try:
                expr = self.expression()
            except RecursionError:
                raise ParseFailure("Expression is nested too deeply.") from None
            self.stream.skip_blanks()
            if not self.stream.at_end_of_line():
                raise ParseFailure("Extra data after end of expression.")
        except ParseFailure as error:
            error.remainder = self.stream.consume_line()
            logger.debug("Parse failure: %s (discarding %r)",
                         error.message, error.remainder)
            raise
        self.stream.consume_line()
        return expr

    def expression(self):
        stream = self.stream
        stream.skip_blanks()
        negative = False
        if stream.peek() == '-':
            stream.advance()
            negative = True
        expr = self.term()
        if negative:
            expr = Neg(expr)
        stream.skip_blanks()
        while stream.peek() in ('+', '-'):
            op = OPERATORS[stream.advance()]
            expr = op(expr, self.term())
            stream.skip_blanks()
        return expr

    def term(self):
        stream = self.stream
        stream.skip_blanks()
        term = self.factor()
        stream.skip_blanks()
        while stream.peek() in ('*', '/'):
            op = OPERATORS[stream.advance()]
            term = op(term, self.factor())
            stream.skip_blanks()
        return term

    def factor(self):
        stream = self.stream
        stream.skip_blanks()
        ch = stream.peek()
        if ch in DIGITS:
            return Number(stream.read_number())
        elif ch in ('x', 'X'):
            stream.advance()
            return Symbol()
        elif ch == '(':
            stream.advance()
            expr = self.expression()
            stream.skip_blanks()
            if stream.peek() != ')':
                raise ParseFailure("Missing right parenthesis.")
            stream.advance()
            return expr
        elif ch == END_OF_LINE:
            raise ParseFailure(
                "End-of-line encountered in the middle of an expression.")
        elif ch == ')':
            raise ParseFailure("Extra right parenthesis.")
        elif ch in OPERATORS:
            raise ParseFailure("Misplaced operator.")
        else:
            raise ParseFailure(f'Unexpected character "{ch}" encountered.')


def parse(text):
    """Parse one line of text into an expression tree."""
    return Parser(CharStream(text)).parse()
