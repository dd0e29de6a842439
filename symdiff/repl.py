"""Read expressions line by line and print their derivatives."""
import logging
import sys

from .charstream import CharStream
from .exceptions import ParseFailure
from .expressions import evaluate, format_number
from .parser import Parser
from .stack_code import stack_code

logger = logging.getLogger(__name__)


def _print_code(expr, x, out):
    for instruction in stack_code(expr, x):
        print(f"  {instruction}", file=out)


def process_line(line, config, out=None):
    """Differentiate one line of input and print the result.

    Returns the derivative tree, or None if the line could not be parsed.
    """
    out = out or sys.stdout
    try:
        expr = Parser(CharStream(line)).parse()
    except ParseFailure as error:
        logger.info("Rejected input %r: %s", line.rstrip("\n"), error.message)
        print(f"\n*** Error in input:    {error.message}", file=out)
        print(f"*** Discarding input:  {error.remainder}", file=out)
        return None

    derivative = expr.derivative()
    logger.debug("Parsed %s, derivative %s", expr, derivative)

    if config.show_original:
        print("\nExpression stack code:", file=out)
        _print_code(expr, config.x, out)
        print(f"\nExpression: {expr}", file=out)
        print("\nDerivative stack code:", file=out)
    _print_code(derivative, config.x, out)
    print(f"\nDerivative: {derivative}", file=out)
    if config.show_value:
        value = evaluate(derivative, config.x)
        print(f"\nValue at x = {format_number(config.x)}: "
              f"{format_number(value)}", file=out)
    return derivative


def run_repl(config, stdin=None, out=None):
    """Loop until a blank line or end of input."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    count = 0
    while True:
        print(f"\n\n{config.banner}", file=out)
        print(f"\n{config.prompt}", end="", file=out)
        out.flush()
        line = stdin.readline()
        if not line.strip():
            break
        process_line(line, config, out)
        count += 1
    logger.info("Session finished after %d expression(s)", count)
    print("\n\nDone.", file=out)
    return count
