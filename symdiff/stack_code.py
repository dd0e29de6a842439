"""Stack-machine code for expression trees, and a machine to run it."""
from dataclasses import dataclass
from functools import singledispatch
import operator

from .exceptions import StackMachineError
from .expressions import (
    Add, Sub, Mul, Div, Neg, Number, Symbol,
    divide, format_number, postvisitor
)

PUSH = "push"
LOAD = "load"
OPERATOR = "operator"
NEGATE = "negate"

OPERATIONS = {
    Add.symbol: operator.add,
    Sub.symbol: operator.sub,
    Mul.symbol: operator.mul,
    Div.symbol: divide,
}


@dataclass(frozen=True)
class Instruction:
    """One step of a stack program.

    ``argument`` is the pushed number for ``push``, the variable's value for
    ``load``, the operator symbol for ``operator`` and unused for ``negate``.
    """

    kind: str
    argument: object = None

    def __str__(self):
        if self.kind == PUSH:
            return f"Push {format_number(self.argument)}"
        if self.kind == LOAD:
            return f"Value of x is {format_number(self.argument)}"
        if self.kind == OPERATOR:
            return f"Operator {self.argument}"
        if self.kind == NEGATE:
            return "Unary minus"
        return f"Unknown instruction {self.kind!r}"


@singledispatch
def _emit(expr, *o, x):
    raise NotImplementedError(
        f"Cannot generate code for a {type(expr).__name__}"
    )


@_emit.register(Number)
def _(expr, *, x):
    return [Instruction(PUSH, expr.value)]


@_emit.register(Symbol)
def _(expr, *, x):
    return [Instruction(LOAD, float(x))]


@_emit.register(Add)
@_emit.register(Sub)
@_emit.register(Mul)
@_emit.register(Div)
def _(expr, left, right, *, x):
    return left + right + [Instruction(OPERATOR, expr.symbol)]


@_emit.register(Neg)
def _(expr, operand, *, x):
    return operand + [Instruction(NEGATE)]


def stack_code(expr, x=0.0):
    """Return the post-order instruction list that evaluates ``expr``.

    The variable is announced with the value ``x`` it is bound to.
    """
    return postvisitor(expr, _emit, x=x)


def run(program):
    """Execute a stack program and return the single value it leaves."""
    stack = []
    for instruction in program:
        if instruction.kind in (PUSH, LOAD):
            stack.append(float(instruction.argument))
        elif instruction.kind == OPERATOR:
            if len(stack) < 2:
                raise StackMachineError(
                    f"Stack underflow at '{instruction}'")
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATIONS[instruction.argument](left, right))
        elif instruction.kind == NEGATE:
            if not stack:
                raise StackMachineError(
                    f"Stack underflow at '{instruction}'")
            stack.append(-stack.pop())
        else:
            raise StackMachineError(
                f"Unknown instruction kind {instruction.kind!r}")
    if len(stack) != 1:
        raise StackMachineError(
            f"Program left {len(stack)} values on the stack")
    return stack[0]
