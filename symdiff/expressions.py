"""Expression trees in the single variable x, with symbolic differentiation."""
from functools import singledispatch
import math
import numbers


def format_number(value):
    """Return the text used to display a number in trees and stack code.

    Integral values are shown without a fractional part, so ``1.0`` displays
    as ``1``. Everything else uses the shortest round-tripping ``repr``.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def divide(numerator, denominator):
    """Divide two floats, giving nan rather than raising on a zero divisor."""
    if denominator == 0:
        return math.nan
    return numerator / denominator


class Expression:
    """Implement expressions."""

    def __init__(self, *operands):
        self.operands = operands

    def __add__(self, other):
        if not isinstance(other, Expression):
            other = Number(other)
        return Add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Expression):
            other = Number(other)
        return Sub(self, other)

    def __mul__(self, other):
        if not isinstance(other, Expression):
            other = Number(other)
        return Mul(self, other)

    def __truediv__(self, other):
        if not isinstance(other, Expression):
            other = Number(other)
        return Div(self, other)

    def __radd__(self, other):
        return Number(other).__add__(self)

    def __rsub__(self, other):
        return Number(other).__sub__(self)

    def __rmul__(self, other):
        return Number(other).__mul__(self)

    def __rtruediv__(self, other):
        return Number(other).__truediv__(self)

    def __neg__(self):
        return Neg(self)

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.operands == other.operands)

    def __hash__(self):
        return hash((type(self).__name__, self.operands))

    def __str__(self):
        return render(self)

    def __repr__(self):
        operands = ", ".join(repr(operand) for operand in self.operands)
        return f"{type(self).__name__}({operands})"

    def evaluate(self, x):
        """Return the numeric value of the expression at ``x``."""
        return evaluate(self, x)

    def derivative(self):
        """Return a new tree for the derivative with respect to x."""
        return differentiate(self)

    def render(self):
        """Return the fully parenthesised infix text of the expression."""
        return render(self)


class Operator(Expression):
    """Base class for all operator nodes."""

    symbol = None  # To be defined by subclasses
    arity = 2

    def __init__(self, *operands):
        if len(operands) != self.arity:
            raise ValueError(
                f"{type(self).__name__} takes {self.arity} operand(s), "
                f"got {len(operands)}"
            )
        for operand in operands:
            if not isinstance(operand, Expression):
                raise TypeError(f"Operand {operand!r} is not an Expression")
        super().__init__(*operands)

    @property
    def left(self):
        return self.operands[0]

    @property
    def right(self):
        return self.operands[-1]


class Terminal(Expression):
    """Base class for terminal nodes (values with no operands)."""

    def __init__(self, value):
        super().__init__()
        self.value = value

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        return f"{type(self).__name__}({repr(self.value)})"


class Number(Terminal):
    """Terminal node representing a real constant."""

    def __init__(self, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError("Number value must be a real number")
        super().__init__(float(value))


class Symbol(Terminal):
    """Terminal node for the free variable x."""

    def __init__(self, value="x"):
        if not isinstance(value, str) or value.lower() != "x":
            raise ValueError("The only supported variable is x")
        super().__init__("x")

    def __repr__(self):
        return "Symbol()"


class Add(Operator):
    symbol = '+'


class Sub(Operator):
    symbol = '-'


class Mul(Operator):
    symbol = '*'


class Div(Operator):
    symbol = '/'


class Neg(Operator):
    """Unary minus applied to a single operand."""

    symbol = '-'
    arity = 1

    @property
    def operand(self):
        return self.operands[0]


def postvisitor(expr, fn, **kwargs):
    '''Visit an Expression in postorder applying a function to every node.

    Parameters
    ----------
    expr: Expression
        The expression to be visited.
    fn: function(node, *o, **kwargs)
        A function to be applied at each node. The function should take the node
        to be visited as its first argument, and the results of visiting its
        operands as any further positional arguments. Any additional information
        that the visitor requires can be passed in as keyword arguments.
    **kwargs:
        Any additional keyword arguments to be passed to fn.

    Returns
    -------
    The result of applying fn to the expression and its visited operands.

    Subtrees shared between several parents are visited once; results are
    memoised by node identity.
    '''
    visited = {}

    stack = [(expr, False)]  # Stack items are tuples of (node, processed)

    while stack:
        node, processed = stack.pop()

        if processed:
            operand_results = tuple(visited[id(c)] for c in node.operands)
            visited[id(node)] = fn(node, *operand_results, **kwargs)
        elif id(node) not in visited:
            stack.append((node, True))
            # Reversed so operands are processed left-to-right.
            for child in reversed(node.operands):
                if id(child) not in visited:
                    stack.append((child, False))

    return visited[id(expr)]


# Evaluation

@singledispatch
def _evaluate_node(expr, *o, x):
    raise NotImplementedError(
        f"Cannot evaluate a {type(expr).__name__}"
    )


@_evaluate_node.register(Number)
def _(expr, *o, x):
    return expr.value


@_evaluate_node.register(Symbol)
def _(expr, *o, x):
    return float(x)


@_evaluate_node.register(Add)
def _(expr, left, right, *, x):
    return left + right


@_evaluate_node.register(Sub)
def _(expr, left, right, *, x):
    return left - right


@_evaluate_node.register(Mul)
def _(expr, left, right, *, x):
    return left * right


@_evaluate_node.register(Div)
def _(expr, left, right, *, x):
    return divide(left, right)


@_evaluate_node.register(Neg)
def _(expr, operand, *, x):
    return -operand


def evaluate(expr, x):
    """Evaluate an expression with the variable bound to ``x``."""
    return postvisitor(expr, _evaluate_node, x=x)


# Differentiation Functions
#
# Each rule receives the node and the derivatives of its operands. The
# product and quotient rules reuse the original operand subtrees, so the
# derivative tree shares nodes with the tree it was computed from.

@singledispatch
def _differentiate_node(expr, *o):
    raise NotImplementedError(
        f"Cannot differentiate a {type(expr).__name__}"
    )


@_differentiate_node.register(Number)
def _(expr):
    return Number(0)  # Derivative of a constant is 0


@_differentiate_node.register(Symbol)
def _(expr):
    return Number(1)


@_differentiate_node.register(Neg)
def _(expr, da):
    return Neg(da)


@_differentiate_node.register(Add)
def _(expr, da, db):
    return Add(da, db)


@_differentiate_node.register(Sub)
def _(expr, da, db):
    return Sub(da, db)


@_differentiate_node.register(Mul)
def _(expr, da, db):
    # (a * b)' = a * b' + b * a'
    a, b = expr.operands
    return Add(Mul(a, db), Mul(b, da))


@_differentiate_node.register(Div)
def _(expr, da, db):
    # (a / b)' = (b * a' - a * b') / (b * b)
    a, b = expr.operands
    return Div(Sub(Mul(b, da), Mul(a, db)), Mul(b, b))


def differentiate(expr):
    """Differentiate an expression with respect to x.

    No simplification is applied: ``0`` and ``1`` terms produced by the
    rules stay in the result.
    """
    return postvisitor(expr, _differentiate_node)


# Rendering

@singledispatch
def _render_node(expr, *o):
    raise NotImplementedError(
        f"Cannot render a {type(expr).__name__}"
    )


@_render_node.register(Number)
def _(expr):
    return format_number(expr.value)


@_render_node.register(Symbol)
def _(expr):
    return "X"


@_render_node.register(Operator)
def _(expr, *operands):
    return "( " + f" {expr.symbol} ".join(operands) + " )"


@_render_node.register(Neg)
def _(expr, operand):
    # Parenthesised so the text re-parses wherever it is nested.
    return f"( -{operand} )"


def render(expr):
    """Return the fully parenthesised infix text of an expression."""
    return postvisitor(expr, _render_node)
