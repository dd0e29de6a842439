import math

import pytest

from symdiff import (
    Mul, Symbol, Instruction, StackMachineError, evaluate, parse, run,
    stack_code
)
from symdiff.stack_code import OPERATOR, PUSH


def listing(expr, x=0.0):
    return [str(instruction) for instruction in stack_code(expr, x)]


def test_binary_operator_code():
    assert listing(parse("1 + x"), 2) == [
        "Push 1", "Value of x is 2", "Operator +"]


def test_negation_code():
    assert listing(parse("-x")) == ["Value of x is 0", "Unary minus"]


def test_variable_value_is_threaded_through():
    assert listing(parse("x * x").derivative(), 3) == [
        "Value of x is 3", "Push 1", "Operator *",
        "Value of x is 3", "Push 1", "Operator *",
        "Operator +",
    ]


def test_shared_subtree_emitted_at_each_use():
    x = Symbol()
    assert listing(Mul(x, x), 1.5) == [
        "Value of x is 1.5", "Value of x is 1.5", "Operator *"]


@pytest.mark.parametrize("text", [
    "1 - 2 - 3",
    "(1 + x) / x",
    "-x * 2 + 1",
    "x * (x + 1) / (2 - x)",
])
@pytest.mark.parametrize("x", [-1.0, 0.5, 4.0])
def test_program_computes_tree_value(text, x):
    expr = parse(text)
    for tree in (expr, expr.derivative()):
        assert math.isclose(run(stack_code(tree, x)), evaluate(tree, x))


def test_division_by_zero_in_machine_is_nan():
    assert math.isnan(run(stack_code(parse("1 / x"), 0)))


@pytest.mark.parametrize("program", [
    [],
    [Instruction(OPERATOR, "+")],
    [Instruction(PUSH, 1.0), Instruction("negate"), Instruction(PUSH, 2.0)],
    [Instruction("negate")],
    [Instruction("jump")],
])
def test_bad_programs(program):
    with pytest.raises(StackMachineError):
        run(program)


def test_instruction_text():
    assert str(Instruction(PUSH, 2.5)) == "Push 2.5"
    assert str(Instruction(OPERATOR, "/")) == "Operator /"
    assert str(Instruction("negate")) == "Unary minus"
    assert str(Instruction("jump")) == "Unknown instruction 'jump'"
