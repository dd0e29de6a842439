"""Symbolic differentiation of expressions in x."""
from .expressions import (
    Expression,
    Operator,
    Terminal,
    Number,
    Symbol,
    Add,
    Sub,
    Mul,
    Div,
    Neg,
    postvisitor,
    evaluate,
    differentiate,
    render,
)
from .exceptions import ParseFailure, StackMachineError
from .parser import Parser, parse
from .stack_code import Instruction, stack_code, run

__all__ = [
    'Expression',
    'Operator',
    'Terminal',
    'Number',
    'Symbol',
    'Add',
    'Sub',
    'Mul',
    'Div',
    'Neg',
    'postvisitor',
    'evaluate',
    'differentiate',
    'render',
    'ParseFailure',
    'StackMachineError',
    'Parser',
    'parse',
    'Instruction',
    'stack_code',
    'run',
]
