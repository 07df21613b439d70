from __future__ import annotations

import operator
from typing import Callable

from tinylisp import Expr
from tinylisp.errors import TinyLispArgumentMismatch
from tinylisp.builtin import expect_arity
from tinylisp.types.atom import Atom
from tinylisp.types.truth import Truth


def _operands(name: str, args: list[Expr]) -> tuple[int, int]:
    expect_arity(name, args, 2)
    lhs, rhs = args
    if not (isinstance(lhs, Atom) and lhs.is_number and isinstance(rhs, Atom) and rhs.is_number):
        raise TinyLispArgumentMismatch(f"{name}: arguments must be numbers, got {lhs} and {rhs}")
    return lhs.value, rhs.value


def _truncating_div(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise TinyLispArgumentMismatch("/: division by zero")
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


# -------------------------------
# Comparison
# -------------------------------
def lt(truth: Truth, args: list[Expr]) -> Expr:
    lhs, rhs = _operands("<", args)
    return truth.coerce(lhs < rhs)


# -------------------------------
# Arithmetic
# -------------------------------
def arithmetic_op(name: str, operation: Callable[[int, int], int]) -> Callable[[list[Expr]], Expr]:
    def builtin(args: list[Expr]) -> Expr:
        lhs, rhs = _operands(name, args)
        return Atom(operation(lhs, rhs))

    return builtin


add = arithmetic_op("+", operator.add)
sub = arithmetic_op("-", operator.sub)
mul = arithmetic_op("*", operator.mul)
div = arithmetic_op("/", _truncating_div)
