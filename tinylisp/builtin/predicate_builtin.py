from __future__ import annotations

from tinylisp import Expr
from tinylisp.builtin import expect_arity
from tinylisp.types.atom import Atom
from tinylisp.types.truth import Truth


# -------------------------------
# Equality and basic predicates
# -------------------------------
def eq(truth: Truth, args: list[Expr]) -> Expr:
    """Structural equality: atoms by value, lists element-wise."""
    expect_arity("eq", args, 2)
    a, b = args
    return truth.coerce(a == b)


def atom(truth: Truth, args: list[Expr]) -> Expr:
    expect_arity("atom", args, 1)
    return truth.coerce(isinstance(args[0], Atom))
