from __future__ import annotations

from tinylisp import Expr
from tinylisp.builtin import expect_arity
from tinylisp.errors import TinyLispArgumentMismatch, TinyLispNotAList
from tinylisp.types.expr import ExprList


def _expect_list(name: str, value: Expr) -> ExprList:
    if not isinstance(value, ExprList):
        raise TinyLispNotAList(f"{name} expects a list, got {value}")
    return value


# -------------------------------
# List operations
# -------------------------------
def car(args: list[Expr]) -> Expr:
    expect_arity("car", args, 1)
    lst = _expect_list("car", args[0])
    if lst.is_empty:
        raise TinyLispArgumentMismatch("car of the empty list")
    return lst.head


def cdr(args: list[Expr]) -> Expr:
    expect_arity("cdr", args, 1)
    lst = _expect_list("cdr", args[0])
    return ExprList(lst.items[1:])


def cons(args: list[Expr]) -> Expr:
    expect_arity("cons", args, 2)
    head, tail = args
    lst = _expect_list("cons", tail)
    return ExprList((head, *lst.items))
