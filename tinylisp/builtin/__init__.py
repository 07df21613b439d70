"""Builtin functions: called with already-evaluated arguments, no environment."""

from __future__ import annotations

from tinylisp import Expr
from tinylisp.errors import TinyLispArgumentMismatch


def expect_arity(name: str, args: list[Expr], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise TinyLispArgumentMismatch(f"{name} requires exactly {n} {plural}, got {len(args)}")
