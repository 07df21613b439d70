"""Application engine for tinylisp.

Centralizes what happens once a call head has been resolved to a value:
- special forms receive the unevaluated arguments and the environment;
- builtins receive the arguments evaluated left to right, and nothing else;
- lambda literals, lists shaped (lambda (params...) body), are applied by
  binding the evaluated arguments in a copy of the caller's environment.

Lambdas are data, not closures: the body sees the environment in effect at the
call site, which is what lets a label-bound function refer to itself.
"""

from __future__ import annotations

from typing import Optional

from tinylisp import Expr, EvaluatorFn
from tinylisp.errors import TinyLispArgumentMismatch, TinyLispNotExecutable
from tinylisp.types.atom import Atom
from tinylisp.types.environment import Environment, symbol_name
from tinylisp.types.expr import ExprList, Function, FunctionKind

LAMBDA = Atom("lambda")


def lambda_parts(value: Expr) -> Optional[tuple[ExprList, Expr]]:
    """Return (formals, body) if `value` is a lambda literal, else None."""
    if (
        isinstance(value, ExprList)
        and len(value) >= 3
        and value[0] == LAMBDA
        and isinstance(value[1], ExprList)
    ):
        return value[1], value[2]
    return None


def evaluate_arguments(
    tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn
) -> list[Expr]:
    # Left to right: a label in one argument is visible to the next.
    return [evaluate_fn(arg, env) for arg in tail]


def apply_lambda(
    formals: ExprList,
    body: Expr,
    args: list[Expr],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """Evaluate `body` in a copy of `caller_env` extended with the parameters.

    Formals and arguments are paired by the shorter of the two: surplus
    formals stay unbound and surplus arguments are dropped.
    """
    frame = caller_env.copy()
    for formal, value in zip(formals, args):
        name = symbol_name(formal)
        if name is None:
            raise TinyLispArgumentMismatch(f"lambda parameter {formal} is not a symbol")
        frame.define(name, value)
    return evaluate_fn(body, frame)


def apply(
    head: Expr,
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """Apply a resolved call head to the unevaluated `tail`.

    Raises TinyLispNotExecutable when `head` is neither a Function nor a
    lambda literal.
    """
    match head:
        case Function(kind=FunctionKind.SPECIAL_FORM):
            return head.fn(tail, env, evaluate_fn)
        case Function(kind=FunctionKind.BUILTIN):
            return head.fn(evaluate_arguments(tail, env, evaluate_fn))
        case ExprList():
            parts = lambda_parts(head)
            if parts is not None:
                formals, body = parts
                args = evaluate_arguments(tail, env, evaluate_fn)
                return apply_lambda(formals, body, args, env, evaluate_fn)

    raise TinyLispNotExecutable(f"'{head}' is not executable")
