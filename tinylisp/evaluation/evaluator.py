"""Core evaluator for the tinylisp interpreter.

Direct recursion, one Python frame per nested sub-expression: there is no
trampoline, so deep user recursion ends in RecursionError.
"""

from __future__ import annotations

import logging

from tinylisp import Expr
from tinylisp.config import apply_trace
from tinylisp.errors import TinyLispLiteralError, TinyLispUndefinedSymbol
from tinylisp.types.atom import Atom
from tinylisp.types.environment import Environment, symbol_name
from tinylisp.types.expr import ExprList, Function
from tinylisp.evaluation.apply import apply

logger = logging.getLogger(__name__)
apply_trace(logger)


def evaluate(expr: Expr, env: Environment) -> Expr:
    """
    Evaluate `expr` in `env`, which special forms such as label may mutate.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("eval %s", expr)

    match expr:
        case Atom():
            # Bound symbols yield their value; everything else is self-evaluating.
            name = symbol_name(expr)
            if name is not None:
                value = env.lookup(name)
                if value is not None:
                    return value
            return expr

        case ExprList(is_empty=True):
            return expr

        case ExprList():
            return evaluate_call(expr, env)

        case Function():
            return expr

    raise TinyLispLiteralError(f"Cannot evaluate non-expression {expr!r}")


def evaluate_call(expr: ExprList, env: Environment) -> Expr:
    head, tail = expr.head, expr.rest

    name = symbol_name(head)
    if name is not None:
        # --- Special forms take precedence over any binding of the same name ---
        form = env.special_form(name)
        if form is not None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("special form %s", name)
            return form.fn(tail, env, evaluate)
        resolved = env.lookup(name)
        if resolved is None:
            raise TinyLispUndefinedSymbol(f"Undefined symbol: {name}")
    else:
        resolved = evaluate(head, env)

    return apply(resolved, tail, env, evaluate)
