from tinylisp import EvaluatorFn
from tinylisp import Expr
from tinylisp.errors import TinyLispArgumentMismatch
from tinylisp.types.environment import Environment, symbol_name


def label_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """
    (label name value)
    Binds into the environment handed to this call, so the name stays visible
    to everything evaluated afterwards against that environment, and returns
    the bound value.
    """
    if len(tail) != 2:
        raise TinyLispArgumentMismatch("label requires exactly 2 arguments: (label name value)")

    name_expr, val_expr = tail
    name = symbol_name(name_expr)
    if name is None:
        raise TinyLispArgumentMismatch(f"label first argument must be a symbol, got {name_expr}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
