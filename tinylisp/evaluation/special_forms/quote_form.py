from tinylisp import EvaluatorFn
from tinylisp import Expr
from tinylisp.errors import TinyLispArgumentMismatch
from tinylisp.types.environment import Environment


def quote_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Expr:
    if len(tail) != 1:
        raise TinyLispArgumentMismatch("quote expects exactly 1 argument")
    return tail[0]
