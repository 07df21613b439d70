from tinylisp import EvaluatorFn
from tinylisp import Expr
from tinylisp.errors import TinyLispArgumentMismatch
from tinylisp.types.environment import Environment
from tinylisp.types.truth import Truth


def make_if_form(truth: Truth):
    """Build the `if` special form for a dialect's canonical false value."""

    def if_form(
        tail: list[Expr],
        env: Environment,
        evaluate_fn: EvaluatorFn,
    ) -> Expr:
        if len(tail) not in (2, 3):
            raise TinyLispArgumentMismatch("if requires a condition, a then-expression and an optional else-expression")

        cond = evaluate_fn(tail[0], env)
        # Only the selected branch is ever evaluated
        if not truth.is_false(cond):
            return evaluate_fn(tail[1], env)
        elif len(tail) > 2:
            return evaluate_fn(tail[2], env)
        else:
            return truth.false

    return if_form
