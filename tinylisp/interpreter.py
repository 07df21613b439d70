from __future__ import annotations

import logging

from tinylisp import Expr, PyLiteral
from tinylisp.config import get_default_dialect
from tinylisp.dialects import Dialect, get_dialect
from tinylisp.errors import TinyLispError
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.types.atom import Atom
from tinylisp.types.environment import Environment
from tinylisp.types.expr import to_expr

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates pre-built expressions against one dialect environment.
    The environment persists across calls, so labels made by one call are
    visible to the next.
    """

    def __init__(self, dialect: Dialect | str | None = None):
        if dialect is None:
            dialect = get_default_dialect()
        if isinstance(dialect, str):
            dialect = get_dialect(dialect)
        self.dialect: Dialect = dialect
        self.env: Environment = dialect.new_environment()

    @property
    def true(self) -> Expr:
        return self.dialect.truth.true

    @property
    def false(self) -> Expr:
        return self.dialect.truth.false

    def atom(self, text: str) -> Atom:
        """Read `text` as an atom of this dialect's vocabulary."""
        vocabulary = self.dialect.vocabulary
        return vocabulary.atom(vocabulary.from_text(text))

    def expr(self, value: PyLiteral) -> Expr:
        return to_expr(value, self.dialect.vocabulary)

    def eval(self, expression: PyLiteral) -> Expr:
        """Evaluate `expression`, given as an Expr or as nested Python literals.

        Errors propagate as TinyLispError subclasses; labels made before the
        failure remain in the environment.
        """
        expr = self.expr(expression)
        try:
            return evaluate(expr, self.env)
        except TinyLispError as e:
            logger.debug("evaluation of %s failed: %s", expr, e)
            raise
