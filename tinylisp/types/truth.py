from __future__ import annotations

from typing import NamedTuple

from tinylisp import Expr
from tinylisp.types.atom import Atom
from tinylisp.types.expr import ExprList


class Truth(NamedTuple):
    """The canonical true and false values of a dialect.

    Exactly one value is false; every other expression is truthy.
    """
    true: Expr
    false: Expr

    def coerce(self, flag: bool) -> Expr:
        return self.true if flag else self.false

    def is_false(self, value: Expr) -> bool:
        return value == self.false


# (T, nil): the boolean and numeric dialects
SYMBOLIC = Truth(Atom("T"), Atom("nil"))
# (T, ()): the empty list doubles as nil
EMPTY_LIST = Truth(Atom("T"), ExprList())
