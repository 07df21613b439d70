"""Lists, host functions and literal conversion.

Together with Atom these form the expression model:

    Expr = Atom | ExprList | Function

All three are immutable once built and may be shared freely. Lists hold their
elements in a tuple, so nesting never creates cycles.
"""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Callable, Iterator

from tinylisp import Expr, PyLiteral
from tinylisp.errors import TinyLispLiteralError
from tinylisp.types.atom import Atom, AtomVocabulary, NUMERIC


class ExprList:
    """An ordered, immutable sequence of expressions."""

    __slots__ = ("items",)

    def __init__(self, items=()):
        self.items: tuple[Expr, ...] = tuple(items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def head(self) -> Expr:
        return self.items[0]

    @property
    def rest(self) -> list[Expr]:
        return list(self.items[1:])

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Expr]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        # Compare with == per element: tuple equality would short-circuit on
        # identity and make a Function equal to itself.
        if not isinstance(other, ExprList) or len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self.items, other.items))

    def __hash__(self) -> int:
        return hash(("list", self.items))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(item) for item in self.items))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"ExprList({list(self.items)!r})"


class FunctionKind(Enum):
    SPECIAL_FORM = "special-form"
    BUILTIN = "builtin"


class Function:
    """A host callable bound in a dialect.

    SPECIAL_FORM callables are invoked as ``fn(args, env, evaluate_fn)`` with
    unevaluated arguments; BUILTIN callables as ``fn(args)`` with evaluated
    arguments and no access to the environment.
    """

    __slots__ = ("kind", "name", "fn")

    def __init__(self, kind: FunctionKind, name: str, fn: Callable[..., Expr]):
        self.kind = kind
        self.name = name
        self.fn = fn

    @classmethod
    def special_form(cls, name: str, fn: Callable[..., Expr]) -> Function:
        return cls(FunctionKind.SPECIAL_FORM, name, fn)

    @classmethod
    def builtin(cls, name: str, fn: Callable[..., Expr]) -> Function:
        return cls(FunctionKind.BUILTIN, name, fn)

    # Functions are opaque: never equal to anything, themselves included.
    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f"#<{self.kind.value} {self.name}>"

    def __repr__(self) -> str:
        return f"Function({self.kind.name}, {self.name!r})"


def to_expr(value: PyLiteral, vocabulary: AtomVocabulary = NUMERIC) -> Expr:
    """Convert a Python literal into an expression.

    str/int become atoms (validated by `vocabulary`), lists and tuples become
    ExprLists recursively, and existing expressions are returned unchanged.
    """
    if isinstance(value, (Atom, ExprList, Function)):
        return value
    if isinstance(value, (list, tuple)):
        return ExprList(to_expr(item, vocabulary) for item in value)
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return vocabulary.atom(value)
    raise TinyLispLiteralError(f"Cannot convert {value!r} to an expression")


NIL_LIST = ExprList()
