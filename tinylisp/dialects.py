"""Dialect composition.

A dialect is an environment pre-populated by merging registry tables in a
fixed order: the base table first, then each extension. Merging keeps the
first binding of a name, so an extension can add vocabulary but never replace
what an earlier table defined. New dialects are made by writing a new table
and extending a builder with it; the evaluator does not change.

A table is either a plain ``name -> Expr`` mapping or a callable taking the
dialect's Truth and returning such a mapping (for tables whose entries produce
canonical true/false).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Mapping, Union

from tinylisp import Expr
from tinylisp.errors import TinyLispError
from tinylisp.types.atom import AtomVocabulary, TEXT as TEXT_ATOMS, NUMERIC as NUMERIC_ATOMS
from tinylisp.types.environment import Environment
from tinylisp.types.expr import Function
from tinylisp.types.truth import Truth, SYMBOLIC
from tinylisp.evaluation.special_forms import quote_form, label_form, make_if_form
from tinylisp.builtin import list_builtin, predicate_builtin, numeric_builtin

logger = logging.getLogger(__name__)

Table = Union[Mapping[str, Expr], Callable[[Truth], Mapping[str, Expr]]]


# -------------------------------
# Tables
# -------------------------------
def base_table(truth: Truth) -> dict[str, Expr]:
    return {
        'quote': Function.special_form('quote', quote_form),
        'label': Function.special_form('label', label_form),
        'car': Function.builtin('car', list_builtin.car),
        'cdr': Function.builtin('cdr', list_builtin.cdr),
        'cons': Function.builtin('cons', list_builtin.cons),
    }


def boolean_table(truth: Truth) -> dict[str, Expr]:
    return {
        'if': Function.special_form('if', make_if_form(truth)),
        'eq': Function.builtin('eq', partial(predicate_builtin.eq, truth)),
        'atom': Function.builtin('atom', partial(predicate_builtin.atom, truth)),
    }


def numeric_table(truth: Truth) -> dict[str, Expr]:
    return {
        '<': Function.builtin('<', partial(numeric_builtin.lt, truth)),
        '+': Function.builtin('+', numeric_builtin.add),
        '-': Function.builtin('-', numeric_builtin.sub),
        '*': Function.builtin('*', numeric_builtin.mul),
        '/': Function.builtin('/', numeric_builtin.div),
    }


def resolve_table(table: Table, truth: Truth) -> Mapping[str, Expr]:
    if callable(table):
        return table(truth)
    return table


# -------------------------------
# Composition
# -------------------------------
@dataclass(frozen=True)
class Dialect:
    """A concrete interpreter configuration."""

    name: str
    vocabulary: AtomVocabulary
    truth: Truth
    tables: tuple[Table, ...]

    def new_environment(self) -> Environment:
        """Merge the tables, in order, into a fresh environment."""
        env = Environment()
        for table in self.tables:
            env.merge(resolve_table(table, self.truth), keep_existing=True)
        logger.debug("built dialect %s with %d bindings", self.name, len(env))
        return env


class DialectBuilder:
    """Start from the base table and apply ordered, first-writer-wins extensions."""

    def __init__(
        self,
        name: str = "custom",
        vocabulary: AtomVocabulary = TEXT_ATOMS,
        truth: Truth = SYMBOLIC,
    ):
        self.name = name
        self.vocabulary = vocabulary
        self.truth = truth
        self._tables: list[Table] = [base_table]

    def extend(self, table: Table) -> DialectBuilder:
        self._tables.append(table)
        return self

    def build(self) -> Dialect:
        return Dialect(self.name, self.vocabulary, self.truth, tuple(self._tables))


MINIMAL = DialectBuilder("minimal").build()
BOOLEAN = DialectBuilder("boolean").extend(boolean_table).build()
NUMERIC = (
    DialectBuilder("numeric", vocabulary=NUMERIC_ATOMS)
    .extend(boolean_table)
    .extend(numeric_table)
    .build()
)

DIALECTS: dict[str, Dialect] = {
    MINIMAL.name: MINIMAL,
    BOOLEAN.name: BOOLEAN,
    NUMERIC.name: NUMERIC,
}


def get_dialect(name: str) -> Dialect:
    try:
        return DIALECTS[name]
    except KeyError:
        raise TinyLispError(
            f"Unknown dialect '{name}', expected one of {', '.join(sorted(DIALECTS))}"
        ) from None
