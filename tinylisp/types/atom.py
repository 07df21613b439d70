"""Atoms and atom vocabularies.

An Atom is an indivisible leaf holding either symbol text or an integer. Which
values a dialect admits, and how they convert to and from text, is decided by
its AtomVocabulary; the evaluator itself never inspects atom values beyond
equality and name lookup.
"""

from __future__ import annotations
import re
import sys

from tinylisp.errors import TinyLispLiteralError


class Atom:
    __slots__ = ("value",)

    def __init__(self, value: str | int):
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise TinyLispLiteralError(f"Cannot build an atom from {value!r}")
        # Intern symbol text for fast equality/hash
        self.value = sys.intern(str(value)) if isinstance(value, str) else value

    @property
    def is_symbol(self) -> bool:
        return isinstance(self.value, str)

    @property
    def is_number(self) -> bool:
        return isinstance(self.value, int)

    def __eq__(self, other: object) -> bool:
        # type() check keeps Atom("1") and Atom(1) apart
        return (
            isinstance(other, Atom)
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def __repr__(self):
        return f"Atom({self.value!r})"

    def __str__(self):
        return str(self.value)


class AtomVocabulary:
    """The set of values a dialect's atoms may hold, with text conversions."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def accepts(self, value: object) -> bool:
        return isinstance(value, str)

    def from_text(self, text: str) -> str | int:
        return text

    def to_text(self, value: str | int) -> str:
        return str(value)

    def atom(self, value: str | int) -> Atom:
        if not self.accepts(value):
            raise TinyLispLiteralError(
                f"{self.name} vocabulary does not accept {value!r}"
            )
        return Atom(value)

    def __repr__(self):
        return f"<AtomVocabulary {self.name}>"


class NumericVocabulary(AtomVocabulary):
    """Symbol text or integers; decimal digit strings read as integers."""

    __slots__ = ()

    _INTEGER = re.compile(r"[+-]?[0-9]+")

    def accepts(self, value: object) -> bool:
        if isinstance(value, bool):
            return False
        return isinstance(value, (str, int))

    def from_text(self, text: str) -> str | int:
        if self._INTEGER.fullmatch(text):
            return int(text)
        return text


TEXT = AtomVocabulary("text")
NUMERIC = NumericVocabulary("numeric")
