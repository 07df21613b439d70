"""Runtime environment for tinylisp.

The Environment maps symbol names to expressions. One instance serves as the
dialect's symbol table (builtins and special forms live alongside ordinary
variables) and copies of it serve as lambda call frames. Environments only
grow: `label` and parameter binding define names, nothing removes them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from tinylisp import Expr
from tinylisp.errors import TinyLispArgumentMismatch
from tinylisp.types.atom import Atom
from tinylisp.types.expr import Function, FunctionKind


def symbol_name(expr: Expr) -> Optional[str]:
    """Return the name of a symbol atom, or None for anything else."""
    if isinstance(expr, Atom) and expr.is_symbol:
        return expr.value
    return None


class Environment:
    """Flat mapping from names to expressions with a protected special-form table."""

    __slots__ = ("vars", "forms")

    def __init__(self, bindings: Mapping[str, Expr] | None = None):
        self.vars: dict[str, Expr] = {}
        # Special forms installed through merge(); define() never touches this,
        # so user bindings cannot shadow a form in call-head position.
        self.forms: dict[str, Function] = {}
        if bindings:
            self.merge(bindings)

    def lookup(self, name: str) -> Optional[Expr]:
        """Return the value bound to `name`, or None when unbound."""
        return self.vars.get(name)

    def define(self, name: str, value: Expr) -> None:
        """Bind `name` to `value` in this frame, replacing any earlier binding.

        Raises TinyLispArgumentMismatch if `name` is not a string.
        """
        if not isinstance(name, str):
            raise TinyLispArgumentMismatch(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def special_form(self, name: str) -> Optional[Function]:
        return self.forms.get(name)

    def merge(
        self,
        other: Environment | Mapping[str, Expr],
        keep_existing: bool = True,
    ) -> None:
        """Copy bindings from `other` into this environment.

        With keep_existing (the default) the first writer wins: names already
        bound here are left untouched. Special forms carried by `other` are
        recorded in the protected form table under the same policy; an
        overwritten name drops any form it previously held.
        """
        items = other.vars.items() if isinstance(other, Environment) else other.items()
        for name, value in items:
            if not isinstance(name, str):
                raise TinyLispArgumentMismatch(f"Cannot define {name!r} as a symbol")
            if keep_existing and name in self.vars:
                continue
            self.vars[name] = value
            # Keep the form table in step with the binding it mirrors
            if isinstance(value, Function) and value.kind is FunctionKind.SPECIAL_FORM:
                self.forms[name] = value
            else:
                self.forms.pop(name, None)

    def copy(self) -> Environment:
        """Return a new frame holding the same bindings and forms."""
        frame = Environment()
        frame.vars = dict(self.vars)
        frame.forms = dict(self.forms)
        return frame

    def names(self) -> list[str]:
        return sorted(self.vars)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
