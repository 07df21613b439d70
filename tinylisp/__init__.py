# Core type aliases for the tinylisp data model.
# Expressions are built from three concrete types (see tinylisp.types):
# Atom (leaf), ExprList (ordered sequence) and Function (host callable).
#
# Naming guidance:
# - Expr:        any of the three, used everywhere code-as-data is handled.
# - PyLiteral:   plain Python values (str, int, nested lists) accepted by the
#                embedding surface and converted with tinylisp.types.expr.to_expr.

from typing import Any, Callable

Expr = Any
PyLiteral = Any

# Evaluator function type: passed to special forms so they control evaluation
EvaluatorFn = Callable[..., Expr]
