import sys
from typing import Optional, TextIO

from tinylisp import Expr
from tinylisp.types.atom import Atom
from tinylisp.types.expr import ExprList, Function, FunctionKind

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_NUMBER = "\033[93m"
COLOR_BUILTIN = "\033[95m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_LAMBDA = "\033[92m"

ELIDED = "(...)"


# ----------------- Colorize utility -----------------
def colorize(obj: Expr) -> str:
    if isinstance(obj, Atom):
        color = COLOR_NUMBER if obj.is_number else COLOR_SYMBOL
        if obj == Atom("lambda"):
            color = COLOR_LAMBDA
        return f"{color}{obj}{RESET}"
    if isinstance(obj, Function):
        color = COLOR_SPECIAL_FORM if obj.kind is FunctionKind.SPECIAL_FORM else COLOR_BUILTIN
        return f"{color}{obj}{RESET}"
    return str(obj)


# ----------------- Pretty printer -----------------
def pformat(expr: Expr, color: bool = False, max_depth: Optional[int] = None) -> str:
    """Canonical text of `expr`, optionally ANSI-coloured.

    Lists nested deeper than `max_depth` are elided as ``(...)``. The output is
    for tracing only: atoms are written as-is, without escaping.
    """

    def fmt(obj: Expr, depth: int) -> str:
        if isinstance(obj, ExprList):
            if max_depth is not None and depth >= max_depth:
                return ELIDED
            return "(" + " ".join(fmt(item, depth + 1) for item in obj) + ")"
        return colorize(obj) if color else str(obj)

    return fmt(expr, 0)


def pprint(
    expr: Expr,
    stream: Optional[TextIO] = None,
    color: bool = False,
    max_depth: Optional[int] = None,
) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(pformat(expr, color=color, max_depth=max_depth))
    out.write("\n")
