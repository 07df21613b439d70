import pytest

from tinylisp import errors
from tinylisp.interpreter import Interpreter
from tinylisp.types.atom import Atom, NUMERIC, TEXT
from tinylisp.types.expr import ExprList, Function, FunctionKind, to_expr


def _car(args):
    return args[0]


# -------------------------------
# Equality
# -------------------------------

def test_atom_equality_is_value_equality():
    assert Atom("a") == Atom("a")
    assert Atom(1) == Atom(1)
    assert Atom("a") != Atom("b")
    assert Atom("1") != Atom(1)


def test_atom_never_equals_list():
    assert Atom("a") != ExprList([Atom("a")])
    assert ExprList([Atom("a")]) != Atom("a")


def test_list_equality_is_elementwise():
    assert ExprList([Atom("a"), ExprList()]) == ExprList([Atom("a"), ExprList()])
    assert ExprList([Atom("a")]) != ExprList([Atom("a"), Atom("a")])
    assert ExprList() == ExprList()


def test_functions_never_equal():
    f = Function.builtin("car", _car)
    assert f != f
    assert not (f == f)
    assert ExprList([f]) != ExprList([f])
    assert f != Atom("car")


def test_atoms_and_lists_are_hashable():
    assert Atom("x") in {Atom("x")}
    assert ExprList([Atom("x")]) in {ExprList([Atom("x")])}


def test_atom_rejects_other_values():
    for value in (True, 1.5, None, [1]):
        with pytest.raises(errors.TinyLispLiteralError):
            Atom(value)


def test_list_accessors():
    lst = to_expr(["a", "b", "c"])
    assert lst.head == Atom("a")
    assert lst.rest == [Atom("b"), Atom("c")]
    assert len(lst) == 3
    assert lst[1] == Atom("b")
    assert list(lst) == [Atom("a"), Atom("b"), Atom("c")]
    assert ExprList().is_empty


def test_function_kinds():
    f = Function.special_form("quote", lambda tail, env, evaluate_fn: tail[0])
    assert f.kind is FunctionKind.SPECIAL_FORM
    assert Function.builtin("car", _car).kind is FunctionKind.BUILTIN


# -------------------------------
# Canonical printing
# -------------------------------

def test_canonical_text():
    assert str(to_expr(["a", ["b", 1], []])) == "(a (b 1) ())"
    assert str(Atom("abc")) == "abc"
    assert str(Atom(-3)) == "-3"
    assert str(Function.builtin("car", _car)) == "#<builtin car>"
    assert str(Function.special_form("if", _car)) == "#<special-form if>"


def test_repr():
    assert repr(Atom("a")) == "Atom('a')"
    assert repr(to_expr(["a"])) == "ExprList([Atom('a')])"


# -------------------------------
# Vocabularies and literals
# -------------------------------

@pytest.mark.parametrize(
    "text,expected",
    [("42", 42), ("-3", -3), ("+7", 7), ("abc", "abc"), ("4a", "4a"), ("-", "-")],
)
def test_numeric_from_text(text, expected):
    assert NUMERIC.from_text(text) == expected


def test_text_from_text():
    assert TEXT.from_text("42") == "42"


def test_vocabulary_round_trip_text():
    assert NUMERIC.to_text(NUMERIC.from_text("-12")) == "-12"
    assert TEXT.to_text(TEXT.from_text("abc")) == "abc"


def test_vocabulary_accepts():
    assert TEXT.accepts("a")
    assert not TEXT.accepts(1)
    assert NUMERIC.accepts(1)
    assert not NUMERIC.accepts(True)


def test_to_expr():
    assert to_expr(("a", [1])) == ExprList([Atom("a"), ExprList([Atom(1)])])
    atom = Atom("a")
    assert to_expr(atom) is atom


@pytest.mark.parametrize("value", [1.5, None, {"a": 1}, True])
def test_to_expr_rejects(value):
    with pytest.raises(errors.TinyLispLiteralError):
        to_expr(value)


def test_to_expr_text_vocabulary_rejects_numbers():
    with pytest.raises(errors.TinyLispLiteralError):
        to_expr(["a", 1], TEXT)


def test_interpreter_atom_reads_through_vocabulary():
    assert Interpreter("numeric").atom("42") == Atom(42)
    assert Interpreter("boolean").atom("42") == Atom("42")


@pytest.mark.parametrize("text", ["٤٢", "１２", "-٣"])
def test_numeric_from_text_reads_ascii_digits_only(text):
    assert NUMERIC.from_text(text) == text
    assert NUMERIC.to_text(NUMERIC.from_text(text)) == text
