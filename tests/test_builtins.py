import pytest

from tinylisp import errors
from tinylisp.types.atom import Atom
from tinylisp.types.expr import ExprList


# -----------------------------------------------------
# car / cdr / cons
# -----------------------------------------------------

def test_car(lisp):
    assert lisp.eval(["car", ["quote", ["1", "2"]]]) == Atom("1")


def test_car_of_nested_list(lisp):
    assert lisp.eval(["car", ["quote", [["a"], "b"]]]) == lisp.expr(["a"])


def test_car_of_empty_list(lisp):
    with pytest.raises(errors.TinyLispArgumentMismatch):
        lisp.eval(["car", ["quote", []]])


def test_cdr(lisp):
    assert lisp.eval(["cdr", ["quote", ["1", "2"]]]) == lisp.expr(["2"])


@pytest.mark.parametrize("items", [[], ["1"]])
def test_cdr_of_short_list_is_empty(lisp, items):
    assert lisp.eval(["cdr", ["quote", items]]) == ExprList()


def test_cons(lisp):
    assert lisp.eval(["cons", "1", ["quote", ["2", "3"]]]) == lisp.expr(["1", "2", "3"])


def test_cons_onto_empty_list(lisp):
    assert lisp.eval(["cons", "1", ["quote", []]]) == lisp.expr(["1"])


def test_cons_list_element(lisp):
    assert lisp.eval(["cons", ["quote", ["a"]], ["quote", ["b"]]]) == lisp.expr([["a"], "b"])


@pytest.mark.parametrize(
    "expr",
    [
        ["car", "x"],
        ["cdr", "x"],
        ["cons", "1", "x"],
    ],
)
def test_list_builtins_reject_atoms(lisp, expr):
    with pytest.raises(errors.TinyLispNotAList) as excinfo:
        lisp.eval(expr)
    assert isinstance(excinfo.value, errors.TinyLispArgumentMismatch)


@pytest.mark.parametrize(
    "expr",
    [
        ["car"],
        ["cdr", ["quote", ["1"]], ["quote", ["2"]]],
        ["cons", "1"],
        ["eq", "1"],
        ["atom"],
    ],
)
def test_builtin_arity(lisp, expr):
    with pytest.raises(errors.TinyLispArgumentMismatch):
        lisp.eval(expr)


# -----------------------------------------------------
# eq / atom
# -----------------------------------------------------

def test_eq_atoms(lisp):
    lisp.eval(["label", "a", "42"])
    assert lisp.eval(["eq", "42", "a"]) == lisp.true
    assert lisp.eval(["eq", "43", "a"]) == lisp.false


def test_eq_is_structural(lisp):
    assert lisp.eval(["eq", "1", "2"]) == lisp.false
    assert lisp.eval(["eq", ["quote", ["1"]], ["quote", ["1"]]]) == lisp.true
    assert lisp.eval(["eq", "1", ["quote", ["1"]]]) == lisp.false


def test_eq_is_length_sensitive(lisp):
    assert lisp.eval(["eq", ["quote", ["1"]], ["quote", ["1", "1"]]]) == lisp.false


def test_eq_never_matches_functions(lisp):
    assert lisp.eval(["eq", "car", "car"]) == lisp.false


def test_is_atom(lisp):
    assert lisp.eval(["atom", ["quote", ["1", "2"]]]) == lisp.false
    assert lisp.eval(["atom", ["quote", "2"]]) == lisp.true
    assert lisp.eval(["atom", ["quote", []]]) == lisp.false


def test_atom_of_function(lisp):
    assert lisp.eval(["atom", "car"]) == lisp.false
