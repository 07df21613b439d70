import pytest

from tinylisp.interpreter import Interpreter

# Core behaviour is shared by every dialect that has if/eq/atom. The `lisp`
# fixture runs each test against both:
# 1) the boolean dialect (text atoms only)       ["boolean"]
# 2) the numeric dialect (text + integer atoms)  ["numeric"]
# Tests that need one dialect in particular build their own Interpreter.


@pytest.fixture(params=["boolean", "numeric"])
def dialect_name(request):
    return request.param


@pytest.fixture
def lisp(dialect_name):
    return Interpreter(dialect_name)


@pytest.fixture
def numeric():
    return Interpreter("numeric")
