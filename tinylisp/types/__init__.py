from tinylisp.types.atom import Atom, AtomVocabulary, NumericVocabulary, TEXT, NUMERIC
from tinylisp.types.expr import ExprList, Function, FunctionKind, to_expr
from tinylisp.types.truth import Truth, SYMBOLIC, EMPTY_LIST
from tinylisp.types.environment import Environment
