"""Special forms for the tinylisp evaluator.

Each form is called as ``form(tail, env, evaluate_fn)`` with the unevaluated
argument list. The dialect tables wrap them in Function objects; the evaluator
consults an environment's form table before ordinary lookup.
"""

from tinylisp.evaluation.special_forms.quote_form import quote_form
from tinylisp.evaluation.special_forms.label_form import label_form
from tinylisp.evaluation.special_forms.if_form import make_if_form

__all__ = ["quote_form", "label_form", "make_if_form"]
