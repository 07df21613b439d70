

class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""
    pass

class TinyLispArgumentMismatch(TinyLispError):
    """ Raised when a special form or builtin receives the wrong shape, arity or operand type"""
    pass

class TinyLispNotAList(TinyLispArgumentMismatch):
    """ Raised when a list-only builtin is applied to something that is not a list"""

class TinyLispUndefinedSymbol(TinyLispError):
    """ Raised when a call head names nothing bound in the environment"""

class TinyLispNotExecutable(TinyLispError):
    """ Raised when a call head resolves to a value that is neither callable nor a lambda"""

class TinyLispLiteralError(TinyLispError):
    """ Raised when a Python value cannot be converted into an expression"""
