"""
Expression Errors
=================

ParseError is raised while a style builds an expression node;
EvaluationError is raised by a single evaluation call. Both are
deterministic functions of their input.
"""


class ExpressionError(Exception):
    """Base class for expression failures."""
    pass


class ParseError(ExpressionError):
    """Raised when an expression argument array is rejected."""
    pass


class EvaluationError(ExpressionError):
    """Raised when an expression cannot be evaluated in a context."""
    pass
