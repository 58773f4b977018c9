"""Tau: a small dynamically typed scripting language."""

__version__ = "0.3.0"

from .runner import Runner, compile_source
from .evaluator import Evaluator, evaluate
from .error_reporter import (
    TauError, TauSyntaxError, ScopeError, TauRuntimeError, ImportFailure,
    ErrorReporter, get_error_reporter, set_error_reporter,
)

__all__ = [
    'Runner', 'compile_source', 'Evaluator', 'evaluate',
    'TauError', 'TauSyntaxError', 'ScopeError', 'TauRuntimeError', 'ImportFailure',
    'ErrorReporter', 'get_error_reporter', 'set_error_reporter',
]
