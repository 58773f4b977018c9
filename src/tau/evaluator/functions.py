# src/tau/evaluator/functions.py
from ..object import Callable, EvaluationError
from ..stdlib import IOModule, SystemModule, make_file_builtin
from .utils import is_error, debug_log


class FunctionEvaluatorMixin:
    """Handles calls and installs the native globals."""

    def __init__(self):
        self.builtins = {
            "IO": IOModule(),
            "System": SystemModule(argv=self.argv),
            "File": make_file_builtin(),
        }
        for name, value in self.builtins.items():
            self.globals.define(name, value)

    def eval_call_expression(self, node, env):
        callee = self.eval_node(node.callee, env)
        if is_error(callee):
            return callee

        # All arguments are evaluated, left to right, before the callee is checked
        args = self.eval_expressions(node.arguments, env)
        if is_error(args):
            return args

        return self.apply_function(callee, args, node.paren)

    def apply_function(self, fn, args, paren):
        if not isinstance(fn, Callable):
            return EvaluationError("Can only call functions and classes.", paren.line)

        if len(args) != fn.arity():
            return EvaluationError(f"Expected {fn.arity()} arguments but got {len(args)}.", paren.line)

        debug_log("apply_function", f"Calling {fn.inspect()} with {len(args)} argument(s)")
        result = fn.call(self, args)
        if is_error(result) and result.line is None:
            result.line = paren.line
        return result
