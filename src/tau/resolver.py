# src/tau/resolver.py
"""
Static scope resolution for Tau programs.

The resolver walks a statement list once, before anything is evaluated, and

* records, for every local variable read, how many frames separate the read
  from the frame that declares the name (the "binding distance");
* reports scope errors: duplicate declarations in one scope, reading a
  local inside its own initializer, and ``return`` outside a function.

Names that are not found in any enclosing local scope are left unresolved;
the evaluator looks those up in the global frame at run time. The global
scope itself is never tracked, so redefining a global is allowed.

Map member expressions are deliberately not resolved. They are re-evaluated
against the live environment on every property read.
"""

import enum
import logging
from typing import Dict, List, Optional

from . import tau_ast
from .error_reporter import ErrorReporter, ScopeError, get_error_reporter

logger = logging.getLogger(__name__)


class FunctionType(enum.Enum):
    NONE = "none"
    FUNCTION = "function"
    METHOD = "method"


class Resolver:
    def __init__(self, evaluator, reporter: Optional[ErrorReporter] = None, filename: str = "<stdin>"):
        self.evaluator = evaluator
        self.reporter = reporter or get_error_reporter()
        self.filename = filename
        self.scopes: List[Dict[str, bool]] = []
        self.current_function = FunctionType.NONE
        self.errors: List[ScopeError] = []

        self._statement_handlers = {
            tau_ast.BlockStatement: self.resolve_block_statement,
            tau_ast.LetStatement: self.resolve_let_statement,
            tau_ast.FunctionStatement: self.resolve_function_statement,
            tau_ast.ExpressionStatement: self.resolve_expression_statement,
            tau_ast.DebugStatement: self.resolve_debug_statement,
            tau_ast.IfStatement: self.resolve_if_statement,
            tau_ast.WhileStatement: self.resolve_while_statement,
            tau_ast.ReturnStatement: self.resolve_return_statement,
            tau_ast.ModuleStatement: self.resolve_module_statement,
            tau_ast.MapStatement: self.resolve_map_statement,
            tau_ast.ImportStatement: self.resolve_import_statement,
        }
        self._expression_handlers = {
            tau_ast.Variable: self.resolve_variable,
            tau_ast.Assign: self.resolve_assign,
            tau_ast.Set: self.resolve_set,
            tau_ast.Binary: self.resolve_binary,
            tau_ast.Logical: self.resolve_binary,
            tau_ast.Unary: self.resolve_unary,
            tau_ast.Grouping: self.resolve_grouping,
            tau_ast.Call: self.resolve_call,
            tau_ast.Get: self.resolve_get,
            tau_ast.ArrayLiteral: self.resolve_array_literal,
            tau_ast.FunctionLiteral: self.resolve_function_literal,
            tau_ast.Literal: self.resolve_literal,
        }

    # ---- Entry points --------------------------------------------------------------

    def resolve(self, statements) -> List[ScopeError]:
        """Resolve a whole statement list and return the scope errors found."""
        if isinstance(statements, tau_ast.Program):
            statements = statements.statements
        for statement in statements:
            self.resolve_statement(statement)
        logger.debug("resolved %d statements, %d errors", len(statements), len(self.errors))
        return self.errors

    def resolve_statement(self, statement):
        handler = self._statement_handlers.get(type(statement))
        if handler is None:
            raise TypeError(f"Resolver cannot handle statement {type(statement).__name__}")
        handler(statement)

    def resolve_expression(self, expression):
        handler = self._expression_handlers.get(type(expression))
        if handler is None:
            raise TypeError(f"Resolver cannot handle expression {type(expression).__name__}")
        handler(expression)

    # ---- Statements ----------------------------------------------------------------

    def resolve_block_statement(self, stmt):
        self.begin_scope()
        self.resolve(stmt.statements)
        self.end_scope()

    def resolve_let_statement(self, stmt):
        self.declare(stmt.name)
        if stmt.value is not None:
            self.resolve_expression(stmt.value)
        self.define(stmt.name)

    def resolve_function_statement(self, stmt):
        # Defined before the body so the function can call itself
        self.declare(stmt.name)
        self.define(stmt.name)
        self.resolve_function(stmt.function, FunctionType.FUNCTION)

    def resolve_expression_statement(self, stmt):
        self.resolve_expression(stmt.expression)

    def resolve_debug_statement(self, stmt):
        self.resolve_expression(stmt.value)

    def resolve_if_statement(self, stmt):
        self.resolve_expression(stmt.condition)
        self.resolve_statement(stmt.consequence)
        if stmt.alternative is not None:
            self.resolve_statement(stmt.alternative)

    def resolve_while_statement(self, stmt):
        self.resolve_expression(stmt.condition)
        self.resolve_statement(stmt.body)

    def resolve_return_statement(self, stmt):
        if self.current_function is FunctionType.NONE:
            self._error(stmt.keyword, "Cannot return from top-level code, or outside of functions.")
        if stmt.return_value is not None:
            self.resolve_expression(stmt.return_value)

    def resolve_module_statement(self, stmt):
        self.declare(stmt.name)
        self.define(stmt.name)
        for method in stmt.methods:
            self.resolve_function(method.function, FunctionType.METHOD)

    def resolve_map_statement(self, stmt):
        # Member expressions are left alone on purpose: see module docstring.
        self.declare(stmt.name)
        self.define(stmt.name)

    def resolve_import_statement(self, stmt):
        # The imported file gets its own resolver pass when it is loaded.
        pass

    # ---- Expressions ---------------------------------------------------------------

    def resolve_variable(self, expr):
        if self.scopes and self.scopes[-1].get(expr.name.literal) is False:
            self._error(expr.name, "Cannot read local variable in its own initializer.")
        self.resolve_local(expr, expr.name)

    def resolve_assign(self, expr):
        # Assignment looks its target up by name at run time, so no distance
        # is recorded for it.
        self.resolve_expression(expr.value)

    def resolve_set(self, expr):
        self.resolve_expression(expr.value)
        self.resolve_expression(expr.object)

    def resolve_binary(self, expr):
        self.resolve_expression(expr.left)
        self.resolve_expression(expr.right)

    def resolve_unary(self, expr):
        self.resolve_expression(expr.right)

    def resolve_grouping(self, expr):
        self.resolve_expression(expr.expression)

    def resolve_call(self, expr):
        self.resolve_expression(expr.callee)
        for argument in expr.arguments:
            self.resolve_expression(argument)

    def resolve_get(self, expr):
        self.resolve_expression(expr.object)

    def resolve_array_literal(self, expr):
        for element in expr.elements:
            self.resolve_expression(element)

    def resolve_function_literal(self, expr):
        self.resolve_function(expr, FunctionType.FUNCTION)

    def resolve_literal(self, expr):
        pass

    # ---- Helpers -------------------------------------------------------------------

    def resolve_local(self, expr, name):
        for i in range(len(self.scopes) - 1, -1, -1):
            if name.literal in self.scopes[i]:
                self.evaluator.resolve(expr, len(self.scopes) - 1 - i)
                return
        # Not found: global, looked up by name at run time

    def resolve_function(self, function, function_type):
        enclosing_function = self.current_function
        self.current_function = function_type
        self.begin_scope()
        for param in function.parameters:
            self.declare(param)
            self.define(param)
        self.resolve(function.body)
        self.end_scope()
        self.current_function = enclosing_function

    def declare(self, name):
        if not self.scopes:
            return
        scope = self.scopes[-1]
        if name.literal in scope:
            self._error(name, "Variable with this name already declared in this current scope.")
        scope[name.literal] = False

    def define(self, name):
        if not self.scopes:
            return
        self.scopes[-1][name.literal] = True

    def begin_scope(self):
        self.scopes.append({})

    def end_scope(self):
        self.scopes.pop()

    def _error(self, token, message):
        error = self.reporter.report_error(
            ScopeError,
            message,
            line=token.line,
            column=token.column,
            filename=self.filename,
        )
        self.errors.append(error)
        return error
