# src/tau/evaluator/core.py
from .. import tau_ast
from ..environment import Environment
from ..error_reporter import TauRuntimeError, get_error_reporter
from ..object import EvaluationError
from .utils import is_error, debug_log, NIL
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    def __init__(self, reporter=None, argv=None):
        self.reporter = reporter or get_error_reporter()
        self.globals = Environment()
        # Binding distances from the resolver, keyed by expression node identity
        self.locals = {}
        self.argv = list(argv) if argv is not None else []

        from ..module_loader import ModuleLoader
        self.module_loader = ModuleLoader(self)

        # Installs IO, System and File into the global frame
        FunctionEvaluatorMixin.__init__(self)

    def resolve(self, expr, depth):
        self.locals[expr] = depth

    def interpret(self, statements, env=None, filename=None):
        """Run top-level statements until the end or the first runtime error.

        The error, if any, is reported once and returned.
        """
        env = env if env is not None else self.globals
        try:
            result = self.eval_program(statements, env)
        except RecursionError:
            result = EvaluationError("Stack overflow.")

        if is_error(result):
            self.reporter.report(TauRuntimeError(result.message, line=result.line, filename=filename))
            return result
        return None

    def eval_node(self, node, env):
        if node is None:
            return NIL

        node_type = type(node)

        # === STATEMENTS ===
        if node_type == tau_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == tau_ast.LetStatement:
            return self.eval_let_statement(node, env)

        elif node_type == tau_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == tau_ast.IfStatement:
            return self.eval_if_statement(node, env)

        elif node_type == tau_ast.WhileStatement:
            return self.eval_while_statement(node, env)

        elif node_type == tau_ast.FunctionStatement:
            debug_log("  FunctionStatement node", node.name.literal)
            return self.eval_function_statement(node, env)

        elif node_type == tau_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        elif node_type == tau_ast.DebugStatement:
            return self.eval_debug_statement(node, env)

        elif node_type == tau_ast.ModuleStatement:
            debug_log("  ModuleStatement node", node.name.literal)
            return self.eval_module_statement(node, env)

        elif node_type == tau_ast.MapStatement:
            debug_log("  MapStatement node", node.name.literal)
            return self.eval_map_statement(node, env)

        elif node_type == tau_ast.MapValue:
            return NIL

        elif node_type == tau_ast.ImportStatement:
            debug_log("  ImportStatement node", node.file_path)
            return self.eval_import_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == tau_ast.Literal:
            return self.eval_literal(node)

        elif node_type == tau_ast.Variable:
            return self.eval_variable(node, env)

        elif node_type == tau_ast.Assign:
            return self.eval_assign(node, env)

        elif node_type == tau_ast.Set:
            return self.eval_set(node, env)

        elif node_type == tau_ast.Binary:
            return self.eval_binary_expression(node, env)

        elif node_type == tau_ast.Logical:
            return self.eval_logical_expression(node, env)

        elif node_type == tau_ast.Unary:
            return self.eval_unary_expression(node, env)

        elif node_type == tau_ast.Grouping:
            return self.eval_node(node.expression, env)

        elif node_type == tau_ast.Call:
            return self.eval_call_expression(node, env)

        elif node_type == tau_ast.Get:
            return self.eval_get_expression(node, env)

        elif node_type == tau_ast.ArrayLiteral:
            return self.eval_array_literal(node, env)

        elif node_type == tau_ast.FunctionLiteral:
            return self.eval_function_literal(node, env)

        debug_log("  Unknown node type", node_type)
        return EvaluationError(f"Unknown node type: {node_type.__name__}")


# Global Entry Point
def evaluate(program, evaluator=None):
    """Evaluate an already resolved program; returns the runtime error or None."""
    evaluator = evaluator or Evaluator()
    statements = program.statements if isinstance(program, tau_ast.Program) else program
    return evaluator.interpret(statements)
