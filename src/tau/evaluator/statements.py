# src/tau/evaluator/statements.py
from ..environment import Environment
from ..object import Function, Module, MapInstance, ReturnValue, EvaluationError
from .utils import is_error, debug_log, NIL, is_truthy, stringify


class StatementEvaluatorMixin:
    """Handles evaluation of statements, flow control, declarations and imports."""

    def eval_program(self, statements, env):
        debug_log("eval_program", f"Processing {len(statements)} statements")

        for i, stmt in enumerate(statements):
            res = self.eval_node(stmt, env)
            if is_error(res):
                debug_log("  Error encountered", f"statement {i + 1}: {res.message}")
                return res
        return NIL

    def execute_block(self, statements, env):
        """Run ``statements`` in ``env``.

        A ReturnValue or EvaluationError stops the block and is handed to the
        caller unchanged, so ``return`` passes through nested blocks and loops
        up to the function call that unwraps it.
        """
        for stmt in statements:
            res = self.eval_node(stmt, env)
            if isinstance(res, (ReturnValue, EvaluationError)):
                return res
        return NIL

    def eval_block_statement(self, block, env):
        return self.execute_block(block.statements, Environment(outer=env))

    # === VARIABLE & CONTROL FLOW ===

    def eval_let_statement(self, node, env):
        value = NIL
        if node.value is not None:
            value = self.eval_node(node.value, env)
            if is_error(value):
                return value

        env.define(node.name.literal, value)
        return NIL

    def eval_if_statement(self, node, env):
        cond = self.eval_node(node.condition, env)
        if is_error(cond):
            return cond

        if is_truthy(cond):
            return self.eval_node(node.consequence, env)
        if node.alternative is not None:
            return self.eval_node(node.alternative, env)
        return NIL

    def eval_while_statement(self, node, env):
        while True:
            cond = self.eval_node(node.condition, env)
            if is_error(cond):
                return cond
            if not is_truthy(cond):
                break

            result = self.eval_node(node.body, env)
            if isinstance(result, (ReturnValue, EvaluationError)):
                return result

        return NIL

    def eval_return_statement(self, node, env):
        val = NIL
        if node.return_value is not None:
            val = self.eval_node(node.return_value, env)
            if is_error(val):
                return val
        return ReturnValue(val)

    def eval_debug_statement(self, node, env):
        value = self.eval_node(node.value, env)
        if is_error(value):
            return value
        print(stringify(value))
        return NIL

    # === DECLARATIONS ===

    def eval_function_statement(self, node, env):
        function = Function(node.name.literal, node.function, env)
        env.define(node.name.literal, function)
        return NIL

    def eval_module_statement(self, node, env):
        name = node.name.literal
        env.define(name, NIL)

        # Methods close over the declaring frame; there is no implicit receiver
        methods = {}
        for method in node.methods:
            methods[method.name.literal] = Function(method.name.literal, method.function, env)

        env.define(name, Module(name, methods))
        return NIL

    def eval_map_statement(self, node, env):
        name = node.name.literal
        env.define(name, NIL)

        # Members are stored unevaluated and evaluated again on every read
        values = {}
        for map_value in node.values:
            values[map_value.name.literal] = map_value

        env.define(name, MapInstance(name, values))
        return NIL

    # === IMPORTS ===

    def eval_import_statement(self, node, env):
        # Imported declarations always land in the global frame
        self.module_loader.load(node.file_path, line=node.keyword.line)
        return NIL
