# src/tau/evaluator/expressions.py
import math

from ..tau_token import PLUS, MINUS, STAR, SLASH, BANG, EQ, NOT_EQ, LT, GT, LTE, GTE, OR
from ..object import (
    Number, String, Array, Function, ModuleInstance, MapInstance, NativeObject,
    EvaluationError
)
from .utils import is_error, debug_log, NIL, TRUE, FALSE, is_truthy, to_boolean, values_equal


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: literals, operators, variables, properties."""

    def eval_literal(self, node):
        value = node.value
        if value is None:
            return NIL
        if value is True:
            return TRUE
        if value is False:
            return FALSE
        if isinstance(value, float):
            return Number(value)
        return String(value)

    # === VARIABLES ===

    def eval_variable(self, node, env):
        return self.look_up_variable(node.name, node, env)

    def look_up_variable(self, name, node, env):
        distance = self.locals.get(node)
        if distance is not None:
            value = env.get_at(distance, name.literal)
        else:
            # Unresolved names are globals; intermediate frames are not searched
            value = self.globals.get(name.literal)

        if value is None:
            return EvaluationError(f"Undefined variable '{name.literal}'.", name.line)
        return value

    def eval_assign(self, node, env):
        value = self.eval_node(node.value, env)
        if is_error(value):
            return value

        # Writes walk the live frame chain by name, whatever distance the
        # resolver computed for reads of the same name.
        if not env.assign(node.name.literal, value):
            return EvaluationError(f"The variable '{node.name.literal}' doesn't exist.", node.name.line)
        return value

    def eval_set(self, node, env):
        target = self.eval_node(node.object, env)
        if is_error(target):
            return target

        if not isinstance(target, ModuleInstance):
            return EvaluationError("Only instances have fields.", node.name.line)

        value = self.eval_node(node.value, env)
        if is_error(value):
            return value
        return target.set(node.name.literal, value)

    # === OPERATORS ===

    def eval_unary_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        operator = node.operator.type
        if operator == MINUS:
            if not isinstance(right, Number):
                return EvaluationError("Operand must be a number.", node.operator.line)
            return Number(-right.value)
        if operator == BANG:
            return to_boolean(not is_truthy(right))

        return EvaluationError(f"Unknown operator: {node.operator.literal}", node.operator.line)

    def eval_binary_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        operator = node.operator.type
        line = node.operator.line

        if operator == EQ:
            return to_boolean(values_equal(left, right))
        if operator == NOT_EQ:
            return to_boolean(not values_equal(left, right))

        if operator == PLUS:
            if isinstance(left, Number) and isinstance(right, Number):
                return Number(left.value + right.value)
            if isinstance(left, String) and isinstance(right, String):
                return String(left.value + right.value)
            return EvaluationError("Operands must be two numbers or two strings.", line)

        if not (isinstance(left, Number) and isinstance(right, Number)):
            return EvaluationError("Operands must be numbers.", line)

        return self.eval_number_infix(operator, left.value, right.value, line)

    def eval_number_infix(self, operator, left_val, right_val, line):
        if operator == MINUS:
            return Number(left_val - right_val)
        elif operator == STAR:
            return Number(left_val * right_val)
        elif operator == SLASH:
            return Number(self._divide(left_val, right_val))
        elif operator == LT:
            return to_boolean(left_val < right_val)
        elif operator == GT:
            return to_boolean(left_val > right_val)
        elif operator == LTE:
            return to_boolean(left_val <= right_val)
        elif operator == GTE:
            return to_boolean(left_val >= right_val)

        return EvaluationError(f"Unknown number operator: {operator}", line)

    @staticmethod
    def _divide(left_val, right_val):
        # IEEE semantics: x/0 is +-Infinity, 0/0 is NaN
        if right_val == 0.0:
            if left_val == 0.0 or math.isnan(left_val):
                return math.nan
            return math.copysign(math.inf, left_val) * math.copysign(1.0, right_val)
        return left_val / right_val

    def eval_logical_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        # The deciding operand itself is the result, not a coerced boolean
        if node.operator.type == OR:
            if is_truthy(left):
                return left
        elif not is_truthy(left):
            return left

        return self.eval_node(node.right, env)

    # === PROPERTIES ===

    def eval_get_expression(self, node, env):
        target = self.eval_node(node.object, env)
        if is_error(target):
            return target

        name = node.name.literal

        if isinstance(target, ModuleInstance):
            value = target.get(name)
            if value is None:
                return EvaluationError(f"Undefined property '{name}'.", node.name.line)
            return value

        if isinstance(target, MapInstance):
            expression = target.get(name)
            if expression is None:
                return EvaluationError(f"Undefined property '{name}'.", node.name.line)
            debug_log("  Map member re-evaluated", f"{target.name}.{name}")
            return self.eval_node(expression, env)

        if isinstance(target, NativeObject):
            value = target.get_property(name)
            if is_error(value) and value.line is None:
                value.line = node.name.line
            return value

        return EvaluationError("Only instances have properties.", node.name.line)

    # === COMPOUND LITERALS ===

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if is_error(elements):
            return elements
        return Array(elements)

    def eval_function_literal(self, node, env):
        return Function(None, node, env)

    def eval_expressions(self, expressions, env):
        """Evaluate left to right; stop at the first error and return it."""
        results = []
        for expression in expressions:
            value = self.eval_node(expression, env)
            if is_error(value):
                return value
            results.append(value)
        return results
