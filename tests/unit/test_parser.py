"""Parser structure, precedence and error recovery."""

import pytest

from tau.parser import Parser
from tau.tau_ast import (
    Assign, Binary, Call, DebugStatement, ExpressionStatement, FunctionStatement,
    Get, Grouping, IfStatement, ImportStatement, LetStatement, Literal, Logical,
    MapStatement, ModuleStatement, ReturnStatement, Set, Unary, Variable,
    WhileStatement, BlockStatement, FunctionLiteral, ArrayLiteral,
)


def _parse(source, reporter):
    parser = Parser.from_source(source, reporter=reporter)
    program = parser.parse_program()
    return program, parser


def _expr(source, reporter):
    program, parser = _parse(source, reporter)
    assert parser.errors == []
    assert len(program.statements) == 1
    return program.statements[0].expression


def test_factor_binds_tighter_than_term(reporter):
    expr = _expr("1 + 2 * 3", reporter)
    assert isinstance(expr, Binary)
    assert expr.operator.literal == "+"
    assert isinstance(expr.right, Binary)
    assert expr.right.operator.literal == "*"


def test_binary_operators_are_left_associative(reporter):
    expr = _expr("1 - 2 - 3", reporter)
    assert isinstance(expr.left, Binary)
    assert expr.left.operator.literal == "-"
    assert expr.right.value == 3.0


def test_assignment_is_right_associative(reporter):
    expr = _expr("a = b = 1", reporter)
    assert isinstance(expr, Assign)
    assert expr.name.literal == "a"
    assert isinstance(expr.value, Assign)
    assert expr.value.name.literal == "b"


def test_property_assignment_becomes_set(reporter):
    expr = _expr("point.x = 3", reporter)
    assert isinstance(expr, Set)
    assert isinstance(expr.object, Variable)
    assert expr.name.literal == "x"


def test_logical_precedence(reporter):
    expr = _expr("a or b and c", reporter)
    assert isinstance(expr, Logical)
    assert expr.operator.literal == "or"
    assert isinstance(expr.right, Logical)


def test_call_and_get_chain(reporter):
    expr = _expr("IO.puts(1, 2)", reporter)
    assert isinstance(expr, Call)
    assert isinstance(expr.callee, Get)
    assert len(expr.arguments) == 2


def test_prefix_expressions(reporter):
    assert isinstance(_expr("-x", reporter), Unary)
    assert isinstance(_expr("(1)", reporter), Grouping)
    assert isinstance(_expr("[1, 2]", reporter), ArrayLiteral)
    assert _expr("@symbol", reporter).value == "symbol"
    assert _expr("none", reporter).value is None
    assert _expr("true", reporter).value is True


def test_function_literal(reporter):
    expr = _expr("def (a, b) do return a end", reporter)
    assert isinstance(expr, FunctionLiteral)
    assert [p.literal for p in expr.parameters] == ["a", "b"]
    assert isinstance(expr.body[0], ReturnStatement)


def test_declarations(reporter):
    source = """
    let x = 1
    let y
    def add(a, b) do
      return a + b
    end
    module Box do
      open() do return 1 end
      def close() do end
    end
    map Config do
      size: 10
      name: "tau"
    end
    """
    program, parser = _parse(source, reporter)
    assert parser.errors == []
    let_x, let_y, func, module, map_stmt = program.statements

    assert isinstance(let_x, LetStatement) and let_x.value.value == 1.0
    assert isinstance(let_y, LetStatement) and let_y.value is None
    assert isinstance(func, FunctionStatement) and func.name.literal == "add"
    assert isinstance(module, ModuleStatement)
    assert [m.name.literal for m in module.methods] == ["open", "close"]
    assert isinstance(map_stmt, MapStatement)
    assert [v.name.literal for v in map_stmt.values] == ["size", "name"]


def test_control_flow_statements(reporter):
    source = """
    if (x > 1) debug x else do debug 0 end
    while (x) x = x - 1
    import "lib.tau"
    """
    program, parser = _parse(source, reporter)
    assert parser.errors == []
    if_stmt, while_stmt, import_stmt = program.statements

    assert isinstance(if_stmt, IfStatement)
    assert isinstance(if_stmt.consequence, DebugStatement)
    assert isinstance(if_stmt.alternative, BlockStatement)
    assert isinstance(while_stmt, WhileStatement)
    assert isinstance(while_stmt.body, ExpressionStatement)
    assert isinstance(import_stmt, ImportStatement)
    assert import_stmt.file_path == "lib.tau"


def test_return_without_value_before_end(reporter):
    program, parser = _parse("def f() do return end", reporter)
    assert parser.errors == []
    assert program.statements[0].function.body[0].return_value is None


@pytest.mark.parametrize("source, message", [
    ("1 = 2", "Invalid assignment target."),
    ("import 42", "Cannot use non-strings in imports."),
    ("def f(a, b, c, d, e, f, g, h, i) do end", "Cannot have more than 8 parameters."),
    ("let = 1", "Expect variable name."),
    ("debug (1", "Expect ')' after grouping expression."),
])
def test_syntax_errors(reporter, source, message):
    _, parser = _parse(source, reporter)
    assert message in [e.message for e in parser.errors]
    assert reporter.had_error


def test_too_many_call_arguments(reporter):
    args = ", ".join(["1"] * 33)
    _, parser = _parse(f"f({args})", reporter)
    assert parser.errors[0].message == "Can't have more than 32 arguments on a call."


def test_recovers_at_next_statement(reporter):
    program, parser = _parse("let = 1\ndebug 2", reporter)
    assert len(parser.errors) == 1
    assert len(program.statements) == 1
    assert isinstance(program.statements[0], DebugStatement)
