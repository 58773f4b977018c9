"""Diagnostic formatting and reporter bookkeeping."""

from rich.console import Console

from tau.runner import Runner
from tau.error_reporter import (
    ErrorReporter, ImportFailure, ScopeError, TauRuntimeError, TauSyntaxError,
)


def test_static_error_format():
    error = TauSyntaxError("Expect expression.", line=4)
    assert error.format() == "[line 4] Error: Expect expression."


def test_runtime_and_import_formats():
    assert TauRuntimeError("Boom.", line=2).format() == "Boom.\n[line 2]"
    assert ImportFailure("Failed to process import.").format() == \
        "[runtime] Import Error: Failed to process import."


def test_reporter_tracks_error_kinds():
    reporter = ErrorReporter(echo=False)
    reporter.report_error(ScopeError, "Bad scope.", line=1)
    assert reporter.had_error and not reporter.had_runtime_error

    reporter.report(TauRuntimeError("Bad value.", line=3))
    assert reporter.had_runtime_error
    assert [e.message for e in reporter.errors] == ["Bad scope.", "Bad value."]

    reporter.reset()
    assert reporter.errors == []
    assert not reporter.had_error and not reporter.had_runtime_error


def test_reporter_prints_error_and_hint():
    console = Console(record=True, width=120)
    reporter = ErrorReporter(console=console)
    reporter.report_error(TauSyntaxError, "Unterminated string.", line=1,
                          suggestion='Add a closing quote " to terminate the string.')
    text = console.export_text()
    assert "[line 1] Error: Unterminated string." in text
    assert "hint: Add a closing quote" in text


def test_source_lines_are_available_for_context():
    reporter = ErrorReporter(echo=False)
    reporter.register_source("main.tau", "let a = 1\ndebug a")
    assert reporter.source_line("main.tau", 2) == "debug a"
    assert reporter.source_line("main.tau", 5) is None


def test_reporter_prints_offending_source_line_with_caret():
    console = Console(record=True, width=120)
    reporter = ErrorReporter(console=console)
    reporter.register_source("main.tau", "let a = 1\ndebug a +")
    reporter.report_error(TauSyntaxError, "Expect expression.", line=2, column=10, filename="main.tau")

    lines = console.export_text().splitlines()
    assert lines[0] == "[line 2] Error: Expect expression."
    assert lines[1] == "  2 | debug a +"
    assert lines[2].rstrip() == " " * 15 + "^"


def test_runtime_error_shows_source_line_of_the_run():
    console = Console(record=True, width=120)
    reporter = ErrorReporter(console=console)
    Runner(reporter=reporter).run('let a = 1\ndebug a + "x"', filename="calc.tau")

    text = console.export_text()
    assert "Operands must be two numbers or two strings.\n[line 2]" in text
    assert '  2 | debug a + "x"' in text
