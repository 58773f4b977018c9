"""Native globals: IO, System, File and Array capabilities."""

import getpass
import io
import os
import platform

import pytest

from tau.runner import Runner


def test_io_puts(run_source):
    assert run_source('IO.puts("hello")\nIO.puts(3)') == "hello\n3\n"


def test_io_gets_prints_prompt_and_reads_line(run_source, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ada\n"))
    assert run_source('let name = IO.gets("name? ")\ndebug "hi " + name') == "name? hi Ada\n"


def test_io_gets_at_end_of_input_is_nil(run_source, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert run_source('debug IO.gets("")') == "nil\n"


def test_io_read_line_returns_first_line(run_source, tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert run_source(f'debug IO.readLine("{path}")') == "first\n"


def test_io_read_line_of_empty_file_is_nil(run_source, tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert run_source(f'debug IO.readLine("{path}")') == "nil\n"


def test_io_read_line_of_missing_file_is_runtime_error(runner, reporter, tmp_path):
    runner.run(f'debug IO.readLine("{tmp_path / "missing.txt"}")')
    assert reporter.errors[0].message == "Could not get file or read it."
    assert reporter.errors[0].line == 1


def test_file_handle(run_source, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("remember\nthis", encoding="utf-8")
    source = f'let f = File("{path}")\ndebug f.readLine()\ndebug f.path == "{path}"'
    assert run_source(source).splitlines() == ["remember", "true"]


def test_unknown_native_property(runner, reporter):
    runner.run("debug IO.nothing")
    assert reporter.errors[0].message == "Could not get property 'nothing'."


def _host_user():
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "nil"


def test_system_information(run_source):
    out = run_source("debug System.os(none)\ndebug System.cwd\ndebug System.gc(none)\ndebug System.user(none)")
    assert out.splitlines() == [platform.system(), os.getcwd(), "nil", _host_user()]


def test_system_argv(reporter, capsys):
    runner = Runner(reporter=reporter, argv=["script.tau", "one", "two"])
    runner.run("debug System.argv()\ndebug System.argv().length")
    assert capsys.readouterr().out.splitlines() == ["[script.tau, one, two]", "3"]


def test_system_halt_prints_message_and_exits(runner, capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.run('System.halt(3, "bye")\ndebug "unreachable"')
    assert excinfo.value.code == 3
    assert capsys.readouterr().out == "bye\n"


def test_system_halt_without_message(runner, capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.run("System.halt(0, none)")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == ""


def test_system_halt_needs_numeric_code(runner, reporter):
    runner.run('System.halt("x", none)')
    assert reporter.errors[0].message == "Exit code must be a number."


def test_array_operations(run_source):
    source = """
    let items = [1, "two", none]
    debug items
    debug items.length
    items.set(0, 10)
    debug items.get(0)
    items.remove(1)
    debug items
    """
    assert run_source(source).splitlines() == ["[1, two, nil]", "3", "10", "[10, nil]"]


@pytest.mark.parametrize("source, message", [
    ("[1].get(1)", "Index out of range."),
    ("[1].get(-1)", "Index out of range."),
    ('[1].get("0")', "Array index must be a number."),
    ("[1].push(2)", "Could not find property 'push'."),
])
def test_array_errors(runner, reporter, source, message):
    runner.run(source)
    assert reporter.errors[0].message == message


def test_native_arity_is_checked(runner, reporter):
    runner.run("IO.puts()")
    assert reporter.errors[0].message == "Expected 1 arguments but got 0."
