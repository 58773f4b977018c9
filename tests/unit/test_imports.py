"""Textual imports into the global frame."""


def test_import_defines_globals(run_source, tau_file):
    lib = tau_file("def twice(x) do return x * 2 end\nlet version = 2", name="lib.tau")
    assert run_source(f'import "{lib}"\ndebug twice(version)') == "4\n"


def test_importing_twice_runs_twice(run_source, tau_file):
    lib = tau_file('debug "hi"', name="hello.tau")
    assert run_source(f'import "{lib}"\nimport "{lib}"') == "hi\nhi\n"


def test_missing_import_is_skipped_silently(run_source, reporter, tmp_path):
    out = run_source(f'import "{tmp_path / "absent.tau"}"\ndebug "after"')
    assert out == "after\n"
    assert reporter.errors == []


def test_directory_import_is_skipped(run_source, reporter, tmp_path):
    assert run_source(f'import "{tmp_path}"\ndebug "after"') == "after\n"
    assert reporter.errors == []


def test_static_error_in_import_aborts_only_that_import(run_source, reporter, tau_file):
    bad = tau_file('debug "never"\nlet = 1', name="bad.tau")
    assert run_source(f'import "{bad}"\ndebug "after"') == "after\n"
    assert reporter.had_error
    assert reporter.errors[0].message == "Expect variable name."


def test_runtime_error_in_import_aborts_only_that_import(run_source, reporter, tau_file):
    bad = tau_file('debug "start"\ndebug 1 + none\ndebug "never"', name="boom.tau")
    assert run_source(f'import "{bad}"\ndebug "after"') == "start\nafter\n"
    assert reporter.had_runtime_error


def test_unreadable_import_reports_failure(run_source, reporter, tau_file):
    bad = tau_file("", name="binary.tau")
    bad.write_bytes(b"\xff\xfe\x00bad")
    assert run_source(f'import "{bad}"\ndebug "after"') == "after\n"
    assert reporter.errors[0].message == "Failed to process import."


def test_nested_imports(run_source, tau_file):
    inner = tau_file('let depth = "inner"', name="inner.tau")
    outer = tau_file(f'import "{inner}"\ndebug depth', name="outer.tau")
    assert run_source(f'import "{outer}"') == "inner\n"
