"""
Pytest configuration for Tau tests.
"""
import sys
import os

import pytest

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

from tau.config import config
from tau.error_reporter import ErrorReporter, set_error_reporter
from tau.runner import Runner


@pytest.fixture(autouse=True)
def _restore_config():
    saved = dict(vars(config))
    yield
    vars(config).update(saved)


@pytest.fixture
def reporter():
    """A silent reporter installed as the process-wide one."""
    return set_error_reporter(ErrorReporter(echo=False))


@pytest.fixture
def runner(reporter):
    return Runner(reporter=reporter)


@pytest.fixture
def run_source(runner, capsys):
    """Run Tau source on a shared runner and return what it printed."""
    def _run(source):
        runner.run(source)
        return capsys.readouterr().out
    return _run


@pytest.fixture
def tau_file(tmp_path):
    """Write a ``.tau`` file under tmp_path and return its path."""
    def _write(source, name="program.tau"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path
    return _write
