# src/tau/error_reporter.py
"""
Diagnostics for the Tau interpreter.

Every phase reports through the process-wide :class:`ErrorReporter`:

* the lexer and parser report :class:`TauSyntaxError`
* the resolver reports :class:`ScopeError`
* the evaluator reports the first uncaught :class:`TauRuntimeError`
* the import loader reports :class:`ImportFailure` for unreadable files

Static errors are accumulated. The reporter only remembers them and prints
them; deciding whether a later phase runs is the caller's job.
"""

import logging
from typing import List, Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class TauError(Exception):
    """Base class for all diagnostics produced by the interpreter."""

    kind = "Error"

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None,
                 filename: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion

    def format(self) -> str:
        line = self.line if self.line is not None else 0
        return f"[line {line}] {self.kind}: {self.message}"

    def __str__(self):
        return self.format()


class TauSyntaxError(TauError):
    pass


class ScopeError(TauError):
    pass


class TauRuntimeError(TauError):
    """An evaluation failure; printed as the message followed by its line."""

    def format(self) -> str:
        line = self.line if self.line is not None else 0
        return f"{self.message}\n[line {line}]"


class ImportFailure(TauError):
    kind = "Import Error"

    def format(self) -> str:
        return f"[runtime] {self.kind}: {self.message}"


class ErrorReporter:
    def __init__(self, console: Optional[Console] = None, echo: bool = True):
        self.console = console or Console(stderr=True, highlight=False)
        self.echo = echo
        self.errors: List[TauError] = []
        self.had_error = False
        self.had_runtime_error = False
        self._sources = {}

    def register_source(self, filename: str, source: str) -> None:
        self._sources[filename] = source

    def source_line(self, filename: Optional[str], line: Optional[int]) -> Optional[str]:
        source = self._sources.get(filename)
        if source is None or not line:
            return None
        lines = source.splitlines()
        if 0 < line <= len(lines):
            return lines[line - 1]
        return None

    def report_error(self, error_class, message, line=None, column=None, filename=None, suggestion=None):
        """Create, record and print an error. The error is returned, not raised."""
        error = error_class(message, line=line, column=column, filename=filename, suggestion=suggestion)
        return self.report(error)

    def report(self, error: TauError) -> TauError:
        self.errors.append(error)
        if isinstance(error, TauRuntimeError):
            self.had_runtime_error = True
        else:
            self.had_error = True
        logger.debug("reported %s: %s", type(error).__name__, error.message)
        if self.echo:
            print_error(error, self.console, self.source_line(error.filename, error.line))
        return error

    def reset(self) -> None:
        self.errors = []
        self.had_error = False
        self.had_runtime_error = False


def print_error(error: TauError, console: Optional[Console] = None, source_line: Optional[str] = None) -> None:
    """Print the error, then the offending source line with a caret under the column."""
    console = console or Console(stderr=True, highlight=False)
    console.print(error.format(), style="bold red", markup=False)
    if source_line is not None:
        gutter = f"  {error.line} | "
        console.print(gutter + source_line.rstrip(), style="dim", markup=False)
        if error.column:
            console.print(" " * (len(gutter) + error.column - 1) + "^", style="red", markup=False)
    if error.suggestion:
        console.print(f"  hint: {error.suggestion}", style="yellow", markup=False)


_reporter: Optional[ErrorReporter] = None


def get_error_reporter() -> ErrorReporter:
    global _reporter
    if _reporter is None:
        _reporter = ErrorReporter()
    return _reporter


def set_error_reporter(reporter: ErrorReporter) -> ErrorReporter:
    """Install ``reporter`` as the process-wide reporter and return it."""
    global _reporter
    _reporter = reporter
    return reporter
