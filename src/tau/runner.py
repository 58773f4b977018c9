# runner.py
"""Source-to-result pipeline shared by the CLI, the REPL and imports."""

import logging
import sys

from .config import config
from .error_reporter import get_error_reporter
from .parser import Parser
from .resolver import Resolver
from .evaluator import Evaluator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STATIC_ERROR = 65
EXIT_RUNTIME_ERROR = 70


def compile_source(source, evaluator, filename="<stdin>", reporter=None):
    """Scan, parse and resolve ``source``.

    Returns the resolved Program, or None when any static error was
    reported. Binding distances are recorded on ``evaluator``.
    """
    reporter = reporter or get_error_reporter()
    parser = Parser.from_source(source, filename, reporter=reporter)
    program = parser.parse_program()
    if parser.lexer.errors or parser.errors:
        logger.debug("%s: %d syntax error(s)", filename, len(parser.lexer.errors) + len(parser.errors))
        return None

    resolver = Resolver(evaluator, reporter=reporter, filename=filename)
    if resolver.resolve(program.statements):
        logger.debug("%s: %d scope error(s)", filename, len(resolver.errors))
        return None
    return program


class Runner:
    """Owns one evaluator, so successive runs share the global frame."""

    def __init__(self, reporter=None, argv=None):
        if sys.getrecursionlimit() < config.recursion_limit:
            sys.setrecursionlimit(config.recursion_limit)
        self.reporter = reporter or get_error_reporter()
        self.evaluator = Evaluator(reporter=self.reporter, argv=argv)

    def run(self, source, filename="<stdin>"):
        """Run ``source``; returns False if a static or runtime error was reported."""
        program = compile_source(source, self.evaluator, filename=filename, reporter=self.reporter)
        if program is None:
            return False
        return self.evaluator.interpret(program.statements, filename=filename) is None

    def run_file(self, path):
        with open(path, "r", encoding=config.encoding) as f:
            source = f.read()
        return self.run(source, filename=path)

    def check(self, source, filename="<stdin>"):
        """Static phases only; returns True when no error was reported."""
        return compile_source(source, self.evaluator, filename=filename, reporter=self.reporter) is not None

    def exit_code(self):
        if self.reporter.had_error:
            return EXIT_STATIC_ERROR
        if self.reporter.had_runtime_error:
            return EXIT_RUNTIME_ERROR
        return EXIT_OK
