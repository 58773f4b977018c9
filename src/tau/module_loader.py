# module_loader.py
import logging
import os

from .config import config
from .error_reporter import ImportFailure

logger = logging.getLogger(__name__)


class ModuleLoader:
    """Runs ``import "path"`` statements for one evaluator.

    The file is read, scanned, parsed and resolved like a top-level program
    and then evaluated in the global frame, so its declarations become
    globals. Nothing is cached: importing a file twice runs it twice.
    Failures inside the imported file are reported and abort only that
    import; the importing program keeps running.
    """

    def __init__(self, evaluator):
        self.evaluator = evaluator

    def normalize_path(self, path):
        return os.path.normpath(path)

    def load(self, path, line=None):
        """Run the file at ``path``; returns True when it ran to completion."""
        if not os.path.isfile(path):
            logger.debug("import skipped, not a regular file: %s", path)
            return False

        try:
            with open(path, "r", encoding=config.encoding) as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("import of %s failed: %s", path, e)
            self.evaluator.reporter.report_error(
                ImportFailure,
                "Failed to process import.",
                line=line,
                filename=self.normalize_path(path),
            )
            return False

        from .runner import compile_source

        filename = self.normalize_path(path)
        logger.debug("importing %s", filename)
        program = compile_source(source, self.evaluator, filename=filename,
                                 reporter=self.evaluator.reporter)
        if program is None:
            return False

        error = self.evaluator.interpret(program.statements, self.evaluator.globals, filename=filename)
        return error is None
