"""File access shared by ``IO.readLine`` and ``File(path).readLine()``."""

import logging

from ..config import config
from ..object import NativeObject, Builtin, String, EvaluationError, NIL

logger = logging.getLogger(__name__)

READ_ERROR = "Could not get file or read it."


def read_first_line(path):
    """Return the first line of ``path`` as a String, nil for an empty file."""
    try:
        with open(path, "r", encoding=config.encoding) as f:
            line = f.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("readLine failed for %s: %s", path, e)
        return EvaluationError(READ_ERROR)

    if line == "":
        return NIL
    return String(line.rstrip("\r\n"))


class FileHandle(NativeObject):
    name = "File"

    def __init__(self, path):
        self.path = path

    def get_property(self, name):
        if name == "path":
            return String(self.path)

        if name == "readLine":
            def _read_line():
                return read_first_line(self.path)
            return Builtin(_read_line, "readLine", 0)

        return EvaluationError(f"Could not get property '{name}'.")

    def inspect(self):
        return f"<file {self.path}>"


def make_file_builtin():
    def _file(path):
        return FileHandle(path.inspect())
    return Builtin(_file, "File", 1)
