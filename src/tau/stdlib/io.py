import sys

from ..object import NativeObject, Builtin, String, EvaluationError, NIL
from .fs import read_first_line


class IOModule(NativeObject):
    """Console and file input/output."""

    name = "IO"

    def get_property(self, name):
        if name == "puts":
            def _puts(value):
                print(value.inspect())
                return NIL
            return Builtin(_puts, "puts", 1)

        if name == "gets":
            def _gets(prompt):
                sys.stdout.write(prompt.inspect())
                sys.stdout.flush()
                line = sys.stdin.readline()
                if line == "":
                    return NIL
                return String(line.rstrip("\r\n"))
            return Builtin(_gets, "gets", 1)

        if name == "readLine":
            def _read_line(path):
                return read_first_line(path.inspect())
            return Builtin(_read_line, "readLine", 1)

        return EvaluationError(f"Could not get property '{name}'.")
