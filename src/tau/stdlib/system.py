import gc
import getpass
import os
import platform

from ..object import NativeObject, Builtin, Number, String, Array, EvaluationError, NIL, Nil


class SystemModule(NativeObject):
    """Host process information and control.

    ``gc``, ``os`` and ``user`` take one argument that is ignored.
    """

    name = "System"

    def __init__(self, argv=None):
        self.argv = argv if argv is not None else []

    def get_property(self, name):
        if name == "cwd":
            return String(os.getcwd())

        if name == "gc":
            def _gc(_):
                gc.collect()
                return NIL
            return Builtin(_gc, "gc", 1)

        if name == "os":
            def _os(_):
                return String(platform.system())
            return Builtin(_os, "os", 1)

        if name == "user":
            def _user(_):
                try:
                    return String(getpass.getuser())
                except (KeyError, OSError):
                    return NIL
            return Builtin(_user, "user", 1)

        if name == "argv":
            def _argv():
                return Array([String(arg) for arg in self.argv])
            return Builtin(_argv, "argv", 0)

        if name == "halt":
            def _halt(code, message):
                if not isinstance(code, Number):
                    return EvaluationError("Exit code must be a number.")
                if not isinstance(message, Nil):
                    print(message.inspect())
                raise SystemExit(int(code.value))
            return Builtin(_halt, "halt", 2)

        return EvaluationError(f"Could not get property '{name}'.")
