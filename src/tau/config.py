# src/tau/config.py
"""Runtime configuration for the Tau interpreter.

Values are read once from the environment when the module is imported and
may be overridden afterwards (``config.enable_debug_logs = True``).
"""

import os


def _env_flag(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    def __init__(self):
        self.enable_debug_logs = _env_flag("TAU_DEBUG")
        # Parser limits
        self.max_parameters = 8
        self.max_arguments = 32
        self.source_extension = ".tau"
        self.prompt = "> "
        self.encoding = os.environ.get("TAU_ENCODING", "utf-8")
        # Deeply recursive Tau programs need more than the default host stack
        self.recursion_limit = int(os.environ.get("TAU_RECURSION_LIMIT", "100000"))

    def __repr__(self):
        return (f"Config(enable_debug_logs={self.enable_debug_logs}, "
                f"max_parameters={self.max_parameters}, max_arguments={self.max_arguments})")


config = Config()
