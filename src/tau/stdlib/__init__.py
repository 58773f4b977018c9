"""Tau native globals: IO, System and the File constructor."""

from .io import IOModule
from .system import SystemModule
from .fs import FileHandle, make_file_builtin

__all__ = [
    'IOModule',
    'SystemModule',
    'FileHandle',
    'make_file_builtin',
]
