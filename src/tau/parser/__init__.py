# src/tau/parser/__init__.py
"""
Parser module for the Tau language.
"""

from .parser import Parser, ParseError

__all__ = ["Parser", "ParseError"]
