"""
User interface module.

This package contains display implementations. The algorithm layer returns
dataclasses, and this layer formats them for output.
"""

from .terminal import TerminalDisplay

__all__ = ["TerminalDisplay"]
