"""
cli-wrapped

Command usage statistics from bash and zsh history files.
"""

__version__ = "0.1.0"

from cli_wrapped.core.history import ShellType
from cli_wrapped.core.shell import Shell

__all__ = [
    "Shell",
    "ShellType",
]
