"""
CLI module for cli-wrapped.

Provides the main entry point installed as the ``cli-wrapped`` console script.
"""

from .commands import main

__all__ = ["main"]
