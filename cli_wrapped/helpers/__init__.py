"""Helpers shared by the CLI: terminal output and configuration loading."""
