#!/usr/bin/env python3
"""
Type-safe YAML loading for the cli-wrapped configuration file.
Wraps a ruamel.yaml safe loader with the value types the config may hold.
"""

from pathlib import Path
from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


class YAMLLoader(Protocol):
    """Protocol for the subset of the ruamel.yaml API used here."""

    def load(self, stream: TextIO) -> ConfigValue:
        """Load YAML from stream."""
        ...


def _create_yaml_loader() -> YAMLLoader:
    """Create a safe YAML loader.

    Returns:
        YAML loader that builds plain dicts and lists
    """
    yaml_obj = YAML(typ="safe", pure=True)
    if not callable(getattr(yaml_obj, "load", None)):
        raise TypeError("YAML.load is not callable")
    return cast(YAMLLoader, yaml_obj)


yaml: YAMLLoader = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML file.

    The safe loader never executes Python code from YAML content.

    Args:
        file_path: Path to YAML file to load

    Returns:
        The loaded document (None for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding="utf-8") as f:
        return yaml.load(f)
