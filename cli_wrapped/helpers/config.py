"""User configuration for cli-wrapped.

Defaults may be stored in a YAML file::

    # ~/.config/cli-wrapped/config.yaml
    shell_type: zsh
    path_to_history: ~/backups/old_history
    top: 10

The file lives at ``$CLI_WRAPPED_CONFIG`` if set, otherwise at
``$XDG_CONFIG_HOME/cli-wrapped/config.yaml``, or at
``~/.config/cli-wrapped/config.yaml`` when ``XDG_CONFIG_HOME`` is unset.
Command-line options always take precedence over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml.error import YAMLError

from cli_wrapped.core.errors import FindError
from cli_wrapped.core.history import ShellType, expand_user, home_dir
from cli_wrapped.helpers.helpers_logging import print_warning
from cli_wrapped.helpers.yaml_loader import load_yaml_file

CONFIG_ENV_VAR = "CLI_WRAPPED_CONFIG"
CONFIG_DIR_NAME = "cli-wrapped"
CONFIG_FILE_NAME = "config.yaml"

_KNOWN_KEYS = frozenset({"shell_type", "path_to_history", "top"})


class ConfigError(ValueError):
    """Raised when the configuration file is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Resolved defaults for one run."""

    shell_type: ShellType = ShellType.BASH
    path_to_history: Path | None = None
    top: int | None = None


def default_config_path() -> Path:
    """Return the config file location. Honors CLI_WRAPPED_CONFIG and XDG_CONFIG_HOME.

    Raises:
        FindError: If the location depends on a home directory that cannot be found
    """
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return expand_user(Path(env))
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else home_dir() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _parse_shell_type(value: object, config_path: Path) -> ShellType:
    if not isinstance(value, str):
        raise ConfigError(f"{config_path}: 'shell_type' must be a string")
    try:
        return ShellType.parse(value)
    except ValueError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc


def _parse_history_path(value: object, config_path: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{config_path}: 'path_to_history' must be a non-empty string")
    return expand_user(Path(value))


def _parse_top(value: object, config_path: Path) -> int | None:
    if value is None:
        return None
    # bool is an int subclass; 'top: yes' is a mistake, not 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{config_path}: 'top' must be a non-negative integer")
    return value


def settings_from_mapping(data: dict[str, object], config_path: Path) -> Settings:
    """Validate a loaded config mapping and build Settings from it."""
    for key in data:
        if not isinstance(key, str):
            raise ConfigError(f"{config_path}: config keys must be strings, got {key!r}")
    for key in sorted(set(data) - _KNOWN_KEYS):
        print_warning(f"{config_path}: ignoring unknown key '{key}'")

    shell_type = ShellType.BASH
    if "shell_type" in data:
        shell_type = _parse_shell_type(data["shell_type"], config_path)

    return Settings(
        shell_type=shell_type,
        path_to_history=_parse_history_path(data.get("path_to_history"), config_path),
        top=_parse_top(data.get("top"), config_path),
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from the config file.

    Args:
        config_path: Explicit config file. It must exist. When None, the
            default location is used and a missing file means built-in defaults.

    Returns:
        Settings from the file, or the defaults

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid
        FindError: If the config names a ``~`` path and the home directory is unknown
    """
    explicit = config_path is not None
    if config_path is not None:
        path = config_path
    else:
        try:
            path = default_config_path()
        except FindError:
            return Settings()

    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return Settings()

    try:
        data = load_yaml_file(path)
    except (OSError, YAMLError) as exc:
        raise ConfigError(f"Failed to load config {path}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    return settings_from_mapping(data, path)
