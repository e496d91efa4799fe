"""Configuration loading with directory precedence and XDG data paths.

This module handles the configuration apiref reads:

* **Docs config** -- ``config.yaml`` in the docs config directory,
  deserialised into a :class:`~apiref.models.DocsConfig` (inline rules and
  resource categories). See :func:`load_docs_config`.
* **Directory resolution** -- :func:`resolve_config_dir` picks the config
  directory from the CLI flag, the ``APIREF_CONFIG_DIR`` environment
  variable, or the current directory, in that order.
* **Data directory** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.apiref/`` elsewhere. Used for crash logs. See :func:`get_data_dir`.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from apiref.exceptions import ConfigError, InvalidUsageError
from apiref.models import DocsConfig

_APP_NAME = "apiref"
_CONFIG_FILENAME = "config.yaml"
_CONFIG_DIR_ENV = "APIREF_CONFIG_DIR"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/apiref/`` (default ``~/.local/share/apiref/``).
    On macOS/Windows: ``~/.apiref/logs/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}" / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Docs config ---


def resolve_config_dir(cli_config_dir: Optional[str] = None) -> Path:
    """Resolve the docs config directory.

    Precedence (high to low):
        1. ``cli_config_dir`` (the ``--config-dir`` flag)
        2. ``APIREF_CONFIG_DIR`` environment variable
        3. The current working directory

    Raises:
        InvalidUsageError: If *cli_config_dir* is given but is not a
            directory.
    """
    if cli_config_dir:
        path = Path(cli_config_dir)
        if not path.is_dir():
            raise InvalidUsageError(f"--config-dir {cli_config_dir} is not a directory")
        return path
    env_dir = os.environ.get(_CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.cwd()


def load_docs_config(config_dir: Optional[Path] = None) -> DocsConfig:
    """Load ``config.yaml`` from *config_dir*.

    Args:
        config_dir: Directory holding ``config.yaml``. Resolved with
            :func:`resolve_config_dir` when ``None``.

    Returns:
        The validated :class:`~apiref.models.DocsConfig`. If the file does
        not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid YAML or fails
            Pydantic validation.
    """
    if config_dir is None:
        config_dir = resolve_config_dir()
    path = Path(config_dir) / _CONFIG_FILENAME
    if not path.is_file():
        return DocsConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read docs config at {path}: {exc}") from exc
    if data is None:
        return DocsConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid docs config at {path}: expected a mapping, got {type(data).__name__}"
        )
    try:
        return DocsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid docs config at {path}: {exc}") from exc
