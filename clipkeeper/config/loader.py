"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user (~/.clipkeeper/config.json) OR shipped defaults (if no global)
2. Project local (cwd/.clipkeeper/config.json)

Defaults are only used as a fallback when no global config exists.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from clipkeeper.config.schema import Config
from clipkeeper.core.constants import CLIPKEEPER_DIR_NAME, get_clipkeeper_dir, get_defaults_dir
from clipkeeper.core.errors import ConfigError
from clipkeeper.core.utils import deep_merge

logger = logging.getLogger(__name__)

DEFAULTS_DIR = get_defaults_dir()
DEFAULT_CONFIG = DEFAULTS_DIR / "config.json"


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file contains invalid JSON or merged config
            fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    global_config = get_clipkeeper_dir() / "config.json"
    global_data = _load_layer(global_config)
    if global_data:
        merged = deep_merge(merged, global_data)
        loaded_from.append(global_config)
        logger.debug("Using global config: %s", global_config)
    else:
        logger.debug("No global config at: %s, using defaults", global_config)
        default_data = _load_layer(DEFAULT_CONFIG)
        if default_data:
            merged = deep_merge(merged, default_data)
            loaded_from.append(DEFAULT_CONFIG)

    local_config = effective_cwd / CLIPKEEPER_DIR_NAME / "config.json"
    if local_config.resolve() != global_config.resolve():
        local_data = _load_layer(local_config)
        if local_data:
            merged = deep_merge(merged, local_data)
            loaded_from.append(local_config)

    if loaded_from:
        logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    else:
        logger.debug("No config files found, using Pydantic defaults")

    if not merged:
        return Config()

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e


def read_config_file(path: Path, *, required: bool = True) -> dict[str, Any] | None:
    """Read one config file into a plain dict of settings overrides.

    A missing layer is normal (required=False returns None). A file that
    exists but is empty counts as "no overrides": watchfiles can report a
    save while the editor has only truncated the file.

    Args:
        path: Config file to read.
        required: Raise instead of returning None when the file is absent.

    Returns:
        The parsed top-level object, {} for an empty file, or None for a
        missing optional file.

    Raises:
        ConfigError: If a required file is missing, or any existing file
            can't be read, isn't valid JSON, or isn't a JSON object.
    """
    resolved = path.resolve()
    if not resolved.is_file():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("Config file not found: %s (resolved: %s)", path, resolved)
        return None

    try:
        # utf-8-sig drops the BOM some Windows editors write
        content = resolved.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must hold a JSON object, got {type(data).__name__}"
        )

    logger.debug("Read %d setting(s) from %s", len(data), resolved)
    return data


def _load_layer(path: Path) -> dict[str, Any] | None:
    return read_config_file(path, required=False)


def _load_from_path(path: Path) -> Config:
    """Load and validate config from a specific path.

    Raises:
        ConfigError: If file doesn't exist, contains invalid JSON, or fails validation.
    """
    data = read_config_file(path) or {}

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e
