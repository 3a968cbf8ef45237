"""Config I/O: ensure, load, merge and save config.json."""
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from e2ekit.errors import ConfigError
from e2ekit.models.config import ToolkitConfig
from e2ekit.tools.director import path_exists, read_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")


def ensure_config(config_path: Path = DEFAULT_CONFIG_PATH) -> ToolkitConfig:
    """
    Load config from JSON, creating it with defaults if it does not exist.

    An empty file is read as an empty object.

    Raises:
        ConfigError: if the file holds invalid JSON or invalid values
    """
    config_path = Path(config_path)
    if not path_exists(config_path):
        config = ToolkitConfig()
        save_config(config, config_path)
        logger.info("Created default config at %s", config_path)
        return config

    content = read_file(config_path) or "{}"
    try:
        data = json.loads(content)
        return ToolkitConfig(**data)
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        raise ConfigError(f"Unable to load config from {config_path}: {e}", str(config_path)) from e


def save_config(config: ToolkitConfig, config_path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Save config to JSON file atomically (write temp then replace)."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temp file first
    temp_path = config_path.with_suffix(".tmp")
    temp_path.write_text(config.model_dump_json(indent=2))

    # Atomic replace
    temp_path.replace(config_path)


def update_config(config_path: Path = DEFAULT_CONFIG_PATH, **changes: Any) -> ToolkitConfig:
    """
    Merge changes into the stored config and save it.

    Only the given keys change (shallow merge); the rest are kept.
    """
    current = ensure_config(config_path)
    merged = {**current.model_dump(), **changes}
    try:
        config = ToolkitConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values for {config_path}: {e}", str(config_path)) from e

    save_config(config, config_path)
    return config


class ConfigStore:
    """Config bound to one file path, loaded on construction."""

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH):
        self.config_path = Path(config_path)
        self.config = ensure_config(self.config_path)

    @property
    def jwt(self) -> str:
        return self.config.jwt

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.model_dump().get(key, default)

    def update(self, **changes: Any) -> ToolkitConfig:
        self.config = update_config(self.config_path, **changes)
        return self.config
