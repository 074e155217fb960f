"""
Configuration Loader

Loads the Printful API token from the environment (with .env support) and
the sync-product listing template from YAML.
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .constants import (
    BASE_URL_ENV_VAR,
    DEFAULT_SYNC_SETTINGS,
    PRINTFUL_BASE_URL,
    TOKEN_ENV_VAR,
)

logger = logging.getLogger(__name__)

SYNC_SETTINGS_FILE = "sync_product.yaml"


@dataclass(frozen=True)
class SyncSettings:
    """Selection policy and listing template for one sync run."""
    product_index: int = DEFAULT_SYNC_SETTINGS["product_index"]
    external_id: str = DEFAULT_SYNC_SETTINGS["external_id"]
    name: str = DEFAULT_SYNC_SETTINGS["name"]
    variant_external_id: str = DEFAULT_SYNC_SETTINGS["variant_external_id"]
    variant_id: int = DEFAULT_SYNC_SETTINGS["variant_id"]
    retail_price: str = DEFAULT_SYNC_SETTINGS["retail_price"]
    image_extensions: List[str] = field(
        default_factory=lambda: list(DEFAULT_SYNC_SETTINGS["image_extensions"])
    )

    def with_overrides(self, **overrides: Any) -> "SyncSettings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'sync_product.yaml')

    Returns:
        Parsed YAML content as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return _read_yaml(config_path)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def settings_from_dict(raw: Dict[str, Any]) -> SyncSettings:
    """
    Build SyncSettings from a parsed YAML mapping.

    Missing keys keep their defaults. Numeric fields are coerced to int and
    text fields to str, so an unquoted `retail_price: 29.99` still works.

    Raises:
        ValueError: On unknown keys, empty values, or values that cannot be coerced
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Sync settings must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(SyncSettings)}
    unknown = sorted(str(k) for k in set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown sync settings: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in raw.items():
        # An empty YAML value (`name:`) parses as None
        if value is None:
            raise ValueError(f"{key} must not be empty")

        if key in ("product_index", "variant_id"):
            try:
                values[key] = int(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"{key} must be an integer, got {value!r}") from e
        elif key == "image_extensions":
            if not isinstance(value, list):
                raise ValueError("image_extensions must be a list")
            values[key] = [str(ext) for ext in value]
        else:
            text = str(value).strip()
            if not text:
                raise ValueError(f"{key} must not be empty")
            values[key] = text

    return SyncSettings(**values)


def load_sync_settings(path: Optional[str | Path] = None) -> SyncSettings:
    """
    Load the sync-product settings.

    Args:
        path: Explicit YAML file. If None, config/sync_product.yaml is used
              when a config directory exists, otherwise built-in defaults.

    Returns:
        SyncSettings instance

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If the file contains invalid settings
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.debug("Loading sync settings from %s", path)
        return settings_from_dict(_read_yaml(path))

    try:
        raw = load_config(SYNC_SETTINGS_FILE)
    except FileNotFoundError as e:
        logger.debug("%s; using built-in sync settings", e)
        return SyncSettings()

    return settings_from_dict(raw)


def load_api_token(cli_token: Optional[str] = None) -> Optional[str]:
    """
    Resolve the Printful API token.

    Order of precedence: explicit token, then PRINTFUL_API_TOKEN from the
    environment (a .env file in the working directory is loaded first).

    Returns:
        Token string, or None if missing or blank
    """
    load_dotenv(find_dotenv(usecwd=True))
    token = cli_token or os.environ.get(TOKEN_ENV_VAR, "")
    token = token.strip()
    return token or None


def load_base_url() -> str:
    """Return the API base URL (PRINTFUL_BASE_URL or the public endpoint)."""
    base_url = (os.environ.get(BASE_URL_ENV_VAR) or PRINTFUL_BASE_URL).strip()
    return base_url.rstrip("/")
