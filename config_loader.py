"""Helpers for resolving Notion credentials, config files and output paths."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:
    from dotenv import load_dotenv  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'python-dotenv'. Install with pip install"
        " python-dotenv"
    ) from exc

from pipelines.common import paths
from pipelines.notion_sync.options import DEFAULT_EXTENSION, SyncOptions

DEFAULT_CONFIG_NAME = "notion_sync.json"
DEFAULT_ENV_FILE = ".env"
TOKEN_VAR = "NOTION_TOKEN"
DATABASE_VAR = "NOTION_DATABASE_ID"


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


class MissingCredentialsError(ConfigError):
    """Raised when a required Notion environment variable is unset."""


def load_env_file(path: Optional[str] = None) -> bool:
    """Load ``.env`` style variables without clobbering the real environment."""
    candidate = Path(path) if path else Path.cwd() / DEFAULT_ENV_FILE
    if path and not candidate.is_file():
        raise ConfigError(f"Environment file not found: {candidate}")
    return bool(load_dotenv(candidate, override=False))


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no config is in play."""
    env_override = os.environ.get("NOTION_SYNC_CONFIG")
    explicit = path or env_override
    candidate = explicit or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    resolved = (
        expanded
        if os.path.isabs(expanded)
        else os.path.abspath(os.path.join(os.getcwd(), expanded))
    )
    if os.path.isfile(resolved):
        return resolved
    if explicit:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the optional JSON config file and normalize filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    except (UnicodeDecodeError, OSError) as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {config_path}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith(("_dir", "_path")):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def _require_env(*names: str) -> Dict[str, str]:
    values = {name: os.environ.get(name, "").strip() for name in names}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise MissingCredentialsError(f"{' or '.join(missing)} is not set.")
    return values


def resolve_sync_settings(
    *,
    config_path: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> SyncOptions:
    """Combine environment credentials, config file and CLI overrides."""
    credentials = _require_env(TOKEN_VAR, DATABASE_VAR)
    config = load_config(config_path)

    resolved_output = output_dir or config.get("output_dir")
    extension = str(config.get("file_extension") or DEFAULT_EXTENSION)
    if not extension.startswith("."):
        extension = f".{extension}"

    return SyncOptions(
        notion_token=credentials[TOKEN_VAR],
        database_id=credentials[DATABASE_VAR],
        output_dir=(
            Path(_resolve_path(resolved_output, os.getcwd()))
            if resolved_output
            else paths.posts_output_root()
        ),
        file_extension=extension,
    )
