"""Configuration management for starlink.

The configuration is a single JSON document stored per user:

    ```json
    {
      "token": "ghp_...",
      "per_page": 100,
      "ignore": ["owner/name"]
    }
    ```

Configuration Sources:
    - `--config` on the command line (highest priority)
    - `STARLINK_CONFIG` environment variable
    - `~/.starlink.json` (default)

Loading is strict: a missing, unreadable or invalid file raises `ConfigError`
so the CLI can stop before any network traffic happens.
"""
from __future__ import annotations
from pathlib import Path
from typing import List
import json
import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_FILENAME = ".starlink.json"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded or saved."""


class Config(BaseModel):
    """Persisted user settings.

    Attributes:
        token: GitHub access token. Empty means "use GITHUB_TOKEN if set".
        per_page: Page size for every GitHub list request (GitHub caps it at 100).
        ignore: Repository identifiers never shown in suggestions.
    """

    token: str = ""
    per_page: int = Field(default=100, ge=1, le=100)
    ignore: List[str] = Field(default_factory=list)

    @field_validator("token", mode="before")
    @classmethod
    def token_not_null(cls, v):
        return "" if v is None else v

    @field_validator("ignore", mode="before")
    @classmethod
    def ignore_not_null(cls, v):
        return [] if v is None else v

    def add_ignore(self, name: str) -> bool:
        """Append `name` to the ignore list unless it is already there."""
        if name in self.ignore:
            return False
        self.ignore.append(name)
        return True


def config_path(path: str | Path | None = None) -> Path:
    """Resolve the config file location.

    Args:
        path: Explicit path, usually from `--config`.

    Returns:
        The explicit path, else `$STARLINK_CONFIG`, else `~/.starlink.json`.
    """
    if path:
        return Path(path).expanduser()
    env = os.getenv("STARLINK_CONFIG")
    if env:
        return Path(env).expanduser()
    return Path.home() / DEFAULT_FILENAME


def load_config(path: str | Path | None = None) -> Config:
    """Read and validate the config file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON or invalid.
    """
    p = config_path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"failed to read config `{p}`: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse config json `{p}`: {e}") from e
    try:
        cfg = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config `{p}`: {e}") from e
    logger.debug("loaded config from %s (%d ignored)", p, len(cfg.ignore))
    return cfg


def save_config(cfg: Config, path: str | Path | None = None) -> Path:
    """Write `cfg` back as indented JSON and return the path written.

    Raises:
        ConfigError: If the file cannot be written.
    """
    p = config_path(path)
    payload = json.dumps(cfg.model_dump(), ensure_ascii=False, indent=2)
    try:
        p.write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to save config json `{p}`: {e}") from e
    return p
