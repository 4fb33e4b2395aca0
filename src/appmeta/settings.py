"""CLI settings: reads .env + settings.toml to produce a Settings value.

Lookup order for each key (first hit wins):
  1. Environment variable (APPMETA_API_SPEC, APPMETA_LOG_LEVEL), which may
     come from a .env file in the cwd or the config dir.
  2. settings.toml in the config dir.
  3. Built-in default.

settings.toml is optional; with no file every key takes its default.

Key entities:
  - Settings: frozen dataclass of resolved values.
  - load_settings(): parse .env + settings.toml -> Settings.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .utils import appmeta_dir

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# settings.toml key -> environment variable overriding it
_ENV_OVERRIDES = {
    "api_spec": "APPMETA_API_SPEC",
    "log_level": "APPMETA_LOG_LEVEL",
}


@dataclass(frozen=True)
class Settings:
    """Resolved CLI configuration."""

    # Default spec source for `appmeta init`, e.g. "file:/path/swagger.json"
    api_spec: str = ""
    log_level: str = "WARNING"
    config_dir: Path = field(default_factory=appmeta_dir)

    @property
    def settings_file(self) -> Path:
        return self.config_dir / "settings.toml"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


def load_settings(config_dir: Path | None = None) -> Settings:
    """Read .env + settings.toml and return the resolved Settings.

    Args:
        config_dir: Override for the config directory.
                    Defaults to ``appmeta_dir()``.

    Raises:
        ValueError: settings.toml is malformed or holds an invalid value.
    """
    if config_dir is None:
        config_dir = appmeta_dir()

    # Load .env files (local cwd first, then config_dir)
    local_env = Path(".env")
    global_env = config_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if global_env.is_file():
        load_dotenv(global_env)

    raw: dict = {}
    toml_path = config_dir / "settings.toml"
    if toml_path.is_file():
        try:
            with open(toml_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid {toml_path}: {e}") from e
        logger.debug("Loaded settings from %s", toml_path)

    def _get(key: str, default: str) -> str:
        """Environment > settings.toml > default."""
        env_value = os.getenv(_ENV_OVERRIDES[key], "").strip()
        if env_value:
            return env_value
        return str(raw.get(key, default))

    log_level = _get("log_level", "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"Invalid log_level '{log_level}'; expected one of {', '.join(_LOG_LEVELS)}."
        )

    return Settings(
        api_spec=_get("api_spec", ""),
        log_level=log_level,
        config_dir=config_dir,
    )
