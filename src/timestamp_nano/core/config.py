"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.

Example ``timestamp_nano.toml``::

    overflow_policy = "checked"

    [observability]
    log_level = "DEBUG"
    log_format = "json"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .enums import LogFormat, OverflowPolicy
from .errors import ConfigError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Library-wide settings.

    Loaded from a TOML config file, overridden by environment variables
    (``TIMESTAMP_NANO_OVERFLOW_POLICY``,
    ``TIMESTAMP_NANO_OBSERVABILITY__LOG_LEVEL``, ...).
    """

    # Default for TimestampNano.shift() when no policy is passed
    overflow_policy: OverflowPolicy = OverflowPolicy.WRAP

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "TIMESTAMP_NANO_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional, skipped if missing).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Cannot parse config file {path}: {exc}") from exc
        else:
            logger.debug("Config file %s not found, using defaults", path)

    if overrides:
        data.update(overrides)

    return Settings(**data)


# ---------------------------------------------------------------------------
# Active settings
# ---------------------------------------------------------------------------

_active: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment once."""
    global _active
    if _active is None:
        _active = load_settings()
    return _active


def set_settings(settings: Settings | None) -> None:
    """Replace the active settings. ``None`` forces a reload on next access."""
    global _active
    _active = settings
