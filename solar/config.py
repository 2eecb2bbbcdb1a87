"""Environment-driven settings for the solar ephemeris service."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass

LOGGER = logging.getLogger(__name__)

MAX_CENTURIES_ENV = "SOLAR_MAX_CENTURIES"
DEFAULT_MAX_CENTURIES = 5.0


class ConfigurationError(RuntimeError):
    """Raised when an environment setting cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    max_centuries: float = DEFAULT_MAX_CENTURIES


def _parse_max_centuries(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{MAX_CENTURIES_ENV} must be a number, got {raw!r}"
        ) from exc
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(
            f"{MAX_CENTURIES_ENV} must be a positive finite number, got {raw!r}"
        )
    return value


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""

    override = os.environ.get(MAX_CENTURIES_ENV)
    if not override:
        return Settings()

    settings = Settings(max_centuries=_parse_max_centuries(override))
    LOGGER.info(
        json.dumps(
            {
                "event": "settings_override",
                "variable": MAX_CENTURIES_ENV,
                "max_centuries": settings.max_centuries,
            }
        )
    )
    return settings
