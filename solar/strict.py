"""Range-checked entry points on top of the total functions in :mod:`solar.astro`.

The truncated series degrade steadily away from J2000.0. These wrappers
reject instants outside a window of ``max_centuries`` instead of returning
extrapolated values.
"""

from __future__ import annotations

import json
import logging
import math

from .astro import SolarPosition, julian_day_to_century, solar_position
from .config import DEFAULT_MAX_CENTURIES

__all__ = [
    "SolarRangeError",
    "check_century",
    "check_latitude",
    "strict_julian_day_to_century",
    "strict_solar_position",
]

LOGGER = logging.getLogger(__name__)


class SolarRangeError(ValueError):
    """Raised when an input lies outside the range the series are trusted for."""


def _reject(message: str, **fields: object) -> None:
    LOGGER.warning(json.dumps({"event": "range_rejected", **fields}))
    raise SolarRangeError(message)


def check_century(t: float, max_centuries: float = DEFAULT_MAX_CENTURIES) -> float:
    """Return *t* unchanged if it is finite and within ``max_centuries`` of J2000.0."""

    t = float(t)
    if not math.isfinite(t):
        _reject(f"Julian century must be finite, got {t}", t=str(t))
    if abs(t) > max_centuries:
        _reject(
            f"Julian century {t:.6f} is outside +/-{max_centuries} of J2000.0",
            t=t,
            max_centuries=max_centuries,
        )
    return t


def check_latitude(lat: float) -> float:
    """Return *lat* unchanged if it is a latitude in degrees."""

    lat = float(lat)
    if not -90.0 <= lat <= 90.0:
        _reject(f"Latitude must be within [-90, 90] degrees, got {lat}", lat=str(lat))
    return lat


def strict_julian_day_to_century(
    jd: float, max_centuries: float = DEFAULT_MAX_CENTURIES
) -> float:
    """Checked variant of :func:`solar.astro.julian_day_to_century`."""
    return check_century(julian_day_to_century(jd), max_centuries)


def strict_solar_position(
    t: float, lat: float, max_centuries: float = DEFAULT_MAX_CENTURIES
) -> SolarPosition:
    """Checked variant of :func:`solar.astro.solar_position`.

    Raises
    ------
    SolarRangeError
        If *t* is not finite or too far from J2000.0, or *lat* is not a latitude.
    """

    t = check_century(t, max_centuries)
    lat = check_latitude(lat)
    return solar_position(t, lat)
