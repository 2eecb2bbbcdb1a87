"""Low-precision solar ephemeris from truncated Meeus series.

Mean elements assume a circular orbit and advance uniformly in time; true
elements add the equation of the center. Anomalies are measured from
perihelion, longitudes from the mean equinox of date.

Every function accepts Python scalars or numpy arrays and is total over the
reals: out-of-range inputs are extrapolated and NaN/inf propagate. Angles
returned by the API are in degrees; they are converted to radians right
before each trigonometric call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "J2000_JD",
    "DAYS_PER_CENTURY",
    "SolarPosition",
    "gregorian_date_to_julian_day",
    "datetime_to_julian_day",
    "julian_day_to_century",
    "julian_century_to_day",
    "julian_day_to_fractional_day",
    "solar_mean_longitude",
    "solar_mean_anomaly",
    "earth_eccen",
    "solar_eq_of_center",
    "solar_true_longitude",
    "solar_true_anomaly",
    "solar_radius_vector",
    "obliquity_of_ecliptic",
    "tan_solar_right_ascension",
    "solar_right_ascension",
    "sin_solar_declination",
    "solar_declination",
    "cos_solar_zenith_angle",
    "cos_solar_zenith_angle_noon",
    "solar_position",
]

J2000_JD = 2451545.0  # 2000-01-01 12:00 TT.
DAYS_PER_CENTURY = 36525.0
SEMI_MAJOR_AXIS_AU = 1.000001018


def gregorian_date_to_julian_day(
    year: ArrayLike, month: ArrayLike, day: ArrayLike
) -> np.ndarray | np.floating:
    """Return the Julian day of a proleptic Gregorian calendar date.

    Parameters
    ----------
    year, month:
        Calendar year and month (1-12).
    day:
        Day of month; a fractional part carries the time of day.

    Notes
    -----
    January and February count as months 13 and 14 of the previous year.
    Integer parts are truncated toward zero. No calendar validation is done.
    """

    year = np.asarray(year, dtype=float)
    month = np.asarray(month, dtype=float)
    day = np.asarray(day, dtype=float)

    early = month <= 2.0
    year = np.where(early, year - 1.0, year)
    month = np.where(early, month + 12.0, month)

    a = np.trunc(year / 100.0)
    b = 2.0 - a + np.trunc(a / 4.0)
    jd = (
        np.trunc(365.25 * (year + 4716.0))
        + np.trunc(30.6001 * (month + 1.0))
        + day
        + b
        - 1524.5
    )
    return jd


def datetime_to_julian_day(dt: datetime) -> float:
    """Convert a timezone-aware datetime into a Julian day (UTC)."""

    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(UTC)
    seconds = (
        dt_utc.hour * 3600.0
        + dt_utc.minute * 60.0
        + dt_utc.second
        + dt_utc.microsecond / 1_000_000
    )
    return float(
        gregorian_date_to_julian_day(
            dt_utc.year, dt_utc.month, dt_utc.day + seconds / 86400.0
        )
    )


def julian_day_to_century(jd: ArrayLike) -> np.ndarray | np.floating:
    """Julian centuries elapsed since J2000.0."""
    return (np.asarray(jd, dtype=float) - J2000_JD) / DAYS_PER_CENTURY


def julian_century_to_day(t: ArrayLike) -> np.ndarray | np.floating:
    """Inverse of :func:`julian_day_to_century`."""
    return np.asarray(t, dtype=float) * DAYS_PER_CENTURY + J2000_JD


def julian_day_to_fractional_day(jd: ArrayLike) -> np.ndarray | np.floating:
    """Fraction of the day elapsed since the last integral Julian day (noon UT)."""
    jd = np.asarray(jd, dtype=float)
    return jd - np.floor(jd)


def solar_mean_longitude(t: ArrayLike) -> np.ndarray | np.floating:
    """Geometric mean longitude of the Sun in degrees (not normalised)."""
    t = np.asarray(t, dtype=float)
    return 280.46646 + 36000.76983 * t + 0.0003032 * t * t


def solar_mean_anomaly(t: ArrayLike) -> np.ndarray | np.floating:
    """Mean anomaly of the Sun in degrees (not normalised)."""
    t = np.asarray(t, dtype=float)
    return 357.52911 + 35999.05029 * t - 0.0001537 * t * t


def earth_eccen(t: ArrayLike) -> np.ndarray | np.floating:
    """Eccentricity of Earth's orbit."""
    t = np.asarray(t, dtype=float)
    return 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t


def solar_eq_of_center(t: ArrayLike) -> np.ndarray | np.floating:
    """Equation of the center in degrees."""

    t = np.asarray(t, dtype=float)
    m_rad = np.radians(solar_mean_anomaly(t))
    return (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * np.sin(m_rad)
        + (0.019993 - 0.000101 * t) * np.sin(2.0 * m_rad)
        + 0.000289 * np.sin(3.0 * m_rad)
    )


def solar_true_longitude(t: ArrayLike) -> np.ndarray | np.floating:
    """True geometric longitude of the Sun in degrees."""
    return solar_mean_longitude(t) + solar_eq_of_center(t)


def solar_true_anomaly(t: ArrayLike) -> np.ndarray | np.floating:
    """True anomaly of the Sun in degrees."""
    return solar_mean_anomaly(t) + solar_eq_of_center(t)


def _conic_radius(
    true_anomaly_deg: ArrayLike, eccentricity: ArrayLike
) -> np.ndarray | np.floating:
    """Radius of a Keplerian ellipse with Earth's semi-major axis (AU)."""

    e = np.asarray(eccentricity, dtype=float)
    nu_rad = np.radians(true_anomaly_deg)
    return SEMI_MAJOR_AXIS_AU * (1.0 - e * e) / (1.0 + e * np.cos(nu_rad))


def solar_radius_vector(t: ArrayLike) -> np.ndarray | np.floating:
    """Distance between the centers of the Sun and Earth in AU."""
    return _conic_radius(solar_true_anomaly(t), earth_eccen(t))


def obliquity_of_ecliptic(t: ArrayLike) -> np.ndarray | np.floating:
    """Mean obliquity of the ecliptic in degrees, without nutation."""

    t = np.asarray(t, dtype=float)
    eps0 = 23.0 + 26.0 / 60.0 + 21.448 / 3600.0
    return eps0 - (46.8150 * t + 0.00059 * t * t - 0.001813 * t * t * t) / 3600.0


def tan_solar_right_ascension(t: ArrayLike) -> np.ndarray | np.floating:
    """Tangent of the Sun's right ascension.

    Only the ratio is returned; use :func:`solar_right_ascension` when the
    quadrant matters.
    """

    eps_rad = np.radians(obliquity_of_ecliptic(t))
    lon_rad = np.radians(solar_true_longitude(t))
    return np.cos(eps_rad) * np.sin(lon_rad) / np.cos(lon_rad)


def solar_right_ascension(t: ArrayLike) -> np.ndarray | np.floating:
    """Right ascension of the Sun in degrees, in ``[0, 360)``."""

    eps_rad = np.radians(obliquity_of_ecliptic(t))
    lon_rad = np.radians(solar_true_longitude(t))
    alpha = np.degrees(np.arctan2(np.cos(eps_rad) * np.sin(lon_rad), np.cos(lon_rad)))
    return np.mod(alpha, 360.0)


def sin_solar_declination(t: ArrayLike) -> np.ndarray | np.floating:
    """Sine of the Sun's declination. Not clamped."""

    eps_rad = np.radians(obliquity_of_ecliptic(t))
    lon_rad = np.radians(solar_true_longitude(t))
    return np.sin(eps_rad) * np.sin(lon_rad)


def solar_declination(t: ArrayLike) -> np.ndarray | np.floating:
    """Declination of the Sun in degrees."""
    return np.degrees(np.arcsin(np.clip(sin_solar_declination(t), -1.0, 1.0)))


def _cos_zenith(
    sin_delta: ArrayLike, lat: ArrayLike, cos_hour_angle: ArrayLike
) -> np.ndarray | np.floating:
    lat_rad = np.radians(lat)
    cos_delta = np.sqrt(1.0 - sin_delta * sin_delta)
    # Upper bound only absorbs rounding when the Sun is at the zenith.
    return np.clip(
        np.sin(lat_rad) * sin_delta + np.cos(lat_rad) * cos_delta * cos_hour_angle,
        0.0,
        1.0,
    )


def cos_solar_zenith_angle(t: ArrayLike, lat: ArrayLike) -> np.ndarray | np.floating:
    """Cosine of the solar zenith angle at latitude *lat* (degrees).

    The hour angle is taken as ``2*pi`` times the fractional Julian day, so
    whole Julian days (noon UT) map to local noon. Night clamps to 0.
    """

    sin_delta = sin_solar_declination(t)
    jd = julian_century_to_day(t)
    fractional_day = julian_day_to_fractional_day(jd)
    return _cos_zenith(sin_delta, lat, np.cos(2.0 * math.pi * fractional_day))


def cos_solar_zenith_angle_noon(t: ArrayLike, lat: ArrayLike) -> np.ndarray | np.floating:
    """Cosine of the solar zenith angle at local noon of the day of *t*."""
    return _cos_zenith(sin_solar_declination(t), lat, 1.0)


@dataclass(frozen=True)
class SolarPosition:
    """Every solar quantity evaluated for one instant and latitude."""

    julian_day: float
    julian_century: float
    mean_longitude_deg: float
    mean_anomaly_deg: float
    equation_of_center_deg: float
    true_longitude_deg: float
    true_anomaly_deg: float
    eccentricity: float
    obliquity_deg: float
    radius_vector_au: float
    tan_right_ascension: float
    right_ascension_deg: float
    sin_declination: float
    declination_deg: float
    cos_zenith_angle: float
    cos_zenith_angle_noon: float


def solar_position(t: float, lat: float) -> SolarPosition:
    """Evaluate all quantities for scalar Julian century *t* and latitude *lat*."""

    return SolarPosition(
        julian_day=float(julian_century_to_day(t)),
        julian_century=float(t),
        mean_longitude_deg=float(solar_mean_longitude(t)),
        mean_anomaly_deg=float(solar_mean_anomaly(t)),
        equation_of_center_deg=float(solar_eq_of_center(t)),
        true_longitude_deg=float(solar_true_longitude(t)),
        true_anomaly_deg=float(solar_true_anomaly(t)),
        eccentricity=float(earth_eccen(t)),
        obliquity_deg=float(obliquity_of_ecliptic(t)),
        radius_vector_au=float(solar_radius_vector(t)),
        tan_right_ascension=float(tan_solar_right_ascension(t)),
        right_ascension_deg=float(solar_right_ascension(t)),
        sin_declination=float(sin_solar_declination(t)),
        declination_deg=float(solar_declination(t)),
        cos_zenith_angle=float(cos_solar_zenith_angle(t, lat)),
        cos_zenith_angle_noon=float(cos_solar_zenith_angle_noon(t, lat)),
    )
