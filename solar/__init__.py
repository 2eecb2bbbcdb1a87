"""Solar ephemeris and illumination geometry from truncated Meeus series."""

from .astro import (
    SolarPosition,
    cos_solar_zenith_angle,
    cos_solar_zenith_angle_noon,
    datetime_to_julian_day,
    earth_eccen,
    gregorian_date_to_julian_day,
    julian_century_to_day,
    julian_day_to_century,
    obliquity_of_ecliptic,
    sin_solar_declination,
    solar_declination,
    solar_eq_of_center,
    solar_mean_anomaly,
    solar_mean_longitude,
    solar_position,
    solar_radius_vector,
    solar_right_ascension,
    solar_true_anomaly,
    solar_true_longitude,
    tan_solar_right_ascension,
)
from .strict import SolarRangeError, strict_solar_position

__all__ = [
    "SolarPosition",
    "SolarRangeError",
    "cos_solar_zenith_angle",
    "cos_solar_zenith_angle_noon",
    "datetime_to_julian_day",
    "earth_eccen",
    "gregorian_date_to_julian_day",
    "julian_century_to_day",
    "julian_day_to_century",
    "obliquity_of_ecliptic",
    "sin_solar_declination",
    "solar_declination",
    "solar_eq_of_center",
    "solar_mean_anomaly",
    "solar_mean_longitude",
    "solar_position",
    "solar_radius_vector",
    "solar_right_ascension",
    "solar_true_anomaly",
    "solar_true_longitude",
    "strict_solar_position",
    "tan_solar_right_ascension",
]
