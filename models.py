"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class SolarQueryParams(BaseModel):
    """Validated query parameters for the ``/solar`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    date_utc: date = Field(..., alias="date", description="UTC calendar date (YYYY-MM-DD)")
    hour_utc: float = Field(
        12.0,
        ge=0.0,
        le=24.0,
        description="UTC time of day in decimal hours",
    )


class SolarResponse(BaseModel):
    """Solar ephemeris for one instant and latitude."""

    ok: bool = True
    date_utc: date = Field(..., description="Requested UTC date")
    hour_utc: float = Field(..., description="Requested UTC time of day (hours)")
    latitude: float = Field(..., description="Latitude in degrees")
    julian_day: float
    julian_century: float = Field(..., description="Julian centuries since J2000.0")
    mean_longitude_deg: float
    mean_anomaly_deg: float
    equation_of_center_deg: float
    true_longitude_deg: float
    true_anomaly_deg: float
    eccentricity: float
    obliquity_deg: float = Field(..., description="Mean obliquity of the ecliptic")
    radius_vector_au: float = Field(..., description="Sun-Earth distance in AU")
    tan_right_ascension: float
    right_ascension_deg: float
    sin_declination: float
    declination_deg: float
    cos_zenith_angle: float = Field(..., ge=0.0, le=1.0)
    cos_zenith_angle_noon: float = Field(..., ge=0.0, le=1.0)


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    max_centuries: float


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
