# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris in the observer's horizontal frame.

Low-order Sun position (Astronomical Almanac low-precision formulae):
Julian Day, solar right ascension and declination, local hour angle,
then the equatorial to horizontal transform. Accuracy is about ±0.5°
in elevation and ±1.0° in azimuth.

Conventions:
    elevation — degrees above the horizon, [-90, 90]
    azimuth   — degrees clockwise from geographic north, [0, 360)
"""
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

import numpy as np

from sunpath.domain.time_systems import (
    datetime_to_jd,
    days_since_j2000,
    greenwich_sidereal_time_deg,
)

LATITUDE_RANGE_DEG: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE_DEG: tuple[float, float] = (-180.0, 180.0)

_TWO_PI = 2.0 * np.pi


class OutOfRangeError(ValueError):
    """An observer coordinate lies outside its valid domain."""

    def __init__(self, field: str, value: float, lower: float, upper: float):
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"{field} must be within [{lower}, {upper}], got {value}"
        )


@dataclass(frozen=True)
class SolarEquatorialCoordinates:
    """Apparent Sun position on the celestial sphere."""
    right_ascension_rad: float  # [0, 2π)
    declination_rad: float


@dataclass(frozen=True)
class SolarPosition:
    """Sun elevation/azimuth seen from an observer at an instant."""
    elevation_deg: float
    azimuth_deg: float
    instant: datetime
    latitude_deg: float
    longitude_deg: float

    def __str__(self) -> str:
        return (
            f"Sun elevation {self.elevation_deg:.2f}°, "
            f"azimuth {self.azimuth_deg:.2f}° "
            f"at {self.instant:%Y-%m-%d %H:%M:%S %z} "
            f"(lat {self.latitude_deg:.4f}°, lon {self.longitude_deg:.4f}°)"
        )


def _check_range(field: str, value: float, bounds: tuple[float, float]) -> None:
    lower, upper = bounds
    # Written as a negated chain so NaN is rejected too.
    if not lower <= value <= upper:
        raise OutOfRangeError(field, value, lower, upper)


def validate_observer(latitude_deg: float, longitude_deg: float) -> None:
    """Raise OutOfRangeError unless latitude/longitude are in range."""
    _check_range("latitude", latitude_deg, LATITUDE_RANGE_DEG)
    _check_range("longitude", longitude_deg, LONGITUDE_RANGE_DEG)


def solar_equatorial_coordinates(jd: float) -> SolarEquatorialCoordinates:
    """Sun right ascension and declination for a Julian Day.

    Args:
        jd: Julian Day (UTC).

    Returns:
        SolarEquatorialCoordinates with RA normalized to [0, 2π).
    """
    n = days_since_j2000(jd)

    # Mean longitude (degrees)
    L_deg = (280.460 + 0.9856474 * n) % 360.0

    # Mean anomaly
    g_rad = float(np.radians((357.528 + 0.9856003 * n) % 360.0))

    # Ecliptic longitude
    lambda_rad = float(np.radians(
        L_deg + 1.915 * np.sin(g_rad) + 0.020 * np.sin(2.0 * g_rad)
    ))

    # Obliquity of the ecliptic
    eps_rad = float(np.radians(23.439 - 0.0000004 * n))

    ra_rad = float(np.arctan2(np.cos(eps_rad) * np.sin(lambda_rad),
                              np.cos(lambda_rad)))
    dec_rad = float(np.arcsin(np.sin(eps_rad) * np.sin(lambda_rad)))

    if ra_rad < 0:
        ra_rad += _TWO_PI

    return SolarEquatorialCoordinates(
        right_ascension_rad=ra_rad,
        declination_rad=dec_rad,
    )


def local_hour_angle_rad(
    jd: float,
    longitude_deg: float,
    right_ascension_rad: float,
) -> float:
    """Local hour angle of the Sun.

    Local sidereal time is GMST shifted by the east-positive longitude.
    The result is not wrapped; only its sine and cosine are used.
    """
    lst_deg = (greenwich_sidereal_time_deg(jd) + longitude_deg) % 360.0
    return float(np.radians(lst_deg)) - right_ascension_rad


def equatorial_to_horizontal(
    declination_rad: float,
    hour_angle_rad: float,
    latitude_deg: float,
) -> tuple[float, float]:
    """
    Rotate equatorial coordinates into the observer's horizontal frame.

    At the poles cos(φ) is zero; arctan2 accepts a zero second argument,
    so no special case is needed.

    Args:
        declination_rad: Sun declination in radians.
        hour_angle_rad: Local hour angle in radians.
        latitude_deg: Observer latitude in degrees.

    Returns:
        (elevation_deg, azimuth_deg) with azimuth in [0, 360).
    """
    lat_rad = float(np.radians(latitude_deg))
    sin_lat = float(np.sin(lat_rad))
    cos_lat = float(np.cos(lat_rad))
    sin_dec = float(np.sin(declination_rad))
    cos_dec = float(np.cos(declination_rad))
    cos_h = float(np.cos(hour_angle_rad))

    # Rounding can push the argument a hair past ±1 near the zenith.
    sin_elev = float(np.clip(sin_dec * sin_lat + cos_dec * cos_lat * cos_h, -1.0, 1.0))
    elevation_deg = float(np.degrees(np.arcsin(sin_elev)))

    azimuth_rad = float(np.arctan2(
        -np.sin(hour_angle_rad),
        np.tan(declination_rad) * cos_lat - sin_lat * cos_h,
    ))
    azimuth_deg = float(np.degrees(azimuth_rad))
    if azimuth_deg < 0:
        azimuth_deg += 360.0
    if azimuth_deg >= 360.0:
        azimuth_deg -= 360.0

    return elevation_deg, azimuth_deg


def calculate_solar_position(
    instant: datetime,
    latitude_deg: float,
    longitude_deg: float,
) -> SolarPosition:
    """
    Sun elevation and azimuth for an observer at an instant.

    The instant is converted to UTC first, so the stated offset does not
    change the result. Naive datetimes are treated as UTC.

    Args:
        instant: Observation time.
        latitude_deg: Observer latitude in degrees [-90, 90].
        longitude_deg: Observer longitude in degrees [-180, 180], east positive.

    Returns:
        SolarPosition echoing the inputs unchanged.

    Raises:
        OutOfRangeError: latitude or longitude outside its domain.
    """
    validate_observer(latitude_deg, longitude_deg)

    jd = datetime_to_jd(instant)
    equatorial = solar_equatorial_coordinates(jd)
    hour_angle = local_hour_angle_rad(
        jd, longitude_deg, equatorial.right_ascension_rad,
    )
    elevation_deg, azimuth_deg = equatorial_to_horizontal(
        equatorial.declination_rad, hour_angle, latitude_deg,
    )

    return SolarPosition(
        elevation_deg=elevation_deg,
        azimuth_deg=azimuth_deg,
        instant=instant,
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
    )


def calculate_solar_position_now(
    latitude_deg: float,
    longitude_deg: float,
    tz: tzinfo | None = None,
) -> SolarPosition:
    """Sun position for the current time, stamped in ``tz`` (UTC if None)."""
    now = datetime.now(tz if tz is not None else timezone.utc)
    return calculate_solar_position(now, latitude_deg, longitude_deg)
