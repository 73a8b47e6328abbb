# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sun position sampled once per day over a year.

Each day is evaluated at a fixed local clock time. The local clock is
approximated from longitude alone (15° per hour, rounded to the
nearest quarter hour) rather than from civil time zone rules, so
Tokyo at 139.65°E runs on UTC+09:15.
"""
import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from sunpath.domain.orientation import IDENTITY_QUATERNION, Quaternion, sun_rotation
from sunpath.domain.solar import SolarPosition, calculate_solar_position, validate_observer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearlyElevationStats:
    """Extremes of the sampled daily solar elevation over one year."""
    year: int
    days_in_year: int
    max_elevation_deg: float
    max_elevation_date: date
    min_elevation_deg: float
    min_elevation_date: date
    samples: int


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def longitude_utc_offset_hours(longitude_deg: float) -> float:
    """Mean-solar UTC offset for a longitude, rounded to 15 minutes.

    Halves round to even (9.125 h -> 9.0 h).
    """
    return round(longitude_deg / 15.0 * 4.0) / 4.0


def format_utc_offset(longitude_deg: float) -> str:
    """Longitude-derived offset as ``UTC±HH:MM``."""
    offset_hours = longitude_utc_offset_hours(longitude_deg)
    sign = "+" if offset_hours >= 0 else "-"
    total_minutes = int(round(abs(offset_hours) * 60.0))
    hours, minutes = divmod(total_minutes, 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def _local_datetime(
    year: int,
    day_of_year: int,
    longitude_deg: float,
    hour: int,
    minute: int,
) -> datetime:
    n_days = days_in_year(year)
    if not 1 <= day_of_year <= n_days:
        raise ValueError(
            f"day_of_year must be within [1, {n_days}] for {year}, got {day_of_year}"
        )
    day = date(year, 1, 1) + timedelta(days=day_of_year - 1)
    tz = timezone(timedelta(hours=longitude_utc_offset_hours(longitude_deg)))
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=tz)


def solar_position_for_day(
    year: int,
    day_of_year: int,
    latitude_deg: float,
    longitude_deg: float,
    hour: int = 12,
    minute: int = 0,
) -> SolarPosition:
    """
    Sun position on a given day of the year at a local clock time.

    Args:
        year: Calendar year.
        day_of_year: 1-based day number (1..365/366).
        latitude_deg: Observer latitude in degrees [-90, 90].
        longitude_deg: Observer longitude in degrees [-180, 180].
        hour: Local clock hour (0-23).
        minute: Local clock minute (0-59).

    Returns:
        SolarPosition stamped with the longitude-derived local time.

    Raises:
        OutOfRangeError: latitude or longitude outside its domain.
        ValueError: day_of_year outside the year.
    """
    validate_observer(latitude_deg, longitude_deg)
    instant = _local_datetime(year, day_of_year, longitude_deg, hour, minute)
    return calculate_solar_position(instant, latitude_deg, longitude_deg)


def rotation_for_day(
    year: int,
    day_of_year: int,
    latitude_deg: float,
    longitude_deg: float,
    hour: int = 12,
    minute: int = 0,
) -> Quaternion:
    """Sun orientation for a day of the year; identity for an invalid day."""
    n_days = days_in_year(year)
    if not 1 <= day_of_year <= n_days:
        logger.warning(
            "Invalid day of year %d (valid range: 1-%d), returning identity rotation",
            day_of_year, n_days,
        )
        return IDENTITY_QUATERNION

    position = solar_position_for_day(
        year, day_of_year, latitude_deg, longitude_deg, hour, minute,
    )
    return sun_rotation(position.elevation_deg, position.azimuth_deg)


def interpolate_angles(
    current: SolarPosition,
    following: SolarPosition,
    t: float,
) -> tuple[float, float]:
    """
    Blend two sun positions, e.g. consecutive days.

    Elevation is interpolated linearly, azimuth along the shorter arc
    so 350° -> 10° passes through north. ``t`` is clamped to [0, 1].

    Returns:
        (elevation_deg, azimuth_deg) with azimuth in [0, 360).
    """
    t = min(1.0, max(0.0, t))
    elevation = current.elevation_deg + (following.elevation_deg - current.elevation_deg) * t

    delta = (following.azimuth_deg - current.azimuth_deg) % 360.0
    if delta > 180.0:
        delta -= 360.0
    azimuth = (current.azimuth_deg + delta * t) % 360.0
    if azimuth >= 360.0:
        azimuth = 0.0

    return elevation, azimuth


def yearly_elevation_statistics(
    year: int,
    latitude_deg: float,
    longitude_deg: float,
    hour: int = 12,
    minute: int = 0,
    step_days: int = 10,
) -> YearlyElevationStats:
    """
    Highest and lowest daily elevation over a year, sampled every ``step_days``.

    Sampling starts on day 1. Ties keep the earliest day.

    Raises:
        OutOfRangeError: latitude or longitude outside its domain.
        ValueError: step_days < 1.
    """
    if step_days < 1:
        raise ValueError(f"step_days must be >= 1, got {step_days}")
    validate_observer(latitude_deg, longitude_deg)

    n_days = days_in_year(year)
    positions = [
        solar_position_for_day(year, day, latitude_deg, longitude_deg, hour, minute)
        for day in range(1, n_days + 1, step_days)
    ]

    highest = max(positions, key=lambda p: p.elevation_deg)
    lowest = min(positions, key=lambda p: p.elevation_deg)

    return YearlyElevationStats(
        year=year,
        days_in_year=n_days,
        max_elevation_deg=highest.elevation_deg,
        max_elevation_date=highest.instant.date(),
        min_elevation_deg=lowest.elevation_deg,
        min_elevation_date=lowest.instant.date(),
        samples=len(positions),
    )
