# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Twilight classification by solar elevation.

Bands are half-open on the upper end: the lower bound belongs to the
brighter band, so exactly -6° is civil twilight and exactly 0° is day.
"""
from enum import Enum

from sunpath.domain.solar import SolarPosition


class SunState(Enum):
    NIGHT = "night"
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"
    NAUTICAL_TWILIGHT = "nautical_twilight"
    CIVIL_TWILIGHT = "civil_twilight"
    DAY = "day"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    SunState.NIGHT: "Night (Sun more than 18° below the horizon)",
    SunState.ASTRONOMICAL_TWILIGHT: "Astronomical twilight (Sun 12° to 18° below the horizon)",
    SunState.NAUTICAL_TWILIGHT: "Nautical twilight (Sun 6° to 12° below the horizon)",
    SunState.CIVIL_TWILIGHT: "Civil twilight (Sun 0° to 6° below the horizon)",
    SunState.DAY: "Day (Sun above the horizon)",
}

# (upper bound exclusive, state), ascending
_BANDS: tuple[tuple[float, SunState], ...] = (
    (-18.0, SunState.NIGHT),
    (-12.0, SunState.ASTRONOMICAL_TWILIGHT),
    (-6.0, SunState.NAUTICAL_TWILIGHT),
    (0.0, SunState.CIVIL_TWILIGHT),
)


def classify_sun_state(elevation_deg: float) -> SunState:
    """Twilight band for a solar elevation in degrees."""
    for upper, state in _BANDS:
        if elevation_deg < upper:
            return state
    return SunState.DAY


def classify_solar_position(position: SolarPosition) -> SunState:
    """Twilight band for a computed SolarPosition."""
    return classify_sun_state(position.elevation_deg)


def is_sun_above_horizon(elevation_deg: float) -> bool:
    """True when the Sun is strictly above the horizon."""
    return elevation_deg > 0.0
