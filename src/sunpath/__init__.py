"""
sunpath

Apparent Sun position (elevation and azimuth) for an instant and an
observer on Earth from a low-order analytic ephemeris, with conversions
to scene direction vectors and orientations, twilight classification,
sun-light intensity and colour temperature, and yearly daily sampling.
"""

from sunpath.domain.time_systems import (
    J2000_JD,
    ensure_utc,
    datetime_to_jd,
    days_since_j2000,
    julian_centuries_j2000,
    greenwich_sidereal_time_deg,
)
from sunpath.domain.solar import (
    OutOfRangeError,
    SolarEquatorialCoordinates,
    SolarPosition,
    validate_observer,
    solar_equatorial_coordinates,
    local_hour_angle_rad,
    equatorial_to_horizontal,
    calculate_solar_position,
    calculate_solar_position_now,
)
from sunpath.domain.orientation import (
    IDENTITY_QUATERNION,
    sun_direction,
    sun_direction_from_position,
    direction_to_angles,
    look_rotation,
    sun_rotation,
    sun_rotation_from_position,
    rotate_vector,
    quaternion_slerp,
)
from sunpath.domain.twilight import (
    SunState,
    classify_sun_state,
    classify_solar_position,
    is_sun_above_horizon,
)
from sunpath.domain.lighting import (
    SunLightConfig,
    smoothstep,
    intensity_factor,
    light_intensity,
    color_temperature_k,
)
from sunpath.domain.yearly import (
    YearlyElevationStats,
    days_in_year,
    longitude_utc_offset_hours,
    format_utc_offset,
    solar_position_for_day,
    rotation_for_day,
    interpolate_angles,
    yearly_elevation_statistics,
)

__version__ = "0.1.0"

__all__ = [
    "J2000_JD",
    "ensure_utc",
    "datetime_to_jd",
    "days_since_j2000",
    "julian_centuries_j2000",
    "greenwich_sidereal_time_deg",
    "OutOfRangeError",
    "SolarEquatorialCoordinates",
    "SolarPosition",
    "validate_observer",
    "solar_equatorial_coordinates",
    "local_hour_angle_rad",
    "equatorial_to_horizontal",
    "calculate_solar_position",
    "calculate_solar_position_now",
    "IDENTITY_QUATERNION",
    "sun_direction",
    "sun_direction_from_position",
    "direction_to_angles",
    "look_rotation",
    "sun_rotation",
    "sun_rotation_from_position",
    "rotate_vector",
    "quaternion_slerp",
    "SunState",
    "classify_sun_state",
    "classify_solar_position",
    "is_sun_above_horizon",
    "SunLightConfig",
    "smoothstep",
    "intensity_factor",
    "light_intensity",
    "color_temperature_k",
    "YearlyElevationStats",
    "days_in_year",
    "longitude_utc_offset_hours",
    "format_utc_offset",
    "solar_position_for_day",
    "rotation_for_day",
    "interpolate_angles",
    "yearly_elevation_statistics",
]
