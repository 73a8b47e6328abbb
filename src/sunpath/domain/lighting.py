# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Directional sun-light parameters derived from solar elevation.

Intensity fades in with a smoothstep from the end of astronomical
twilight (-18°) to the horizon (0°). Colour temperature is linearly
interpolated from a horizon value to a zenith value over 0°..90°.

SunLightConfig clamps its fields on construction through ``create``,
unlike calculate_solar_position which rejects bad observer coordinates.
"""
import logging
from dataclasses import dataclass, replace

import numpy as np

from sunpath.domain.solar import SolarPosition

logger = logging.getLogger(__name__)

ELEVATION_RANGE_DEG: tuple[float, float] = (-90.0, 90.0)
AZIMUTH_RANGE_DEG: tuple[float, float] = (0.0, 360.0)
ZENITH_COLOR_TEMPERATURE_RANGE_K: tuple[float, float] = (2000.0, 20000.0)
HORIZON_COLOR_TEMPERATURE_RANGE_K: tuple[float, float] = (1000.0, 10000.0)

SUN_COLOR_TEMPERATURE_K: float = 5778.0  # Photosphere effective temperature
SUNSET_COLOR_TEMPERATURE_K: float = 2000.0

_FADE_START_DEG = -18.0
_FADE_END_DEG = 0.0


def _clamp(name: str, value: float, lower: float, upper: float) -> float:
    clamped = float(np.clip(value, lower, upper))
    if clamped != value:
        logger.debug("Clamped %s from %s to %s", name, value, clamped)
    return clamped


@dataclass(frozen=True)
class SunLightConfig:
    """Sun angles and light parameters for a directional sun light.

    Build with ``SunLightConfig.create`` to get clamping; the plain
    constructor stores values as given.
    """
    elevation_deg: float = 0.0
    azimuth_deg: float = 0.0
    max_intensity: float = 1.0
    zenith_color_temperature_k: float = SUN_COLOR_TEMPERATURE_K
    horizon_color_temperature_k: float = SUNSET_COLOR_TEMPERATURE_K

    @classmethod
    def create(
        cls,
        elevation_deg: float = 0.0,
        azimuth_deg: float = 0.0,
        max_intensity: float = 1.0,
        zenith_color_temperature_k: float = SUN_COLOR_TEMPERATURE_K,
        horizon_color_temperature_k: float = SUNSET_COLOR_TEMPERATURE_K,
    ) -> "SunLightConfig":
        """Construct a config with every field clamped into range."""
        return cls(
            elevation_deg=_clamp("elevation_deg", elevation_deg, *ELEVATION_RANGE_DEG),
            azimuth_deg=_clamp("azimuth_deg", azimuth_deg, *AZIMUTH_RANGE_DEG),
            max_intensity=_clamp("max_intensity", max_intensity, 0.0, np.inf),
            zenith_color_temperature_k=_clamp(
                "zenith_color_temperature_k", zenith_color_temperature_k,
                *ZENITH_COLOR_TEMPERATURE_RANGE_K,
            ),
            horizon_color_temperature_k=_clamp(
                "horizon_color_temperature_k", horizon_color_temperature_k,
                *HORIZON_COLOR_TEMPERATURE_RANGE_K,
            ),
        )

    @classmethod
    def from_position(
        cls,
        position: SolarPosition,
        max_intensity: float = 1.0,
        zenith_color_temperature_k: float = SUN_COLOR_TEMPERATURE_K,
        horizon_color_temperature_k: float = SUNSET_COLOR_TEMPERATURE_K,
    ) -> "SunLightConfig":
        """Config pointing the light along a computed SolarPosition."""
        return cls.create(
            elevation_deg=position.elevation_deg,
            azimuth_deg=position.azimuth_deg,
            max_intensity=max_intensity,
            zenith_color_temperature_k=zenith_color_temperature_k,
            horizon_color_temperature_k=horizon_color_temperature_k,
        )

    def with_angles(self, elevation_deg: float, azimuth_deg: float) -> "SunLightConfig":
        """Copy of this config with new (clamped) sun angles."""
        return replace(
            self,
            elevation_deg=_clamp("elevation_deg", elevation_deg, *ELEVATION_RANGE_DEG),
            azimuth_deg=_clamp("azimuth_deg", azimuth_deg, *AZIMUTH_RANGE_DEG),
        )


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite interpolation 3t² - 2t³ with t = (x - edge0)/(edge1 - edge0) clamped to [0, 1]."""
    t = min(1.0, max(0.0, (x - edge0) / (edge1 - edge0)))
    return t * t * (3.0 - 2.0 * t)


def intensity_factor(elevation_deg: float) -> float:
    """Relative light intensity in [0, 1]: 0 at or below -18°, 1 at or above 0°."""
    return smoothstep(_FADE_START_DEG, _FADE_END_DEG, elevation_deg)


def light_intensity(config: SunLightConfig) -> float:
    """Light intensity: max_intensity scaled by the elevation fade."""
    return intensity_factor(config.elevation_deg) * config.max_intensity


def color_temperature_k(config: SunLightConfig) -> float:
    """Light colour temperature in kelvin for the config's elevation.

    Below the horizon the horizon temperature is held.
    """
    t = min(1.0, max(0.0, config.elevation_deg / 90.0))
    horizon = config.horizon_color_temperature_k
    return horizon + (config.zenith_color_temperature_k - horizon) * t
