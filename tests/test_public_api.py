# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the package-level re-exports."""
from datetime import datetime, timedelta, timezone

import sunpath


class TestPublicApi:

    def test_all_names_resolve(self):
        for name in sunpath.__all__:
            assert hasattr(sunpath, name), name

    def test_end_to_end(self):
        """Position → direction, rotation, band and light from the top-level package."""
        jst = timezone(timedelta(hours=9))
        sp = sunpath.calculate_solar_position(
            datetime(2025, 3, 21, 12, 0, tzinfo=jst), 35.6762, 139.6503,
        )
        assert sunpath.classify_solar_position(sp) is sunpath.SunState.DAY
        direction = sunpath.sun_direction_from_position(sp)
        assert direction[1] > 0.5
        q = sunpath.sun_rotation_from_position(sp)
        rotated = sunpath.rotate_vector(q, (0.0, 0.0, 1.0))
        for a, b in zip(rotated, direction):
            assert abs(a - b) < 1e-9
        cfg = sunpath.SunLightConfig.from_position(sp)
        assert sunpath.light_intensity(cfg) == 1.0
