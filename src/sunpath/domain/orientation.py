# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sun direction vectors and orientations.

Scene frame (Y up, Z north):
    +X — east
    +Y — up (zenith)
    +Z — north

Quaternions are scalar-first unit quaternions (w, x, y, z). The sun
rotation carries the forward axis +Z onto the direction of the Sun.
"""
import math

import numpy as np

from sunpath.domain.solar import SolarPosition

Vector3 = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]

IDENTITY_QUATERNION: Quaternion = (1.0, 0.0, 0.0, 0.0)

FORWARD: Vector3 = (0.0, 0.0, 1.0)
UP: Vector3 = (0.0, 1.0, 0.0)

# Direction closer than this to the up axis is treated as parallel.
_PARALLEL_EPS = 1e-9


def sun_direction(elevation_deg: float, azimuth_deg: float) -> Vector3:
    """
    Unit vector pointing at the Sun.

        x = sin(az)·cos(el)   (east)
        y = sin(el)           (up)
        z = cos(az)·cos(el)   (north)

    Unit length follows from sin² + cos² = 1.
    """
    el = math.radians(elevation_deg)
    az = math.radians(azimuth_deg)
    cos_el = math.cos(el)
    return (
        math.sin(az) * cos_el,
        math.sin(el),
        math.cos(az) * cos_el,
    )


def sun_direction_from_position(position: SolarPosition) -> Vector3:
    """Unit vector pointing at the Sun for a computed SolarPosition."""
    return sun_direction(position.elevation_deg, position.azimuth_deg)


def direction_to_angles(direction: Vector3) -> tuple[float, float]:
    """
    Recover (elevation_deg, azimuth_deg) from a direction vector.

    The vector is normalized first. Azimuth is in [0, 360); at the
    zenith and nadir it is whatever arctan2 returns for a zero
    horizontal component (0).

    Raises:
        ValueError: zero-length direction.
    """
    v = np.asarray(direction, dtype=np.float64)
    norm = float(np.linalg.norm(v))
    if norm == 0.0:
        raise ValueError("direction must be non-zero")
    x, y, z = v / norm

    elevation_deg = math.degrees(math.asin(max(-1.0, min(1.0, float(y)))))
    azimuth_deg = math.degrees(math.atan2(float(x), float(z))) % 360.0
    if azimuth_deg >= 360.0:
        azimuth_deg = 0.0
    return elevation_deg, azimuth_deg


def _matrix_to_quaternion(m: np.ndarray) -> Quaternion:
    """Shepperd's method: branch on the largest diagonal term for stability."""
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        s = 2.0 * math.sqrt(trace + 1.0)
        w = 0.25 * s
        x = (m[2, 1] - m[1, 2]) / s
        y = (m[0, 2] - m[2, 0]) / s
        z = (m[1, 0] - m[0, 1]) / s
    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
        w = (m[2, 1] - m[1, 2]) / s
        x = 0.25 * s
        y = (m[0, 1] + m[1, 0]) / s
        z = (m[0, 2] + m[2, 0]) / s
    elif m[1, 1] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
        w = (m[0, 2] - m[2, 0]) / s
        x = (m[0, 1] + m[1, 0]) / s
        y = 0.25 * s
        z = (m[1, 2] + m[2, 1]) / s
    else:
        s = 2.0 * math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
        w = (m[1, 0] - m[0, 1]) / s
        x = (m[0, 2] + m[2, 0]) / s
        y = (m[1, 2] + m[2, 1]) / s
        z = 0.25 * s

    q = np.array([w, x, y, z], dtype=np.float64)
    q /= np.linalg.norm(q)
    if q[0] < 0.0:
        q = -q
    return float(q[0]), float(q[1]), float(q[2]), float(q[3])


def look_rotation(forward: Vector3, up: Vector3 = UP) -> Quaternion:
    """
    Rotation taking +Z onto ``forward`` and keeping +Y as close to ``up``
    as possible.

    The rotation matrix has columns [right, true_up, forward] with
        right   = normalize(up × forward)
        true_up = forward × right

    When ``forward`` is parallel to ``up`` the north axis +Z is used as the
    up reference instead (and +Y if forward is itself along Z), so the call
    never fails: looking straight up or straight down yields a rotation
    whose local up points north.

    Raises:
        ValueError: zero-length forward vector.
    """
    f = np.asarray(forward, dtype=np.float64)
    f_norm = float(np.linalg.norm(f))
    if f_norm == 0.0:
        raise ValueError("forward must be non-zero")
    f = f / f_norm

    up_ref = np.asarray(up, dtype=np.float64)
    right = np.cross(up_ref, f)
    if float(np.linalg.norm(right)) < _PARALLEL_EPS:
        up_ref = np.array(FORWARD)
        right = np.cross(up_ref, f)
        if float(np.linalg.norm(right)) < _PARALLEL_EPS:
            up_ref = np.array(UP)
            right = np.cross(up_ref, f)
    right = right / np.linalg.norm(right)
    true_up = np.cross(f, right)

    m = np.column_stack((right, true_up, f))
    return _matrix_to_quaternion(m)


def sun_rotation(elevation_deg: float, azimuth_deg: float) -> Quaternion:
    """Orientation whose forward axis points at the Sun, global up as reference."""
    return look_rotation(sun_direction(elevation_deg, azimuth_deg), UP)


def sun_rotation_from_position(position: SolarPosition) -> Quaternion:
    """Orientation whose forward axis points at the Sun for a SolarPosition."""
    return sun_rotation(position.elevation_deg, position.azimuth_deg)


def rotate_vector(quaternion: Quaternion, vector: Vector3) -> Vector3:
    """
    Rotate a vector by a unit quaternion.

    Rodrigues form for unit quaternions:
        t = 2 * (q_vec × v)
        v' = v + w * t + (q_vec × t)
    """
    q = np.asarray(quaternion, dtype=np.float64)
    v = np.asarray(vector, dtype=np.float64)

    w = q[0]
    q_vec = q[1:4]

    t = 2.0 * np.cross(q_vec, v)
    out = v + w * t + np.cross(q_vec, t)
    return float(out[0]), float(out[1]), float(out[2])


def quaternion_slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """
    Spherical linear interpolation between unit quaternions.

    Takes the shorter arc (q and -q describe the same rotation) and falls
    back to normalized linear interpolation when the inputs nearly
    coincide. ``t`` is not clamped.
    """
    a = np.asarray(q0, dtype=np.float64)
    b = np.asarray(q1, dtype=np.float64)

    dot = float(np.dot(a, b))
    if dot < 0.0:
        b = -b
        dot = -dot

    if dot > 0.9995:
        out = a + t * (b - a)
    else:
        theta = math.acos(min(1.0, dot))
        sin_theta = math.sin(theta)
        out = (math.sin((1.0 - t) * theta) / sin_theta) * a \
            + (math.sin(t * theta) / sin_theta) * b

    out = out / np.linalg.norm(out)
    if out[0] < 0.0:
        out = -out
    return float(out[0]), float(out[1]), float(out[2]), float(out[3])
