"""Closed polylines approximating one revolution of a body's orbit."""

import logging
import math
from datetime import datetime

import numpy as np

from . import constants as C
from .clock import to_julian_date
from .propagator import current_elements, propagate

logger = logging.getLogger(__name__)


def orbital_period_s(a_km: float, mu: float = C.MU_SUN_KM3PS2) -> float:
    """Two-body orbital period in seconds for semi-major axis ``a_km``."""
    return 2.0 * math.pi * math.sqrt(a_km**3 / mu)


def _freeze(points: np.ndarray) -> np.ndarray:
    points.setflags(write=False)
    return points


def _check_count(point_count: int) -> int:
    point_count = int(point_count)
    if point_count < 1:
        raise ValueError(f"point_count must be at least 1, got {point_count}")
    return point_count


def sample_circle(radius_km: float, point_count: int = C.DEFAULT_ORBIT_POINTS) -> np.ndarray:
    """Circle of ``radius_km`` in the ``z = 0`` plane with ``point_count + 1`` points."""
    point_count = _check_count(point_count)
    theta = 2.0 * np.pi * np.arange(point_count + 1) / point_count
    points = np.zeros((point_count + 1, 3), dtype=float)
    points[:, 0] = radius_km * np.cos(theta)
    points[:, 1] = radius_km * np.sin(theta)
    points[-1] = points[0]
    return _freeze(points)


def sample_orbit(
    body,
    start_time: datetime,
    point_count: int = C.DEFAULT_ORBIT_POINTS,
    mu: float = C.MU_SUN_KM3PS2,
) -> np.ndarray:
    """Sample one orbital period of ``body`` starting at ``start_time``.

    Bodies with catalog elements are propagated at ``point_count`` equally
    spaced instants spanning the two-body period of their current semi-major
    axis. Bodies without elements get a circle at their reference distance.
    The returned array has shape ``(point_count + 1, 3)``, its last row equals
    its first, and it is read-only.
    """
    point_count = _check_count(point_count)
    if body.elements is None:
        return sample_circle(body.reference_distance_km, point_count)

    start_jd = to_julian_date(start_time)
    a_km = current_elements(body.elements, start_jd).a_km
    period_days = orbital_period_s(a_km, mu) / C.SECONDS_PER_DAY
    points = np.empty((point_count + 1, 3), dtype=float)
    for k in range(point_count):
        points[k] = propagate(body.elements, start_jd + period_days * k / point_count)
    points[-1] = points[0]
    logger.debug("Sampled %s orbit: %d points over %.1f days", body.name, point_count, period_days)
    return _freeze(points)


class OrbitSampler:
    """Produce orbit traces with a fixed resolution and gravitational parameter."""

    def __init__(self, point_count: int = C.DEFAULT_ORBIT_POINTS, mu: float = C.MU_SUN_KM3PS2):
        self.point_count = _check_count(point_count)
        self.mu = float(mu)

    def sample(self, body, start_time: datetime) -> np.ndarray:
        return sample_orbit(body, start_time, self.point_count, self.mu)

    def sample_all(self, bodies, start_time: datetime) -> dict:
        """Return ``{body.key: trace}`` for every body."""
        return {body.key: self.sample(body, start_time) for body in bodies}

