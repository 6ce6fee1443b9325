"""Two-body propagation of Keplerian elements to an epoch.

Everything in this module is a pure function of its arguments: elements are
evaluated at the requested epoch with their secular rates, Kepler's equation
is solved for the eccentric anomaly and the perifocal position is rotated into
the heliocentric ecliptic frame. Positions are returned in kilometres and
velocities in kilometres per second.
"""

import logging
import math
from datetime import datetime

import numpy as np

from . import constants as C
from .clock import julian_centuries, to_julian_date
from .elements import CurrentElements, KeplerianElements

logger = logging.getLogger(__name__)


def normalize_degrees(angle: float) -> float:
    """Wrap ``angle`` into the interval ``(-180, 180]``."""
    wrapped = math.fmod(angle, 360.0)
    if wrapped > 180.0:
        wrapped -= 360.0
    elif wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def solve_kepler(
    mean_anomaly: float,
    e: float,
    tol: float = C.KEPLER_TOLERANCE,
    max_iter: int = C.KEPLER_MAX_ITER,
) -> float:
    """Solve ``E - e sin(E) = M`` for the eccentric anomaly.

    Parameters
    ----------
    mean_anomaly : float
        Mean anomaly ``M`` in radians.
    e : float
        Eccentricity, expected in ``[0, 1)``.
    tol : float, optional
        Stop once a Newton-Raphson correction is smaller than this (radians).
    max_iter : int, optional
        Iteration cap. When reached the last estimate is returned.

    Returns
    -------
    float
        Eccentric anomaly ``E`` in radians.
    """
    E = mean_anomaly + e * math.sin(mean_anomaly)
    for _ in range(max_iter):
        delta = (E - e * math.sin(E) - mean_anomaly) / (1.0 - e * math.cos(E))
        E -= delta
        if abs(delta) < tol:
            return E
    logger.debug(
        "Kepler solve did not converge in %d iterations (M=%g, e=%g); using last estimate",
        max_iter,
        mean_anomaly,
        e,
    )
    return E


def perifocal_to_ecliptic(peri_arg_deg: float, i_deg: float, node_deg: float) -> np.ndarray:
    """Rotation matrix ``Rz(node) @ Rx(i) @ Rz(peri_arg)``."""
    w = math.radians(peri_arg_deg)
    i = math.radians(i_deg)
    node = math.radians(node_deg)
    cw, sw = math.cos(w), math.sin(w)
    ci, si = math.cos(i), math.sin(i)
    cn, sn = math.cos(node), math.sin(node)
    rz_w = np.array([[cw, -sw, 0.0], [sw, cw, 0.0], [0.0, 0.0, 1.0]])
    rx_i = np.array([[1.0, 0.0, 0.0], [0.0, ci, -si], [0.0, si, ci]])
    rz_node = np.array([[cn, -sn, 0.0], [sn, cn, 0.0], [0.0, 0.0, 1.0]])
    return rz_node @ rx_i @ rz_w


def current_elements(elements: KeplerianElements, epoch_jd: float) -> CurrentElements:
    """Evaluate ``elements`` at ``epoch_jd`` using their secular rates."""
    return elements.at_centuries(julian_centuries(epoch_jd))


def _eccentric_anomaly(current: CurrentElements) -> float:
    M = math.radians(normalize_degrees(current.mean_anomaly_deg))
    return solve_kepler(M, current.e)


def propagate(elements: KeplerianElements, epoch_jd: float) -> np.ndarray:
    """Heliocentric ecliptic position (km) of a body at ``epoch_jd``."""
    current = current_elements(elements, epoch_jd)
    E = _eccentric_anomaly(current)
    a, e = current.a_km, current.e
    perifocal = np.array(
        [a * (math.cos(E) - e), a * math.sqrt(1.0 - e * e) * math.sin(E), 0.0]
    )
    rot = perifocal_to_ecliptic(current.peri_arg_deg, current.i_deg, current.node_deg)
    return rot @ perifocal


def propagate_state(
    elements: KeplerianElements, epoch_jd: float, mu: float = C.MU_SUN_KM3PS2
) -> tuple[np.ndarray, np.ndarray]:
    """Return position (km) and velocity (km/s) at ``epoch_jd``.

    The velocity is the two-body derivative of the osculating ellipse with
    mean motion ``sqrt(mu / a**3)``; the slow drift of the elements themselves
    is not included.
    """
    current = current_elements(elements, epoch_jd)
    E = _eccentric_anomaly(current)
    a, e = current.a_km, current.e
    cos_e, sin_e = math.cos(E), math.sin(E)
    root = math.sqrt(1.0 - e * e)

    mean_motion = math.sqrt(mu / a**3)
    e_dot = mean_motion / (1.0 - e * cos_e)

    r_pf = np.array([a * (cos_e - e), a * root * sin_e, 0.0])
    v_pf = np.array([-a * sin_e * e_dot, a * root * cos_e * e_dot, 0.0])
    rot = perifocal_to_ecliptic(current.peri_arg_deg, current.i_deg, current.node_deg)
    return rot @ r_pf, rot @ v_pf


def propagate_datetime(elements: KeplerianElements, when: datetime) -> np.ndarray:
    """Position (km) at a calendar timestamp."""
    return propagate(elements, to_julian_date(when))
