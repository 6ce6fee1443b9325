"""Derived orbit quantities for display."""

import numpy as np

from . import constants as C
from .propagator import propagate_state
from .utils import distance_to_display, period_to_display, speed_to_display


def orbit_from_state(r_vec, v_vec, mu=C.MU_SUN_KM3PS2):
    """Recover the osculating orbit from a heliocentric state vector.

    Parameters
    ----------
    r_vec : array-like
        Position in km.
    v_vec : array-like
        Velocity in km/s.
    mu : float, optional
        Gravitational parameter of the central body in km^3/s^2.

    Returns
    -------
    dict
        ``semi_major_axis`` (km), ``eccentricity``, ``period`` (s),
        ``perihelion`` and ``aphelion`` (km), ``distance`` (km) and ``speed``
        (km/s). Unbound states report infinite axis and period.
    """
    r_vec = np.asarray(r_vec, dtype=float)
    v_vec = np.asarray(v_vec, dtype=float)
    r = np.linalg.norm(r_vec)
    v = np.linalg.norm(v_vec)
    if r == 0:
        return {
            'semi_major_axis': 0.0, 'eccentricity': 0.0, 'period': 0.0,
            'perihelion': 0.0, 'aphelion': 0.0, 'distance': 0.0, 'speed': v,
        }

    specific_orbital_energy = v**2 / 2 - mu / r
    h_vec = np.cross(r_vec, v_vec)
    e_vec = np.cross(v_vec, h_vec) / mu - r_vec / r
    eccentricity = float(np.linalg.norm(e_vec))

    if specific_orbital_energy >= 0:
        semi_major_axis = float('inf')
        period = float('inf')
        perihelion = np.dot(h_vec, h_vec) / mu / (1 + eccentricity)
        aphelion = float('inf')
    else:
        semi_major_axis = -mu / (2 * specific_orbital_energy)
        period = 2 * np.pi * np.sqrt(semi_major_axis**3 / mu)
        perihelion = semi_major_axis * (1 - eccentricity)
        aphelion = semi_major_axis * (1 + eccentricity)

    return {
        'semi_major_axis': float(semi_major_axis),
        'eccentricity': eccentricity,
        'period': float(period),
        'perihelion': float(perihelion),
        'aphelion': float(aphelion),
        'distance': float(r),
        'speed': float(v),
    }


def orbit_summary(elements, epoch_jd, mu=C.MU_SUN_KM3PS2):
    """Propagate ``elements`` to ``epoch_jd`` and summarize the resulting orbit."""
    r_vec, v_vec = propagate_state(elements, epoch_jd, mu)
    return orbit_from_state(r_vec, v_vec, mu)


def describe_body(body, position_km=None, epoch_jd=C.J2000_JD, mu=C.MU_SUN_KM3PS2):
    """Info-panel lines for ``body``.

    Catalogued bodies report their osculating orbit at ``epoch_jd``; bodies
    placed statically report their configured period, if any.
    """
    lines = [f"<b>{body.name}</b>"]
    if position_km is not None:
        lines.append(f"r = {distance_to_display(float(np.linalg.norm(position_km)))}")
    if body.has_elements:
        summary = orbit_summary(body.elements, epoch_jd, mu)
        lines.append(f"a = {distance_to_display(summary['semi_major_axis'])}")
        lines.append(f"e = {summary['eccentricity']:.4f}")
        lines.append(f"v = {speed_to_display(summary['speed'])}")
        lines.append(f"T = {period_to_display(summary['period'])}")
    else:
        lines.append("static placement (no catalog elements)")
        if body.period_days is not None:
            lines.append(f"T = {period_to_display(body.period_days * C.SECONDS_PER_DAY)}")
    return lines
