"""Utility helpers for unit conversions."""

import math
from datetime import datetime

from . import constants as C


def distance_to_display(dist_km: float) -> str:
    if dist_km == 0:
        return "0 km"
    if abs(dist_km) >= 0.1 * C.AU_KM:
        return f"{dist_km/C.AU_KM:.3f} AU"
    if abs(dist_km) >= 1e6:
        return f"{dist_km/1e6:.2f} Mkm"
    return f"{dist_km:.0f} km"


def speed_to_display(speed_km_s: float) -> str:
    return f"{speed_km_s:.2f} km/s"


def period_to_display(seconds: float) -> str:
    if math.isnan(seconds) or math.isinf(seconds) or seconds < 0:
        return "N/A"
    if seconds == 0:
        return "0 days"
    days = seconds / C.SECONDS_PER_DAY
    years = days / 365.25
    if years >= 2:
        return f"{years:.1f} years"
    return f"{days:.1f} days"


def date_to_display(when: datetime) -> str:
    return when.strftime("%Y-%m-%d %H:%M:%S UTC")
