"""Simulated time and Julian date conversions."""

import logging
import math
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from . import constants as C

logger = logging.getLogger(__name__)


def _as_utc(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime. Naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def julian_day_number(year: int, month: int, day: int) -> float:
    """Return the Julian date at 0h UT of a Gregorian calendar date.

    Valid for years 1901 through 2099.
    """
    return (
        367 * year
        - math.floor(7 * (year + math.floor((month + 9) / 12)) / 4)
        + math.floor(275 * month / 9)
        + day
        + 1721013.5
    )


def fraction_of_day(hour: int, minute: int, second: float) -> float:
    """Return the fraction of a day elapsed at ``hour:minute:second``."""
    return (hour + minute / 60.0 + second / 3600.0) / 24.0


def to_julian_date(dt: datetime) -> float:
    """Convert a calendar timestamp to a Julian date.

    Parameters
    ----------
    dt : datetime
        Timestamp to convert. Aware values are converted to UTC first; naive
        values are assumed to already be UTC.

    Returns
    -------
    float
        Julian date, e.g. ``2451545.0`` for 2000-01-01 12:00 UTC.
    """
    dt = _as_utc(dt)
    seconds = dt.second + dt.microsecond * 1e-6
    return julian_day_number(dt.year, dt.month, dt.day) + fraction_of_day(
        dt.hour, dt.minute, seconds
    )


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - C.J2000_JD) / C.DAYS_PER_CENTURY


_J2000_DATETIME = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def from_julian_date(jd: float) -> datetime:
    """Convert a Julian date back to an aware UTC datetime."""
    return _J2000_DATETIME + timedelta(days=jd - C.J2000_JD)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EpochClock:
    """Own the simulated instant used to evaluate orbital elements.

    Without a ``start`` instant the clock follows its time source on every
    :meth:`tick`. Once started from an explicit instant, or once
    ``time_scale`` differs from ``1.0``, it instead advances by the scaled
    wall-clock time elapsed between ticks. Paused clocks never advance.
    """

    def __init__(
        self,
        start: Optional[datetime] = None,
        time_source: Optional[Callable[[], datetime]] = None,
        time_scale: float = 1.0,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._time_source = time_source or _utc_now
        self._monotonic = monotonic
        self._now = _as_utc(start) if start is not None else _as_utc(self._time_source())
        self._paused = False
        self._following = start is None
        self._time_scale = 1.0
        self.time_scale = time_scale
        self._last_wall = self._monotonic()

    @property
    def now(self) -> datetime:
        return self._now

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        self._time_scale = float(value)
        if self._time_scale != 1.0:
            self._following = False

    @property
    def julian_date(self) -> float:
        return to_julian_date(self._now)

    @property
    def centuries(self) -> float:
        return julian_centuries(self.julian_date)

    def tick(self, simulated_now: Optional[datetime] = None) -> datetime:
        """Advance the clock unless paused and return the current instant."""
        wall = self._monotonic()
        elapsed = wall - self._last_wall
        self._last_wall = wall
        if self._paused:
            return self._now

        if simulated_now is not None:
            self._now = _as_utc(simulated_now)
        elif self._following:
            self._now = _as_utc(self._time_source())
        else:
            self._now = self._now + timedelta(seconds=elapsed * self._time_scale)
        return self._now

    def set_time(self, dt: datetime) -> None:
        """Jump to ``dt`` regardless of the pause flag."""
        self._now = _as_utc(dt)
        self._following = False
        logger.debug("Clock set to %s", self._now.isoformat())

    def pause(self) -> None:
        if not self._paused:
            logger.debug("Clock paused at %s", self._now.isoformat())
        self._paused = True

    def resume(self) -> None:
        if self._paused:
            logger.debug("Clock resumed at %s", self._now.isoformat())
            # elapsed time while paused must not be replayed on the next tick
            self._last_wall = self._monotonic()
        self._paused = False

    def toggle(self) -> bool:
        """Flip the pause flag and return the new state."""
        if self._paused:
            self.resume()
        else:
            self.pause()
        return self._paused

    def __repr__(self):
        return f"EpochClock(now={self._now.isoformat()}, paused={self._paused})"
