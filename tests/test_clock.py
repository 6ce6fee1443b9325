import math
from datetime import datetime, timedelta, timezone

from orrery import constants as C
from orrery.clock import (
    EpochClock,
    fraction_of_day,
    from_julian_date,
    julian_centuries,
    julian_day_number,
    to_julian_date,
)

UTC = timezone.utc


def test_j2000_is_exact():
    assert to_julian_date(datetime(2000, 1, 1, 12, 0, 0, tzinfo=UTC)) == 2451545.0


def test_naive_datetime_is_utc():
    naive = datetime(2000, 1, 1, 12, 0, 0)
    assert to_julian_date(naive) == to_julian_date(naive.replace(tzinfo=UTC))


def test_aware_datetime_converted_to_utc():
    plus_one = timezone(timedelta(hours=1))
    assert to_julian_date(datetime(2000, 1, 1, 13, 0, 0, tzinfo=plus_one)) == 2451545.0


def test_known_dates():
    assert to_julian_date(datetime(1999, 12, 31, tzinfo=UTC)) == 2451543.5
    assert to_julian_date(datetime(2024, 1, 1, tzinfo=UTC)) == 2460310.5
    assert to_julian_date(datetime(2000, 1, 1, 18, 0, 0, tzinfo=UTC)) == 2451545.25


def test_month_and_year_boundaries():
    # 2000 is a leap year, 2001 is not
    assert julian_day_number(2000, 3, 1) - julian_day_number(2000, 2, 28) == 2.0
    assert julian_day_number(2001, 3, 1) - julian_day_number(2001, 2, 28) == 1.0
    assert julian_day_number(2001, 1, 1) - julian_day_number(2000, 12, 31) == 1.0
    assert julian_day_number(2000, 5, 1) - julian_day_number(2000, 4, 30) == 1.0


def test_consecutive_days_increase_by_one():
    start = datetime(2019, 1, 1, tzinfo=UTC)
    previous = to_julian_date(start)
    for n in range(1, 800):
        current = to_julian_date(start + timedelta(days=n))
        assert current - previous == 1.0
        previous = current


def test_fraction_of_day():
    assert fraction_of_day(12, 0, 0) == 0.5
    assert math.isclose(fraction_of_day(6, 30, 36), 0.271250, rel_tol=1e-12)


def test_subsecond_resolution():
    base = datetime(2010, 6, 1, 0, 0, 0, tzinfo=UTC)
    later = base + timedelta(microseconds=500000)
    assert math.isclose(to_julian_date(later) - to_julian_date(base), 0.5 / 86400, rel_tol=1e-3)


def test_julian_centuries():
    assert julian_centuries(C.J2000_JD) == 0.0
    assert julian_centuries(C.J2000_JD + 36525.0) == 1.0
    assert julian_centuries(C.J2000_JD - 3652.5) == -0.1


def test_from_julian_date_inverts_conversion():
    when = datetime(2031, 7, 14, 3, 25, 10, tzinfo=UTC)
    back = from_julian_date(to_julian_date(when))
    assert abs((back - when).total_seconds()) < 1e-3
    assert from_julian_date(2451545.0) == datetime(2000, 1, 1, 12, tzinfo=UTC)


def _stepping_source(start, step=timedelta(minutes=1)):
    state = {"now": start}

    def source():
        state["now"] = state["now"] + step
        return state["now"]

    return source


def test_clock_follows_time_source():
    start = datetime(2020, 1, 1, tzinfo=UTC)
    clock = EpochClock(time_source=_stepping_source(start))
    first = clock.now
    assert clock.tick() == first + timedelta(minutes=1)
    assert clock.tick() == first + timedelta(minutes=2)


def test_tick_with_explicit_timestamp():
    clock = EpochClock(start=datetime(2020, 1, 1, tzinfo=UTC))
    target = datetime(2021, 5, 5, 5, 5, 5, tzinfo=UTC)
    assert clock.tick(target) == target
    assert clock.julian_date == to_julian_date(target)


def test_paused_clock_never_advances():
    start = datetime(2020, 1, 1, tzinfo=UTC)
    clock = EpochClock(time_source=_stepping_source(start))
    clock.tick()
    clock.pause()
    frozen = clock.now
    for n in range(12):
        clock.tick()
        clock.tick(start + timedelta(days=n + 1))
        assert clock.now == frozen
        assert clock.paused


def test_resume_allows_ticks_again():
    clock = EpochClock(start=datetime(2020, 1, 1, tzinfo=UTC))
    clock.pause()
    clock.resume()
    target = datetime(2020, 2, 1, tzinfo=UTC)
    assert clock.tick(target) == target
    assert not clock.paused


def test_toggle_returns_new_state():
    clock = EpochClock(start=datetime(2020, 1, 1, tzinfo=UTC))
    assert clock.toggle() is True
    assert clock.paused
    assert clock.toggle() is False
    assert not clock.paused


def test_time_scale_advances_by_scaled_wall_time():
    wall = [100.0]
    start = datetime(2020, 1, 1, tzinfo=UTC)
    clock = EpochClock(start=start, time_scale=3600.0, monotonic=lambda: wall[0])
    wall[0] = 110.0
    assert clock.tick() == start + timedelta(hours=10)


def test_explicit_start_runs_at_real_rate():
    wall = [0.0]
    start = datetime(2030, 1, 1, tzinfo=UTC)
    clock = EpochClock(start=start, monotonic=lambda: wall[0])
    wall[0] = 2.5
    assert clock.tick() == start + timedelta(seconds=2.5)


def test_pause_does_not_replay_elapsed_time():
    wall = [0.0]
    start = datetime(2020, 1, 1, tzinfo=UTC)
    clock = EpochClock(start=start, time_scale=60.0, monotonic=lambda: wall[0])
    clock.pause()
    wall[0] = 1000.0
    clock.resume()
    wall[0] = 1001.0
    assert clock.tick() == start + timedelta(seconds=60)


def test_set_time_ignores_pause():
    clock = EpochClock(start=datetime(2020, 1, 1, tzinfo=UTC))
    clock.pause()
    target = datetime(1999, 1, 1, tzinfo=UTC)
    clock.set_time(target)
    assert clock.now == target
    assert clock.paused
