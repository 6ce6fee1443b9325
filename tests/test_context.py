from datetime import datetime, timedelta, timezone

import numpy as np

from orrery.bodies import DEFAULT_PLANETS
from orrery.clock import to_julian_date
from orrery.context import SimulationContext
from orrery.propagator import propagate

START = datetime(2021, 6, 1, tzinfo=timezone.utc)
VULCAN = {"name": "Vulcan", "radius_km": 1000.0, "reference_distance_km": 2.0e7}


def test_create_places_and_samples(catalog):
    ctx = SimulationContext.create(catalog, start=START, point_count=16)
    assert ctx.buffer.published.all()
    assert set(ctx.traces) == {p["name"].lower() for p in DEFAULT_PLANETS}
    assert all(t.shape == (17, 3) for t in ctx.traces.values())
    np.testing.assert_array_equal(
        ctx.position_of("Earth"), propagate(catalog["earth"], to_julian_date(START))
    )


def test_step_with_explicit_time(catalog):
    ctx = SimulationContext.create(catalog, start=START, point_count=8)
    later = START + timedelta(days=30)
    jd = ctx.step(later)
    assert jd == to_julian_date(later)
    np.testing.assert_array_equal(ctx.position_of("mars"), propagate(catalog["mars"], jd))


def test_paused_steps_change_nothing(catalog):
    ctx = SimulationContext.create(catalog, start=START, time_scale=86400.0, point_count=8)
    ctx.pause()
    before = ctx.buffer.positions.copy()
    for _ in range(10):
        ctx.step()
    assert ctx.clock.now == START
    np.testing.assert_array_equal(ctx.buffer.positions, before)


def test_toggle_pause(catalog):
    ctx = SimulationContext.create(catalog, start=START, point_count=8)
    assert ctx.toggle_pause() is True
    assert ctx.clock.paused
    ctx.resume()
    assert not ctx.clock.paused


def test_fallback_body_stays_static(catalog):
    ctx = SimulationContext.create(catalog, planets=DEFAULT_PLANETS + [VULCAN], start=START, point_count=8)
    np.testing.assert_array_equal(ctx.position_of("vulcan"), [2.0e7, 0.0, 0.0])
    ctx.step(START + timedelta(days=200))
    np.testing.assert_array_equal(ctx.position_of("vulcan"), [2.0e7, 0.0, 0.0])
    trace = ctx.traces["vulcan"]
    np.testing.assert_allclose(trace[:, 2], 0.0)
    np.testing.assert_allclose(np.linalg.norm(trace, axis=1), 2.0e7)


def test_resample_follows_clock(catalog):
    ctx = SimulationContext.create(catalog, start=START, point_count=8)
    ctx.step(START + timedelta(days=10))
    traces = ctx.resample_orbits()
    np.testing.assert_allclose(traces["earth"][0], ctx.position_of("earth"))
