import time
from datetime import datetime, timezone

import numpy as np

from orrery.bodies import build_bodies
from orrery.catalog import ElementCatalog
from orrery.clock import to_julian_date
from orrery.registry import BodyRegistry
from orrery.sampler import OrbitSampler


if __name__ == "__main__":
    catalog = ElementCatalog.load()
    registry = BodyRegistry(build_bodies(catalog))
    buffer = registry.new_buffer()
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    jd0 = to_julian_date(start)
    FRAMES = 5000

    t0 = time.time()
    for k in range(FRAMES):
        registry.update(jd0 + k / 24.0, buffer)
    t1 = time.time()
    traces = OrbitSampler(point_count=1000).sample_all(registry.bodies, start)
    t2 = time.time()

    assert all(np.array_equal(t[0], t[-1]) for t in traces.values())
    print(f"Frame update : {(t1 - t0) / FRAMES * 1e6:.1f} us/frame ({len(registry)} bodies)")
    print(f"Orbit sample : {t2 - t1:.3f}s for {len(traces)} x 1000 points")
