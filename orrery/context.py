"""Explicit simulation state owned by the program entry point."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional

from . import constants as C
from .bodies import DEFAULT_PLANETS, build_bodies
from .catalog import ElementCatalog
from .clock import EpochClock
from .registry import BodyRegistry, PositionBuffer
from .sampler import OrbitSampler

logger = logging.getLogger(__name__)


@dataclass
class SimulationContext:
    """Clock, catalog, registry and published positions for one viewer.

    The context is created once and handed by reference to the frame loop and
    to the pause/resume controls; nothing here is module-level state.
    """

    clock: EpochClock
    catalog: ElementCatalog
    registry: BodyRegistry
    buffer: PositionBuffer
    sampler: OrbitSampler = field(default_factory=OrbitSampler)
    traces: dict = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        catalog: Optional[ElementCatalog] = None,
        planets: Iterable[Mapping] = DEFAULT_PLANETS,
        start: Optional[datetime] = None,
        time_scale: float = 1.0,
        point_count: int = C.DEFAULT_ORBIT_POINTS,
        time_source: Optional[Callable[[], datetime]] = None,
    ) -> "SimulationContext":
        """Build bodies from ``catalog``, place them and sample their orbits."""
        if catalog is None:
            catalog = ElementCatalog.load()
        registry = BodyRegistry(build_bodies(catalog, planets))
        context = cls(
            clock=EpochClock(start, time_source=time_source, time_scale=time_scale),
            catalog=catalog,
            registry=registry,
            buffer=registry.new_buffer(),
            sampler=OrbitSampler(point_count),
        )
        registry.place_static(context.buffer)
        registry.update(context.clock.julian_date, context.buffer)
        context.resample_orbits()
        return context

    def resample_orbits(self) -> dict:
        """Recompute every orbit trace anchored at the clock's current time."""
        self.traces = self.sampler.sample_all(self.registry.bodies, self.clock.now)
        logger.debug("Resampled %d orbit traces at %s", len(self.traces), self.clock.now.isoformat())
        return self.traces

    def step(self, simulated_now: Optional[datetime] = None) -> float:
        """Simulation-update phase: tick the clock and republish positions.

        Returns the Julian date the positions were evaluated at.
        """
        self.clock.tick(simulated_now)
        jd = self.clock.julian_date
        self.registry.update(jd, self.buffer)
        return jd

    def pause(self) -> None:
        self.clock.pause()

    def resume(self) -> None:
        self.clock.resume()

    def toggle_pause(self) -> bool:
        return self.clock.toggle()

    def position_of(self, name: str):
        return self.buffer[self.registry.handle_of(name)].copy()
