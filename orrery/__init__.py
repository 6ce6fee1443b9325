"""Time-driven Keplerian orbit propagation for a solar system viewer."""

from importlib.metadata import PackageNotFoundError, version

from .clock import EpochClock, julian_centuries, to_julian_date, from_julian_date
from .elements import CatalogError, KeplerianElements
from .catalog import ElementCatalog
from .propagator import propagate, propagate_state, solve_kepler
from .sampler import OrbitSampler, sample_orbit
from .bodies import CelestialBody, DEFAULT_PLANETS, build_bodies
from .registry import BodyRegistry, DuplicateBodyError, PositionBuffer
from .context import SimulationContext
from .trace_io import export_trace_csv, load_snapshot, save_snapshot
from .constants import AU_KM, J2000_JD, MU_SUN_KM3PS2

try:
    __version__ = version("orrery")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "EpochClock",
    "julian_centuries",
    "to_julian_date",
    "from_julian_date",
    "CatalogError",
    "KeplerianElements",
    "ElementCatalog",
    "propagate",
    "propagate_state",
    "solve_kepler",
    "OrbitSampler",
    "sample_orbit",
    "CelestialBody",
    "DEFAULT_PLANETS",
    "build_bodies",
    "BodyRegistry",
    "DuplicateBodyError",
    "PositionBuffer",
    "SimulationContext",
    "export_trace_csv",
    "save_snapshot",
    "load_snapshot",
    "AU_KM",
    "J2000_JD",
    "MU_SUN_KM3PS2",
    "__version__",
]
