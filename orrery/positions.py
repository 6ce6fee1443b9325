"""Print heliocentric positions of catalogued bodies at a date."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from . import constants as C
from .bodies import CelestialBody
from .catalog import ElementCatalog, normalize_name
from .clock import to_julian_date
from .propagator import propagate
from .sampler import OrbitSampler
from .trace_io import export_trace_csv, save_snapshot

logger = logging.getLogger(__name__)


def parse_datetime(text: str) -> datetime:
    """Parse an ISO-8601 date or timestamp; naive values are taken as UTC."""
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_position(name: str, jd: float, position_km, in_au: bool = False) -> str:
    pos = np.asarray(position_km, dtype=float)
    unit = "AU" if in_au else "km"
    if in_au:
        pos = pos / C.AU_KM
    dist = float(np.linalg.norm(pos))
    return (
        f"{name:<10s} JD {jd:.5f}  "
        f"x={pos[0]: .6e} y={pos[1]: .6e} z={pos[2]: .6e}  r={dist:.6e} {unit}"
    )


def main(argv: list[str] | None = None) -> int:
    """Command line entry point for printing body positions."""
    parser = argparse.ArgumentParser(description="Print heliocentric ecliptic positions")
    parser.add_argument("--date", help="UTC timestamp (ISO-8601); defaults to now")
    parser.add_argument("--catalog", help="Element catalog JSON file")
    parser.add_argument(
        "--body", action="append", dest="bodies", help="Body name (repeatable); all by default"
    )
    parser.add_argument("--au", action="store_true", help="Print astronomical units instead of km")
    parser.add_argument("--snapshot", help="Also write the positions (km) to this JSON file")
    parser.add_argument(
        "--trace-dir", help="Write one orbit trace CSV per body (<name>.csv) into this directory"
    )
    parser.add_argument(
        "--points", type=int, default=C.DEFAULT_ORBIT_POINTS, help="Samples per exported orbit trace"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    when = parse_datetime(args.date) if args.date else datetime.now(timezone.utc)
    catalog = ElementCatalog.load(args.catalog)
    jd = to_julian_date(when)

    names = args.bodies or list(catalog)
    status = 0
    positions = {}
    for name in names:
        if name not in catalog:
            logger.error("No catalog elements for '%s'", name)
            status = 1
            continue
        key = normalize_name(name)
        positions[key] = propagate(catalog[name], jd)
        print(format_position(key, jd, positions[key], args.au))

    if args.snapshot:
        save_snapshot(args.snapshot, positions, when)
        logger.info("Wrote %d positions to %s", len(positions), args.snapshot)
    if args.trace_dir:
        out_dir = Path(args.trace_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        sampler = OrbitSampler(args.points)
        for key in positions:
            body = CelestialBody(key, 0.0, C.WHITE, 0.0, elements=catalog[key])
            export_trace_csv(sampler.sample(body, when), str(out_dir / f"{key}.csv"))
        logger.info("Wrote %d orbit traces to %s", len(positions), out_dir)
    return status


if __name__ == "__main__":  # pragma: no cover - manual tool
    sys.exit(main())
