import argparse
import logging

from orrery import constants as C
from orrery.catalog import ElementCatalog
from orrery.context import SimulationContext
from orrery.positions import parse_datetime
from orrery.simulation import Simulation

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Solar system orrery")
    parser.add_argument("--date", help="Start at this UTC timestamp instead of following the wall clock")
    parser.add_argument("--paused", action="store_true", help="Start with the clock paused")
    parser.add_argument("--catalog", help="Element catalog JSON file")
    parser.add_argument(
        "--points",
        type=int,
        default=C.DEFAULT_ORBIT_POINTS,
        help="Samples per orbit trace",
    )
    parser.add_argument(
        "--time-scale",
        type=float,
        default=1.0,
        help="Simulated seconds per wall-clock second",
    )
    parser.add_argument("--no-labels", action="store_true", help="Hide body labels")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    catalog = ElementCatalog.load(args.catalog)
    start = parse_datetime(args.date) if args.date else None
    context = SimulationContext.create(
        catalog=catalog,
        start=start,
        time_scale=args.time_scale,
        point_count=args.points,
    )
    if args.paused:
        context.pause()
    logger.info("Starting orrery at %s", context.clock.now.isoformat())

    sim = Simulation(context, show_labels=not args.no_labels)
    sim.run()


if __name__ == "__main__":
    main()
