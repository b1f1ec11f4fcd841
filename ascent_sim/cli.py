"""
Multi-Stage Ascent Simulation - CLI

Single entry point for running the default mission with live console
telemetry, or headless with CSV / plot output. Physics parameters are fixed
by the mission profile and are not exposed here.
"""

import argparse
import logging
import sys

from .config import create_default_config
from .pacing import Pacer, RealTimePacer
from .render import ConsoleRenderer, Renderer
from .simulation import run_simulation

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Multi-stage rocket ascent simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run as fast as possible without console telemetry"
    )
    parser.add_argument(
        "--time-scale",
        type=float,
        default=1.0,
        help="Playback speed multiplier for real-time pacing"
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write telemetry log to this CSV file"
    )
    parser.add_argument(
        "--plots",
        type=str,
        default=None,
        help="Directory to save post-flight plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress informational log output"
    )
    args = parser.parse_args(argv)
    if args.time_scale <= 0.0:
        parser.error(f"--time-scale must be positive, got {args.time_scale}")
    return args


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = create_default_config()
    if args.headless:
        renderer, pacer = Renderer(), Pacer()
    else:
        renderer, pacer = ConsoleRenderer(), RealTimePacer(args.time_scale)

    try:
        result = run_simulation(config, renderer=renderer, pacer=pacer)

        print("\n" + "=" * 60)
        print("SIMULATION SUMMARY")
        print("=" * 60)
        print(f"Termination reason: {result.reason}")
        print(f"Final time:     {result.final_state.t:.2f} s")
        print(f"Final altitude: {result.final_state.altitude/1000:.2f} km")
        print(f"Final velocity: {result.final_state.velocity:.2f} m/s")
        print(f"Final mass:     {result.final_state.total_mass:.1f} kg")
        print(f"O₂ remaining:   {result.life_support.oxygen_mass:.2f} kg")
        print(f"Ticks:          {result.ticks:,}")
        print("=" * 60)

        if args.csv:
            result.log.to_csv(args.csv)
            logger.info(f"Telemetry written to {args.csv}")

        if args.plots:
            from .plotting import generate_all_plots
            paths = generate_all_plots(result.log, args.plots)
            print(f">> {len(paths)} plots written to: {args.plots}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)

    return result


if __name__ == "__main__":
    main()
