"""
Command line entry point: gravsim <duration> <time step> <universe file>.

Loads the universe, runs the simulation with the configured frame pacing and prints
the final report to standard output. Startup problems print an [error] line and exit
with status 1 before any step runs.
"""

import argparse
import sys

from .control_channel import SpeedControlChannel
from .renderer import NullRenderer, PanelRenderer
from .report import write_report_csv
from .sim_config import SimConfig
from .simulation import NBodySimulation
from .simulation_validator import SimulationValidator
from .universe_loader import load_universe


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gravsim", description="Direct-summation N-body gravity simulation")
    p.add_argument("duration", type=float, help="simulated time span in seconds")
    p.add_argument("time_step", type=float, help="base time step in seconds")
    p.add_argument("universe", help="universe description file")
    p.add_argument("--delay-ms", type=float, default=None, help="real-time pause between frames (default: 100)")
    p.add_argument("--slider", type=int, default=None, help="initial speed slider position (100..400, default: 250)")
    p.add_argument("--validate", action="store_true", help="reject non-positive masses and coincident bodies")
    p.add_argument("--require-assets", action="store_true", help="fail if a display image file is missing")
    p.add_argument("--trace", action="store_true", help="print panel coordinates for every frame")
    p.add_argument("--report-every", type=int, default=0, help="print progress every N steps")
    p.add_argument("--csv", type=str, default=None, help="also write the final report as CSV")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    cfg = SimConfig(
        validate_bodies=args.validate,
        require_assets=args.require_assets,
        report_every=args.report_every,
    )
    if args.delay_ms is not None:
        cfg.frame_delay = args.delay_ms / 1000.0
    if not cfg.is_valid():
        return 1

    if not args.duration > 0.0 or not args.time_step > 0.0:
        print(f"[error] duration and time step must be positive, got {args.duration} and {args.time_step}")
        return 1

    universe = load_universe(args.universe, require_assets=cfg.require_assets)
    if universe is None:
        return 1

    if cfg.validate_bodies and not SimulationValidator.universe_is_valid(universe):
        SimulationValidator.report_invalid_state(args.universe, universe)
        return 1

    renderer = PanelRenderer(trace=True) if args.trace else NullRenderer()
    channel = SpeedControlChannel()
    if args.slider is not None:
        channel.post(args.slider)

    sim = NBodySimulation(universe, args.duration, args.time_step, cfg,
                          renderer=renderer, channel=channel)
    sim.run()

    sys.stdout.write(sim.final_report())
    if args.csv:
        write_report_csv(universe, args.csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
