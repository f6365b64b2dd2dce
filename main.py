#!/usr/bin/env python3
"""
main.py
=======
Entry point.  Runs the foot-bot arena either in a Pygame window (default)
or headless for a fixed number of control cycles, printing a summary and
optionally writing the telemetry table to CSV.

Controller parameters come from, in increasing priority: built-in
defaults, ``FOOTBOT_ALPHA`` / ``FOOTBOT_DELTA`` / ``FOOTBOT_VELOCITY``
environment variables, then ``--alpha`` / ``--delta`` / ``--velocity``.
``FOOTBOT_ROBOTS`` and ``FOOTBOT_SEED`` set the defaults of ``--robots`` and
``--seed``.
"""

import argparse
import logging
import os
import sys
from typing import Dict, Mapping, Optional

import config
from logging_setup import setup_logging
from avoidance.errors import ConfigurationError
from avoidance.params import ControllerParams

log = logging.getLogger("main")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(config.ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"{config.ENV_PREFIX}{name} must be an integer, got {raw!r}")


def env_params(environ: Mapping[str, str]) -> Dict[str, str]:
    """Controller parameters named in the environment (raw strings)."""
    out: Dict[str, str] = {}
    for key in config.ENV_CONTROLLER_PARAMS:
        raw = environ.get(config.ENV_PREFIX + key)
        if raw is not None and raw.strip() != "":
            out[key.lower()] = raw
    return out


def build_params(args: argparse.Namespace, environ: Mapping[str, str]) -> ControllerParams:
    params = ControllerParams.from_mapping(env_params(environ))
    cli = {"alpha": args.alpha, "delta": args.delta, "velocity": args.velocity}
    return ControllerParams.from_mapping(cli, base=params)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Foot-bot reactive obstacle avoidance")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window and print a summary")
    parser.add_argument("--robots", type=int,
                        default=_env_int("ROBOTS", config.DEFAULT_ROBOT_COUNT))
    parser.add_argument("--obstacles", type=int, default=config.DEFAULT_OBSTACLE_COUNT)
    parser.add_argument("--seed", type=int, default=_env_int("SEED", None))
    parser.add_argument("--ticks", type=int, default=None,
                        help="Control cycles to run headless (default %d); "
                             "caps the window run only when given" % config.DEFAULT_EXPERIMENT_TICKS)
    parser.add_argument("--tick-rate", type=float, default=config.DEFAULT_TICK_RATE_HZ)
    parser.add_argument("--csv", type=str, default=None, help="Write telemetry to this CSV file")
    parser.add_argument("--alpha", type=float, default=None)
    parser.add_argument("--delta", type=float, default=None)
    parser.add_argument("--velocity", type=float, default=None)
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run_headless(args: argparse.Namespace, params: ControllerParams) -> None:
    from sim.experiment import per_robot_summary, run_experiment, summarize, to_csv

    df = run_experiment(
        ticks=args.ticks if args.ticks is not None else config.DEFAULT_EXPERIMENT_TICKS,
        tick_rate_hz=args.tick_rate,
        robot_count=args.robots,
        obstacle_count=args.obstacles,
        seed=args.seed,
        params=params,
    )
    summary = summarize(df)
    log.info("Summary: %s", summary)
    print(per_robot_summary(df).to_string())
    for key, value in summary.items():
        print(f"{key:>18}: {value}")
    if args.csv:
        to_csv(df, args.csv)


def run_window(args: argparse.Namespace, params: ControllerParams) -> None:
    from sim.sim_bridge import SimBridge
    from ui.pygame_view import run_pygame_view

    bridge = SimBridge(
        tick_rate_hz=args.tick_rate,
        robot_count=args.robots,
        obstacle_count=args.obstacles,
        random_seed=args.seed,
        params=params,
        max_ticks=args.ticks,
    )
    bridge.start()
    try:
        run_pygame_view(
            bridge,
            width=config.WINDOW_WIDTH,
            height=config.WINDOW_HEIGHT,
            fps=config.TARGET_FPS,
        )
    finally:
        bridge.stop()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        params = build_params(args, os.environ)
    except ConfigurationError as exc:
        log.error("Invalid controller configuration: %s", exc)
        return 2
    log.info("Starting with %s", params)

    try:
        if args.headless:
            run_headless(args, params)
        else:
            run_window(args, params)
    except KeyboardInterrupt:
        log.info("Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
