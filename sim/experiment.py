#!/usr/bin/env python3
"""
sim/experiment.py
=================
Headless experiment runner.

Runs a :class:`~sim.world.World` for a fixed number of control cycles and
records one telemetry row per robot per tick into a :class:`pandas.DataFrame`.
The headline metric is the mean forward speed: continuous speed modulation
is meant to keep robots moving instead of stopping to rotate in place.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from avoidance.params import ControllerParams
from sim.world import World

log = logging.getLogger("experiment")

TELEMETRY_COLUMNS = [
    "tick", "time_s", "robot", "x", "y", "theta",
    "left", "right", "speed_mps", "brake", "steer", "bias",
    "resultant_length", "resultant_angle",
]


def run_experiment(
    ticks: int = 600,
    tick_rate_hz: float = 10.0,
    robot_count: int = 4,
    obstacle_count: int = 8,
    seed: Optional[int] = None,
    params: Optional[ControllerParams] = None,
    world: Optional[World] = None,
) -> pd.DataFrame:
    """Run *ticks* control cycles and return the telemetry table.

    A prepared *world* may be passed in; otherwise one is built from the
    remaining arguments.
    """
    if ticks < 0:
        raise ValueError(f"ticks must be >= 0, got {ticks}")
    if tick_rate_hz <= 0:
        raise ValueError(f"tick_rate_hz must be > 0, got {tick_rate_hz}")
    if world is None:
        world = World(
            num_robots=robot_count,
            num_obstacles=obstacle_count,
            seed=seed,
            params=params,
        )
    dt = 1.0 / tick_rate_hz
    rows: List[Dict[str, Any]] = []

    for _ in range(ticks):
        world.tick(dt)
        for robot in world.robots:
            ctrl = robot.controller
            rows.append({
                "tick": world.tick_count,
                "time_s": world.elapsed_s,
                "robot": robot.id,
                "x": robot.x,
                "y": robot.y,
                "theta": robot.theta,
                "left": robot.left,
                "right": robot.right,
                "speed_mps": robot.forward_speed_mps,
                "brake": ctrl.last_terms.brake,
                "steer": ctrl.last_terms.steer,
                "bias": ctrl.last_terms.bias,
                "resultant_length": ctrl.last_resultant.length,
                "resultant_angle": ctrl.last_resultant.angle,
            })

    df = pd.DataFrame(rows, columns=TELEMETRY_COLUMNS)
    df.attrs["collisions"] = world.collisions
    log.info(
        "Experiment finished: %d ticks, %d robots, %d contacts",
        world.tick_count, len(world.robots), world.collisions,
    )
    return df


def summarize(df: pd.DataFrame) -> Dict[str, Any]:
    """Aggregate a telemetry table into headline numbers."""
    if df.empty:
        return {
            "ticks": 0, "robots": 0, "mean_speed_mps": 0.0,
            "min_wheel_speed": None, "frontal_fraction": 0.0,
            "collisions": int(df.attrs.get("collisions", 0)),
        }
    return {
        "ticks": int(df["tick"].max()),
        "robots": int(df["robot"].nunique()),
        "mean_speed_mps": float(df["speed_mps"].mean()),
        "min_wheel_speed": float(df[["left", "right"]].min().min()),
        "frontal_fraction": float((df["bias"] != 0.0).mean()),
        "collisions": int(df.attrs.get("collisions", 0)),
    }


def per_robot_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Mean speed and wheel commands per robot."""
    return (
        df.groupby("robot")[["speed_mps", "left", "right"]]
        .mean()
        .rename(columns={"speed_mps": "mean_speed_mps", "left": "mean_left", "right": "mean_right"})
    )


def to_csv(df: pd.DataFrame, path: str) -> None:
    df.to_csv(path, index=False)
    log.info("Telemetry written to %s (%d rows)", path, len(df))
