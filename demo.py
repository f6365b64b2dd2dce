#!/usr/bin/env python3
"""
Quick demo: runs a handful of hand-made proximity scenarios through the
steering engine and prints the intermediate terms, so you can see what the
controller does without opening the arena window.

Usage:
    python3 demo.py
"""

import math
from typing import List, Tuple

from avoidance import ControllerParams, SensorReading, explain_wheel_command


def _scenarios() -> List[Tuple[str, List[SensorReading]]]:
    deg = SensorReading.from_degrees
    return [
        ("open space",              []),
        ("head-on",                 [deg(1.0, 0.0)]),
        ("symmetric +/-5 deg",      [deg(0.8, 5.0), deg(0.8, -5.0)]),
        ("slightly left (+20 deg)", [deg(0.6, 20.0)]),
        ("left side (+90 deg)",     [deg(0.7, 90.0)]),
        ("right side (-90 deg)",    [deg(0.7, -90.0)]),
        ("behind (180 deg)",        [deg(0.9, 180.0)]),
    ]


def main() -> None:
    params = ControllerParams()
    print(f"params: {params.as_dict()}")
    print(
        f"{'scenario':<26}{'len':>7}{'angle':>9}"
        f"{'brake':>9}{'steer':>10}{'bias':>10}{'left':>9}{'right':>9}"
    )
    for label, readings in _scenarios():
        resultant, terms, cmd = explain_wheel_command(readings, params)
        print(
            f"{label:<26}{resultant.length:7.3f}{math.degrees(resultant.angle):9.1f}"
            f"{terms.brake:9.2f}{terms.steer:10.2f}{terms.bias:10.2f}"
            f"{cmd.left:9.2f}{cmd.right:9.2f}"
        )


if __name__ == "__main__":
    main()
