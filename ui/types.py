"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class Camera:
    """Viewport mapping arena coordinates (metres, y up) to screen pixels."""
    screen_w: int
    screen_h: int
    half_size: float = 1.5
    zoom: float = 1.0

    @property
    def pixels_per_meter(self) -> float:
        return 0.9 * min(self.screen_w, self.screen_h) / (2.0 * self.half_size) * self.zoom

    def world_to_screen(self, wx: float, wy: float) -> Tuple[int, int]:
        s = self.pixels_per_meter
        return int(self.screen_w / 2 + wx * s), int(self.screen_h / 2 - wy * s)

    def length(self, metres: float) -> int:
        return max(1, int(round(metres * self.pixels_per_meter)))

