"""
ui/helpers.py
=============
Pure drawing utilities shared across UI modules.
"""

from __future__ import annotations

import math
from typing import Tuple

import pygame


def draw_arrow(
    target: pygame.Surface,
    color: Tuple[int, ...],
    start: Tuple[int, int],
    end: Tuple[int, int],
    width: int = 2,
) -> None:
    """Line with a small triangular head at *end*."""
    pygame.draw.line(target, color, start, end, width)
    dx, dy = end[0] - start[0], end[1] - start[1]
    if dx == 0 and dy == 0:
        return
    ang = math.atan2(dy, dx)
    head = 7
    left = (end[0] - head * math.cos(ang - 0.4), end[1] - head * math.sin(ang - 0.4))
    right = (end[0] - head * math.cos(ang + 0.4), end[1] - head * math.sin(ang + 0.4))
    pygame.draw.polygon(target, color, [end, left, right])


def blend_color(
    low: Tuple[int, int, int], high: Tuple[int, int, int], t: float
) -> Tuple[int, int, int]:
    """Linear mix of two colours; *t* is clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return tuple(int(round(a + (b - a) * t)) for a, b in zip(low, high))
