#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import ColorRGB


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (15, 15, 15)
    FLOOR_COLOR: ColorRGB = (30, 30, 30)
    WALL_COLOR: ColorRGB = (120, 120, 120)
    CYLINDER_COLOR: ColorRGB = (90, 90, 100)
    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_BORDER_COLOR: ColorRGB = (42, 42, 42)
    RAY_IDLE_COLOR: ColorRGB = (58, 58, 58)
    RAY_HIT_COLOR: ColorRGB = (255, 136, 0)
    RESULTANT_COLOR: ColorRGB = (255, 60, 60)
    BIAS_COLOR: ColorRGB = (0, 255, 127)
    TEXT_COLOR: ColorRGB = (230, 230, 235)
    MUTED_TEXT_COLOR: ColorRGB = (140, 140, 140)

    TRAIL_ALPHA = 70
    TRAIL_LENGTH = 120
    HUD_MAX_ROWS = 6
    HUD_ROW_HEIGHT = 40

    # Screen length of the resultant arrow per unit of resultant length.
    RESULTANT_ARROW_SCALE_M = 4.0

    LEGEND_ITEMS: Sequence[Tuple[str, ColorRGB]] = (
        ("SENSOR HIT", (255, 136, 0)),
        ("RESULTANT", (255, 60, 60)),
        ("FRONTAL BIAS", (0, 255, 127)),
    )

    SCREENSHOT_DIR = "screenshots"
