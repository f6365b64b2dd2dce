#!/usr/bin/env python3

from .types import ColorRGB, ColorRGBA, Camera
from .constants import ViewConstants
from .draw_arena import ArenaRenderer
from .hud import HudRenderer
from .pygame_view import PygameArenaView, run_pygame_view

__all__ = [
    "ColorRGB",
    "ColorRGBA",
    "Camera",
    "ViewConstants",
    "ArenaRenderer",
    "HudRenderer",
    "PygameArenaView",
    "run_pygame_view",
]
