#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf; it never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_ROBOT_COUNT: int = 4
DEFAULT_OBSTACLE_COUNT: int = 8
DEFAULT_TICK_RATE_HZ: float = 10.0
DEFAULT_EXPERIMENT_TICKS: int = 600

# ── Environment variables read by main ───────────────────────────────────────
ENV_PREFIX: str = "FOOTBOT_"
ENV_CONTROLLER_PARAMS = ("ALPHA", "DELTA", "VELOCITY")

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 900
WINDOW_HEIGHT: int = 900
TARGET_FPS: int = 60

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FILE: str = "footbot.log"
WORLD_DEBUG_LOG_FILE: str = "world_debug.log"
