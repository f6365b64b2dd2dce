#!/usr/bin/env python3
"""
Main view class: combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, Camera
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – drawing utilities (arrows, colour blending)
    ├── draw_arena.py      – ArenaRenderer mixin (walls, cylinders, robots, rays)
    ├── hud.py             – HudRenderer mixin  (HUD, legend, debug, splash)
    └── pygame_view.py     – PygameArenaView (this file – main loop)
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import pygame

from .constants import ViewConstants
from .draw_arena import ArenaRenderer
from .hud import HudRenderer
from .types import Camera


class PygameArenaView(ViewConstants, ArenaRenderer, HudRenderer):
    """Foot-bot arena visualiser powered by Pygame.

    Polls a :class:`~sim.sim_bridge.SimBridge` (or anything exposing
    ``get_robots`` / ``get_arena`` / ``get_stats``) once per frame.
    """

    def __init__(self, bridge: Any, width: int = 900, height: int = 900, fps: int = 60):
        self.bridge = bridge
        self.width = width
        self.height = height
        self.fps = fps

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.camera = Camera(width, height)
        self.time_seconds = 0.0
        self.trails: Dict[str, List[Tuple[float, float]]] = {}

        # UI state
        self.paused = False
        self.show_debug = False
        self.show_legend = True
        self.show_rays = True
        self.show_splash = True
        self.zoom = 1.0
        self._hud_scroll_offset = 0
        self._last_tick = -1
        self._screenshot_flash_until = 0.0

    # ------------------------------------------------------------------ #
    #  Resize / zoom                                                       #
    # ------------------------------------------------------------------ #
    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(400, new_w)
        self.height = max(300, new_h)
        self.camera.screen_w = self.width
        self.camera.screen_h = self.height
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )

    def _set_zoom(self, zoom: float) -> None:
        self.zoom = min(3.0, max(0.3, zoom))
        self.camera.zoom = self.zoom

    # ------------------------------------------------------------------ #
    #  Screenshot                                                          #
    # ------------------------------------------------------------------ #
    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.SCREENSHOT_DIR, f"arena_{stamp}.png")
        pygame.image.save(self.screen, path)
        self._screenshot_flash_until = self.time_seconds + 0.35

    # ------------------------------------------------------------------ #
    #  Bridge polling                                                      #
    # ------------------------------------------------------------------ #
    def _poll_bridge(self) -> Tuple[List[Dict[str, Any]], Dict[str, Any], Dict[str, Any]]:
        robots = self.bridge.get_robots() or []
        arena = self.bridge.get_arena() or {}
        stats = self.bridge.get_stats() or {}
        if "half_size" in arena:
            self.camera.half_size = float(arena["half_size"])

        tick = int(stats.get("tick", 0))
        if tick < self._last_tick:
            self.trails.clear()
        if tick != self._last_tick:
            for robot in robots:
                trail = self.trails.setdefault(robot["id"], [])
                trail.append((robot["x"], robot["y"]))
                del trail[:-self.TRAIL_LENGTH]
        self._last_tick = tick
        return robots, arena, stats

    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        return pygame.font.SysFont("dejavusansmono,consolas,monospace", size, bold=bold)

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("FOOT-BOT OBSTACLE AVOIDANCE")
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(13)
        self.font_tiny = self._load_font(11)
        self.font_title = self._load_font(28, bold=True)

        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0
            self.time_seconds += delta_time

            # ---- events ------------------------------------------------- #
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if self.show_splash:
                        self.show_splash = False
                        continue
                    if event.key == pygame.K_SPACE:
                        self.paused = not self.paused
                        self.bridge.set_paused(self.paused)
                    elif event.key == pygame.K_n and self.paused:
                        self.bridge.step()
                    elif event.key in (pygame.K_d, pygame.K_F3):
                        self.show_debug = not self.show_debug
                    elif event.key == pygame.K_l:
                        self.show_legend = not self.show_legend
                    elif event.key == pygame.K_s:
                        self.show_rays = not self.show_rays
                    elif event.key == pygame.K_r:
                        self._set_zoom(1.0)
                        self.trails.clear()
                        self._hud_scroll_offset = 0
                        self.paused = False
                        self.bridge.reset()
                        self.bridge.set_paused(False)
                    elif event.key == pygame.K_F12:
                        self._take_screenshot()
                    elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                        self._set_zoom(self.zoom + 0.1)
                    elif event.key == pygame.K_MINUS:
                        self._set_zoom(self.zoom - 0.1)
                    elif event.key == pygame.K_UP:
                        self._hud_scroll_offset = max(0, self._hud_scroll_offset - 1)
                    elif event.key == pygame.K_DOWN:
                        self._hud_scroll_offset += 1

            # ---- splash ------------------------------------------------- #
            if self.show_splash:
                self.screen.fill(self.BG_COLOR)
                self._draw_splash(self.screen, self.time_seconds)
                pygame.display.flip()
                continue

            # ---- auto-pause when the run finishes ----------------------- #
            if not self.paused and self.bridge.is_finished():
                self.paused = True
                self.bridge.set_paused(True)

            robots, arena, stats = self._poll_bridge()

            # ---- render ------------------------------------------------- #
            self.screen.fill(self.BG_COLOR)
            self.draw_arena(self.screen, arena)
            for robot in robots:
                self.draw_trail(self.screen, robot)
            if self.show_rays:
                for robot in robots:
                    self.draw_rays(self.screen, robot)
            for robot in robots:
                self.draw_robot(self.screen, robot)

            # HUD layers (drawn on top)
            self.draw_hud(self.screen, robots, stats)
            if self.show_legend:
                self._draw_legend(self.screen)
            if self.show_debug:
                self._draw_debug_overlay(self.screen, stats, delta_time)
            if self.paused:
                self._draw_pause_banner(self.screen)
            if self.time_seconds < self._screenshot_flash_until:
                flash = pygame.Surface(
                    (self.width, self.height), pygame.SRCALPHA
                )
                flash.fill((255, 255, 255, 40))
                self.screen.blit(flash, (0, 0))

            pygame.display.flip()

        pygame.quit()


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    bridge: Any, width: int = 900, height: int = 900, fps: int = 60
) -> None:
    view = PygameArenaView(bridge=bridge, width=width, height=height, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a bridge object. Run `python main.py` "
        "or call run_pygame_view(your_bridge)."
    )
