#!/usr/bin/env python3
"""Arena, cylinders, robots, sensor rays and resultant arrows (mixin)."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Tuple

import pygame

from .helpers import blend_color, draw_arrow
from .types import Camera


class ArenaRenderer:
    """Mixin that draws the static arena and every robot."""

    camera: Camera
    show_rays: bool
    trails: Dict[str, List[Tuple[float, float]]]

    # ------------------------------------------------------------------ #
    #  Static layout                                                       #
    # ------------------------------------------------------------------ #
    def draw_arena(self, surface: pygame.Surface, arena: Mapping[str, Any]) -> None:
        cam = self.camera
        h = float(arena.get("half_size", cam.half_size))
        tl = cam.world_to_screen(-h, h)
        br = cam.world_to_screen(h, -h)
        rect = pygame.Rect(tl, (br[0] - tl[0], br[1] - tl[1]))
        pygame.draw.rect(surface, self.FLOOR_COLOR, rect)
        pygame.draw.rect(surface, self.WALL_COLOR, rect, width=3)

        for cx, cy, r in arena.get("cylinders", []):
            pygame.draw.circle(
                surface, self.CYLINDER_COLOR, cam.world_to_screen(cx, cy), cam.length(r),
            )

    # ------------------------------------------------------------------ #
    #  Robots                                                              #
    # ------------------------------------------------------------------ #
    def draw_trail(self, surface: pygame.Surface, robot: Mapping[str, Any]) -> None:
        points = self.trails.get(robot["id"], [])
        if len(points) < 2:
            return
        pts = [self.camera.world_to_screen(x, y) for x, y in points]
        tmp = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        pygame.draw.lines(tmp, (*robot["color"], self.TRAIL_ALPHA), False, pts, 2)
        surface.blit(tmp, (0, 0))

    def draw_rays(self, surface: pygame.Surface, robot: Mapping[str, Any]) -> None:
        cam = self.camera
        x, y, th, r = robot["x"], robot["y"], robot["theta"], robot["radius"]
        reach = robot.get("sensor_range", 0.1)
        for bearing, value in robot.get("sensors", []):
            a = th + bearing
            start = cam.world_to_screen(x + r * math.cos(a), y + r * math.sin(a))
            end = cam.world_to_screen(x + (r + reach) * math.cos(a), y + (r + reach) * math.sin(a))
            color = blend_color(self.RAY_IDLE_COLOR, self.RAY_HIT_COLOR, value)
            pygame.draw.line(surface, color, start, end, 2 if value > 0.0 else 1)

    def draw_robot(self, surface: pygame.Surface, robot: Mapping[str, Any]) -> None:
        cam = self.camera
        x, y, th = robot["x"], robot["y"], robot["theta"]
        centre = cam.world_to_screen(x, y)
        radius = cam.length(robot["radius"])
        pygame.draw.circle(surface, robot["color"], centre, radius)
        nose = cam.world_to_screen(
            x + robot["radius"] * math.cos(th), y + robot["radius"] * math.sin(th),
        )
        pygame.draw.line(surface, (20, 20, 20), centre, nose, 3)

        length, angle = robot.get("resultant", (0.0, 0.0))
        if length > 0.0:
            # Resultant is in the robot frame; rotate into the arena frame.
            reach = length * self.RESULTANT_ARROW_SCALE_M
            a = th + angle
            tip = cam.world_to_screen(x + reach * math.cos(a), y + reach * math.sin(a))
            color = self.BIAS_COLOR if robot.get("bias", 0.0) else self.RESULTANT_COLOR
            draw_arrow(surface, color, centre, tip)
