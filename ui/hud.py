#!/usr/bin/env python3
"""HUD panel, legend, debug overlay, splash screen, and pause banner (mixin)."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import pygame


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Main HUD panel                                                      #
    # ------------------------------------------------------------------ #

    def draw_hud(
        self,
        surface: pygame.Surface,
        robots: Sequence[Mapping[str, Any]],
        stats: Mapping[str, Any],
    ) -> None:
        if self.font_small is None or self.font_tiny is None:
            return

        total = len(robots)
        scroll = min(self._hud_scroll_offset, max(0, total - self.HUD_MAX_ROWS))
        self._hud_scroll_offset = scroll
        visible = list(robots[scroll : scroll + self.HUD_MAX_ROWS])

        header_h = 30
        panel_height = header_h + max(1, len(visible)) * self.HUD_ROW_HEIGHT + 8
        panel_width = 270
        panel_rect = pygame.Rect(16, self.height - panel_height - 16, panel_width, panel_height)

        pygame.draw.rect(surface, self.HUD_BG_COLOR, panel_rect, border_radius=6)
        pygame.draw.rect(surface, self.HUD_BORDER_COLOR, panel_rect, width=1, border_radius=6)

        hdr = self.font_tiny.render(
            f"ROBOTS {total}   T {stats.get('elapsed_s', 0.0):6.1f}s   "
            f"CONTACTS {stats.get('collisions', 0)}",
            True,
            (180, 180, 180),
        )
        surface.blit(hdr, (panel_rect.x + 10, panel_rect.y + 6))

        y = panel_rect.y + header_h
        for robot in visible:
            id_text = self.font_small.render(robot["id"], True, robot["color"])
            wheels = self.font_tiny.render(
                f"L {robot['left']:6.2f}  R {robot['right']:6.2f} cm/s",
                True,
                self.TEXT_COLOR,
            )
            terms = self.font_tiny.render(
                f"brake {robot['brake']:6.2f}  steer {robot['steer']:7.2f}",
                True,
                self.MUTED_TEXT_COLOR,
            )
            surface.blit(id_text, (panel_rect.x + 10, y))
            surface.blit(wheels, (panel_rect.x + 80, y))
            surface.blit(terms, (panel_rect.x + 80, y + 16))
            if robot.get("bias"):
                tag = self.font_tiny.render("BIAS", True, self.BIAS_COLOR)
                surface.blit(tag, (panel_rect.x + 10, y + 16))
            y += self.HUD_ROW_HEIGHT

    # ------------------------------------------------------------------ #
    #  Splash screen                                                       #
    # ------------------------------------------------------------------ #

    def _draw_splash(self, surface: pygame.Surface, tick: float) -> None:
        if self.font_title is None or self.font_small is None:
            return
        title = self.font_title.render("FOOT-BOT OBSTACLE AVOIDANCE", True, (240, 240, 240))
        surface.blit(
            title,
            title.get_rect(center=(self.width // 2, self.height // 2 - 30)),
        )
        if int(tick * 2) % 2 == 0:
            prompt = self.font_small.render("Press any key to start", True, (160, 160, 160))
            surface.blit(
                prompt,
                prompt.get_rect(center=(self.width // 2, self.height // 2 + 20)),
            )
        lines = [
            "SPACE  Pause/Resume",
            "N      Single step (paused)",
            "+ / -  Zoom in/out",
            "R      Reset run",
            "S      Toggle sensor rays",
            "L      Toggle legend",
            "D / F3 Debug overlay",
            "F12    Screenshot",
            "UP/DN  Scroll HUD",
        ]
        y = self.height // 2 + 60
        for line in lines:
            t = self.font_tiny.render(line, True, (100, 100, 100)) if self.font_tiny else None
            if t:
                surface.blit(t, t.get_rect(center=(self.width // 2, y)))
                y += 16

    # ------------------------------------------------------------------ #
    #  Legend                                                               #
    # ------------------------------------------------------------------ #

    def _draw_legend(self, surface: pygame.Surface) -> None:
        if self.font_tiny is None:
            return
        x = self.width - 130
        y = self.height - 16 - len(self.LEGEND_ITEMS) * 18 - 8
        box_w, box_h = 122, len(self.LEGEND_ITEMS) * 18 + 10
        pygame.draw.rect(
            surface, self.HUD_BG_COLOR, (x - 6, y - 4, box_w, box_h), border_radius=4
        )
        pygame.draw.rect(
            surface, self.HUD_BORDER_COLOR, (x - 6, y - 4, box_w, box_h), width=1, border_radius=4
        )
        for label, color in self.LEGEND_ITEMS:
            pygame.draw.circle(surface, color, (x + 4, y + 6), 4)
            text = self.font_tiny.render(label, True, (200, 200, 200))
            surface.blit(text, (x + 14, y))
            y += 18

    # ------------------------------------------------------------------ #
    #  Debug / FPS overlay                                                 #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(
        self, surface: pygame.Surface, stats: Mapping[str, Any], dt: float
    ) -> None:
        if self.font_tiny is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        lines = [
            f"FPS  {fps:.1f}",
            f"DT   {dt * 1000:.1f} ms",
            f"TICK {stats.get('tick', 0)}",
            f"VAVG {stats.get('mean_speed_mps', 0.0) * 100:.2f} cm/s",
            f"DIST {stats.get('mean_distance_m', 0.0):.2f} m",
            f"ZOOM {self.zoom:.1f}x",
            f"RES  {self.width}x{self.height}",
        ]
        x, y = 16, 16
        for line in lines:
            text = self.font_tiny.render(line, True, (0, 255, 127))
            surface.blit(text, (x, y))
            y += 14

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 100))
        surface.blit(overlay, (0, 0))
        if self.font_title:
            text = self.font_title.render("PAUSED", True, (220, 220, 220))
            surface.blit(text, text.get_rect(center=(self.width // 2, self.height // 2)))
