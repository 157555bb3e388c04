#!/usr/bin/env python3
"""
Pygame viewport: input handling and drawing.

Controls
- Mouse wheel: zoom (keeps the centre of the screen fixed)
- W/A/S/D: pan, E: cycle camera speed
- Left drag: spawn a body at the press point, launched along the drag
- Right button (held): delete bodies under the cursor (never the star)
- F: follow the body under the cursor (F on empty space stops following)
- Q: toggle orbits, R: toggle orbits relative to the followed body
- T: cycle simulation speed, P or Space: pause/play

The renderer never touches physical fields; it reads bodies and calls the
controller for anything that changes them.
"""
import math
from typing import Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from .camera import Camera2D
from .constants import (
    BACKGROUND_COLOR,
    DRAG_LINE_COLOR,
    HUD_COLOR,
    HUD_HIGHLIGHT_COLOR,
    MOVE_SPEEDS,
    ORBIT_COLOR,
    SAFE_COORD_LIMIT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .controller import SimulationController


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        # nan or inf coordinates
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameRenderer:
    """
    Owns the pygame window. handle_events() and draw() are called once per frame
    by the application loop.
    """

    def __init__(self, controller: SimulationController, size=(VIEW_WIDTH, VIEW_HEIGHT)):
        self.controller = controller
        self.camera = Camera2D(center=(0.0, 0.0))
        self.size = size
        self.surface = None
        self.clock = None
        self.font = None
        self.running = True

    def open(self) -> None:
        pygame.init()
        pygame.display.set_caption("Gravity Sim")
        self.surface = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        self.camera.set_viewport_size(*self.size)
        self.clock = pygame.time.Clock()
        try:
            self.font = pygame.font.SysFont("consolas", 18)
        except pygame.error:
            self.font = pygame.font.Font(None, 20)

    def close(self) -> None:
        pygame.quit()

    # -----------------------
    # Input
    # -----------------------

    def mouse_world(self) -> Tuple[float, float]:
        return self.camera.screen_to_world(pygame.mouse.get_pos())

    def handle_events(self) -> None:
        ctl = self.controller
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.MOUSEWHEEL:
                if event.y:
                    # Wheel up zooms in, i.e. fewer world units per pixel
                    self.camera.step_zoom(-1 if event.y > 0 else 1)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                ctl.begin_spawn(self.mouse_world())

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                ctl.finish_spawn(self.mouse_world())

            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)

        if pygame.mouse.get_pressed()[2]:
            ctl.delete_at(self.mouse_world())

        keys = pygame.key.get_pressed()
        dx = int(keys[pygame.K_a]) - int(keys[pygame.K_d])
        dy = int(keys[pygame.K_w]) - int(keys[pygame.K_s])
        if dx or dy:
            # Manual panning would be undone by the follow lock on the next frame
            self.camera.following = None
            self.camera.pan(dx, dy)

    def _handle_key(self, key) -> None:
        ctl = self.controller
        if key == pygame.K_e:
            self.camera.cycle_move_speed()
        elif key == pygame.K_t:
            ctl.cycle_sim_speed()
        elif key == pygame.K_q:
            ctl.render_orbits = not ctl.render_orbits
        elif key in (pygame.K_p, pygame.K_SPACE):
            ctl.toggle_pause()
        elif key == pygame.K_f:
            ctl.follow_at(self.mouse_world(), self.camera)
        elif key == pygame.K_r:
            ctl.relative_orbits = not ctl.relative_orbits

    # -----------------------
    # Drawing
    # -----------------------

    def draw(self) -> None:
        ctl = self.controller
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        ctl.update_follow(self.camera)

        if ctl.render_orbits:
            width = max(1, int(2.0 / self.camera.zoom))
            for b in ctl.bodies:
                if b.is_dynamic:
                    self.draw_orbit(surf, ctl.orbit_points(b, self.camera), width)

        for b in ctl.bodies:
            self.draw_body(surf, b)

        if ctl.spawn_start is not None:
            start = _safe_point(self.camera.world_to_screen(ctl.spawn_start))
            end = _safe_point(pygame.mouse.get_pos())
            if start and end:
                pygame.draw.line(surf, DRAG_LINE_COLOR, start, end, 2)

        self.draw_hud(surf)
        pygame.display.flip()

    def draw_orbit(self, surf, points: Sequence[Tuple[float, float]], width: int) -> None:
        pts = []
        for p in points:
            sp = _safe_point(self.camera.world_to_screen(p))
            if sp:
                pts.append(sp)
        if len(pts) > 1:
            pygame.draw.lines(surf, ORBIT_COLOR, False, pts, width)

    def draw_body(self, surf, body) -> None:
        sp = _safe_point(self.camera.world_to_screen(body.position))
        if sp is None:
            return
        vis_r = max(1, int(round(body.radius / self.camera.zoom)))
        gfxdraw.filled_circle(surf, sp[0], sp[1], vis_r, body.color)
        gfxdraw.aacircle(surf, sp[0], sp[1], vis_r, body.color)

    def draw_text(self, surf, text: str, x: int, y: int, color=HUD_COLOR) -> int:
        img = self.font.render(text, True, color)
        surf.blit(img, (x, y))
        return img.get_width()

    def draw_hud(self, surf) -> None:
        ctl = self.controller
        cx, cy = self.camera.center
        self.draw_text(
            surf,
            f"{ctl.mspf:.2f} mspf ({len(ctl.bodies)} objects) "
            f"(X: {cx:.2f}, Y: {cy:.2f}, {self.camera.zoom_percent:.2f}%)",
            20, 20,
        )

        x = 20 + self.draw_text(surf, "Camera Speed: ", 20, 42)
        for speed in MOVE_SPEEDS:
            color = HUD_HIGHLIGHT_COLOR if math.isclose(speed, self.camera.move_speed) else HUD_COLOR
            x += self.draw_text(surf, f"{speed:.0f}x", x, 42, color) + 10

        state = "Paused" if ctl.paused else "Running"
        orbits = "relative" if ctl.relative_orbits else "on"
        self.draw_text(
            surf,
            f"Sim Speed: {ctl.sim_speed}x  [{state}]  Orbits: {orbits if ctl.render_orbits else 'off'}",
            20, 64,
        )

    def tick(self, fps: int) -> float:
        return self.clock.tick(fps) / 1000.0
