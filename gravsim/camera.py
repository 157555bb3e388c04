#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.

Zoom is expressed in world units per pixel and only takes the discrete values
listed in ZOOM_LEVELS, so the HUD can show round percentages.
"""
from typing import Optional, Tuple

from .constants import (
    DEFAULT_MOVE_SPEED,
    DEFAULT_ZOOM_INDEX,
    MOVE_SPEEDS,
    PAN_STEP,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    ZOOM_LEVELS,
)
from .data_models import Body


class Camera2D:
    """
    Simple 2D camera that maps world coordinates to screen pixels.

    Attributes:
        center: world position shown at the middle of the viewport, as a mutable [x, y].
        zoom: world units per pixel (smaller means zoomed-in).
        move_speed: multiplier for keyboard panning, one of MOVE_SPEEDS.
        following: id of the body the camera is locked onto, or None.
    """

    def __init__(self, center=(0.0, 0.0), zoom: float = ZOOM_LEVELS[DEFAULT_ZOOM_INDEX]):
        self.center = [float(center[0]), float(center[1])]
        self.zoom = zoom
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)
        self.move_speed = DEFAULT_MOVE_SPEED
        self.following: Optional[int] = None

    @property
    def zoom_percent(self) -> float:
        return 100.0 / self.zoom

    def set_viewport_size(self, w: int, h: int) -> None:
        # Centre is stored in world space, so the view stays centred on resize.
        self.viewport_size = (w, h)

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        cx, cy = self.center
        px = (pos[0] - cx) / self.zoom + self.viewport_size[0] / 2
        py = (pos[1] - cy) / self.zoom + self.viewport_size[1] / 2
        return (px, py)

    def screen_to_world(self, screen: Tuple[float, float]) -> Tuple[float, float]:
        cx, cy = self.center
        wx = (screen[0] - self.viewport_size[0] / 2) * self.zoom + cx
        wy = (screen[1] - self.viewport_size[1] / 2) * self.zoom + cy
        return (wx, wy)

    def zoom_index(self) -> int:
        """Index of the current zoom in ZOOM_LEVELS; an unlisted value maps to the default."""
        for i, level in enumerate(ZOOM_LEVELS):
            if level == self.zoom:
                return i
        return DEFAULT_ZOOM_INDEX

    def step_zoom(self, direction: int, pivot_screen: Optional[Tuple[float, float]] = None) -> None:
        """
        Move one zoom level out (direction > 0) or in (direction < 0).

        The world point under pivot_screen (default: viewport centre) stays put.
        """
        idx = self.zoom_index()
        if direction > 0 and idx < len(ZOOM_LEVELS) - 1:
            idx += 1
        elif direction < 0 and idx > 0:
            idx -= 1
        before = self.screen_to_world(pivot_screen) if pivot_screen is not None else None
        self.zoom = ZOOM_LEVELS[idx]
        if before is not None:
            after = self.screen_to_world(pivot_screen)
            self.center[0] += before[0] - after[0]
            self.center[1] += before[1] - after[1]

    def pan_pixels(self, dx_pixels: float, dy_pixels: float) -> None:
        """Drag the scene by a pixel offset (positive dx moves the scene right)."""
        self.center[0] -= dx_pixels * self.zoom
        self.center[1] -= dy_pixels * self.zoom

    def pan(self, dx_dir: int, dy_dir: int) -> None:
        """Keyboard panning: one frame's worth of movement at the current move speed."""
        step = self.move_speed * PAN_STEP
        self.pan_pixels(dx_dir * step, dy_dir * step)

    def cycle_move_speed(self) -> float:
        try:
            idx = MOVE_SPEEDS.index(self.move_speed)
        except ValueError:
            idx = len(MOVE_SPEEDS) - 1
        self.move_speed = MOVE_SPEEDS[(idx + 1) % len(MOVE_SPEEDS)]
        return self.move_speed

    def follow(self, body: Body) -> None:
        self.center = [body.position[0], body.position[1]]
