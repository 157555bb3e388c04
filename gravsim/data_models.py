#!/usr/bin/env python3
"""
Data models for Gravity Sim.

This module defines the Body dataclass shared between physics, rendering, and UI.

Units and usage
- position and velocity are in world units; velocity is the displacement applied per tick.
- radius is an integer number of world units; it sizes the drawn circle and, for the
  primary body, acts as the collision threshold.
- trail stores past positions (oldest first) so the viewer can draw orbits; it is
  appended to by the simulator once per tick and never read by the physics.
- id is a random 128-bit integer so collaborators can refer to a body without holding
  an index, since indices change whenever bodies are removed.
"""
import math
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

from .constants import TRAIL_CAPACITY


def _new_body_id() -> int:
    return random.getrandbits(128)


@dataclass(eq=False)
class Body:
    """
    A gravitating point mass.

    Fields:
    - position: 2D position (x, y)
    - velocity: 2D velocity (vx, vy), added to position every tick
    - radius: drawn radius; a positive whole number
    - mass: mass; positive and finite
    - color: RGB tuple, only used for rendering
    - is_dynamic: False for immovable bodies such as the central star
    - trail: bounded deque of past positions
    - id: process-unique identifier
    """
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    radius: int
    mass: float
    color: Tuple[int, int, int] = (200, 200, 255)
    is_dynamic: bool = True
    trail: Deque[Tuple[float, float]] = field(default_factory=lambda: deque(maxlen=TRAIL_CAPACITY))
    id: int = field(default_factory=_new_body_id)

    def __post_init__(self):
        # isfinite first: int() raises OverflowError on inf and ValueError on nan
        if not (math.isfinite(self.radius) and self.radius > 0 and self.radius == int(self.radius)):
            raise ValueError(f"Body radius must be a positive whole number, got {self.radius!r}")
        if not (math.isfinite(self.mass) and self.mass > 0):
            raise ValueError(f"Body mass must be a positive finite number, got {self.mass!r}")
        self.radius = int(self.radius)
        self.mass = float(self.mass)
        self.position = (float(self.position[0]), float(self.position[1]))
        self.velocity = (float(self.velocity[0]), float(self.velocity[1]))

    def record_trail_point(self, point: Tuple[float, float]) -> None:
        """Append a past position; the oldest entry is dropped past TRAIL_CAPACITY."""
        self.trail.append(point)


def create_body(position, velocity, radius: int, mass: float, color, is_dynamic: bool) -> Body:
    """
    Build a Body. A radius that is not a positive whole number, or a mass that is
    not positive and finite, raises ValueError.
    """
    return Body(
        position=position,
        velocity=velocity,
        radius=radius,
        mass=mass,
        color=tuple(color[:3]),
        is_dynamic=bool(is_dynamic),
    )
