#!/usr/bin/env python3
"""
Core physics engine for Gravity Sim.

Responsibilities
- Prune bodies that fell into the primary body (see collisions.py).
- Accumulate pairwise Newtonian gravity for every body and advance it with a
  unit time step (explicit Euler on velocity, then position).
- Record each body's pre-move position in its trail.

Update ordering
- Bodies are processed in list order. Body i sums the acceleration from every
  other body into its velocity, then moves. Body i+1 therefore sees body i's
  new position but bodies i+2.. at their old ones. Trajectories depend on this
  ordering; it is kept so runs are reproducible tick for tick.
- Immovable bodies (is_dynamic=False) still attract the others but their own
  velocity and position are never touched. They still get a trail entry.

Numerical notes
- There is no softening. Two bodies at the same position, or so close that
  |r|^2 underflows to 0, would divide by zero; such a pair is skipped for that
  tick and a warning is logged.
- Complexity is O(N^2) per tick and everything runs on the caller's thread.
"""
import logging
import math
from typing import List, Optional, Tuple

from .collisions import prune_collisions, swap_remove
from .constants import G_GRAV
from .data_models import Body
from .vector_utils import vec_add, vec_div, vec_len, vec_norm, vec_scale, vec_sub, vec_dist

logger = logging.getLogger(__name__)


def pair_acceleration(body: Body, other: Body) -> Optional[Tuple[float, float]]:
    """
    Acceleration of body caused by other, or None when they are too close for
    |r|^2 to be represented (coincident, or so near that it underflows to 0).

        F = G * r_hat * m_i * m_j / |r|^2,  a = F / m_i
    """
    delta = vec_sub(other.position, body.position)
    dist = vec_len(delta)
    dist_sq = dist * dist
    if dist_sq == 0.0:
        return None
    force = vec_div(vec_scale(vec_norm(delta), G_GRAV * body.mass * other.mass), dist_sq)
    return vec_div(force, body.mass)


def integrate(bodies: List[Body]) -> None:
    """Apply gravity, move dynamic bodies, and append trail points, in list order."""
    singular_pairs = 0
    for i, body in enumerate(bodies):
        if body.is_dynamic:
            vel = body.velocity
            for j, other in enumerate(bodies):
                if i == j:
                    continue
                accel = pair_acceleration(body, other)
                if accel is None:
                    singular_pairs += 1
                    continue
                vel = vec_add(vel, accel)
            body.velocity = vel

        old_pos = body.position
        if body.is_dynamic:
            body.position = vec_add(old_pos, body.velocity)
        body.record_trail_point(old_pos)

    if singular_pairs:
        logger.warning("Skipped %d coincident body pair(s) this tick", singular_pairs)


def step(bodies: List[Body]) -> None:
    """Advance the whole system by one tick, in place."""
    prune_collisions(bodies)
    integrate(bodies)


def circular_orbit_speed(central_mass: float, distance: float) -> float:
    """
    Speed needed for a circular orbit around a fixed mass: v = sqrt(G * M / r).
    """
    if distance <= 0:
        return 0.0
    return math.sqrt(G_GRAV * central_mass / distance)


class Simulator:
    """
    Owns the ordered body list. bodies[0] is the primary body.

    Callers read bodies between ticks; they add and remove bodies only through
    this class, and refer to specific bodies by id rather than by index.
    """

    def __init__(self, bodies: Optional[List[Body]] = None):
        self.bodies: List[Body] = list(bodies) if bodies else []
        self.tick_count = 0

    @property
    def primary(self) -> Optional[Body]:
        return self.bodies[0] if self.bodies else None

    def step(self) -> None:
        if not self.bodies:
            return
        step(self.bodies)
        self.tick_count += 1

    def replace_bodies(self, bodies: List[Body]) -> None:
        self.bodies = list(bodies)
        self.tick_count = 0

    def add_body(self, body: Body) -> None:
        self.bodies.append(body)

    def index_of(self, body_id: int) -> Optional[int]:
        for i, b in enumerate(self.bodies):
            if b.id == body_id:
                return i
        return None

    def find_body(self, body_id: Optional[int]) -> Optional[Body]:
        if body_id is None:
            return None
        idx = self.index_of(body_id)
        return self.bodies[idx] if idx is not None else None

    def remove_body(self, body_id: int, allow_primary: bool = False) -> bool:
        """Swap-remove the body with this id. Returns False if nothing was removed."""
        idx = self.index_of(body_id)
        if idx is None or (idx == 0 and not allow_primary):
            return False
        swap_remove(self.bodies, idx)
        return True

    def body_at(self, point: Tuple[float, float], skip_primary: bool = False) -> Optional[Body]:
        """First body (in list order) whose radius covers point, boundary included."""
        start = 1 if skip_primary else 0
        for b in self.bodies[start:]:
            if vec_dist(point, b.position) <= b.radius:
                return b
        return None
