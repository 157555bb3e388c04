#!/usr/bin/env python3
"""
Collision pruning for Gravity Sim.

Only one collision rule exists: any body whose centre falls strictly inside the
primary body (index 0) is absorbed, i.e. removed from the simulation. Bodies
never collide with each other; they pass through one another.

Removal uses swap-with-last-and-pop, so the relative order of the remaining
bodies is not preserved. Index 0 is never a candidate, so the primary keeps its
slot.
"""
import logging
from typing import List

from .data_models import Body
from .vector_utils import vec_dist

logger = logging.getLogger(__name__)


def swap_remove(bodies: List[Body], index: int) -> Body:
    """Remove bodies[index] in O(1) by moving the last body into its slot."""
    last = bodies.pop()
    if index == len(bodies):
        return last
    removed = bodies[index]
    bodies[index] = last
    return removed


def find_colliding(bodies: List[Body]) -> List[int]:
    """Return ascending indices (>= 1) of bodies inside the primary's radius."""
    if len(bodies) < 2:
        return []
    primary = bodies[0]
    return [
        i for i in range(1, len(bodies))
        if vec_dist(bodies[i].position, primary.position) < primary.radius
    ]


def prune_collisions(bodies: List[Body]) -> List[Body]:
    """
    Remove every body that collided with the primary and return the removed bodies.

    Indices are collected first, then removed from the highest down: swapping the
    last body into a lower slot can then only move a body that was not marked.
    """
    marked = find_colliding(bodies)
    removed: List[Body] = []
    for idx in reversed(marked):
        removed.append(swap_remove(bodies, idx))
    if removed:
        logger.debug("Primary absorbed %d bod%s", len(removed), "y" if len(removed) == 1 else "ies")
    return removed
