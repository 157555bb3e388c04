#!/usr/bin/env python3
"""
2D vector helpers operating on plain (x, y) tuples.

Positions and velocities are stored as tuples of floats, so these helpers never
mutate their arguments.
"""
import math
from typing import Tuple

Vec2 = Tuple[float, float]


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Vec2, s: float) -> Vec2:
    return (a[0] * s, a[1] * s)


def vec_div(a: Vec2, s: float) -> Vec2:
    return (a[0] / s, a[1] / s)


def vec_len(a: Vec2) -> float:
    return math.hypot(a[0], a[1])


def vec_dist(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def vec_norm(a: Vec2) -> Vec2:
    """Unit vector along a. Zero-length input raises ZeroDivisionError."""
    return vec_div(a, vec_len(a))
