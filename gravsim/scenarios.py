#!/usr/bin/env python3
"""
Built-in starting scenes.

Every scenario puts an immovable star at index 0, since the star is the
primary body that absorbs anything falling into it.
"""
from typing import Callable, Dict, List

from .data_models import Body
from .physics import circular_orbit_speed

STAR_MASS = 100000.0
STAR_RADIUS = 25
STAR_COLOR = (255, 255, 255)


def _star() -> Body:
    return Body((0.0, 0.0), (0.0, 0.0), STAR_RADIUS, STAR_MASS, STAR_COLOR, is_dynamic=False)


def default_scenario() -> List[Body]:
    """Star with five planets, one of them a light moon-like body near the heavy blue planet."""
    return [
        _star(),
        Body((0.0, -100.0), (10.0, 0.0), 6, 1.0, (80, 80, 80)),
        Body((0.0, -200.0), (7.0, 0.0), 9, 1.0, (217, 174, 56)),
        Body((0.0, -700.0), (3.7, 0.0), 11, 200.0, (50, 84, 160)),
        Body((0.0, -660.0), (4.45, 0.0), 2, 1.0, (230, 230, 230)),
        Body((0.0, -450.0), (2.0, 0.0), 5, 1.0, (255, 255, 160)),
    ]


def circular_scenario() -> List[Body]:
    """Four light planets on circular orbits at increasing distances."""
    bodies = [_star()]
    colors = [(200, 120, 120), (120, 200, 120), (120, 120, 200), (200, 200, 120)]
    for k, color in enumerate(colors):
        r = 150.0 + 150.0 * k
        v = circular_orbit_speed(STAR_MASS, r)
        bodies.append(Body((r, 0.0), (0.0, v), 5 + k, 1.0, color))
    return bodies


def heavy_planets_scenario() -> List[Body]:
    """Two heavy planets on opposite sides of the star, one with a light companion."""
    r = 400.0
    v = circular_orbit_speed(STAR_MASS, r)
    return [
        _star(),
        Body((-r, 0.0), (0.0, -v), 8, 500.0, (255, 140, 90)),
        Body((-r - 40.0, 0.0), (0.0, -v - 0.3), 4, 5.0, (150, 200, 255)),
        Body((r, 0.0), (0.0, v), 8, 500.0, (140, 255, 140)),
    ]


def empty_scenario() -> List[Body]:
    """Just the star; populate it by dragging."""
    return [_star()]


SCENARIOS: Dict[str, Callable[[], List[Body]]] = {
    "Default system": default_scenario,
    "Circular orbits": circular_scenario,
    "Heavy planets": heavy_planets_scenario,
    "Empty (star only)": empty_scenario,
}
DEFAULT_SCENARIO = "Default system"
