#!/usr/bin/env python3
"""
Simulation controller: the state shared by the viewport and the control panel.

The controller owns the Simulator together with the presentation-only state
(pause flag, simulation speed, orbit display toggles, drag-and-drop spawn,
frame statistics). Everything runs on one thread: input is handled, then the
physics is stepped, then the frame is drawn, so no locking is needed.
"""
import logging
import random
from typing import List, Optional, Tuple

from .camera import Camera2D
from .constants import (
    DEFAULT_SIM_SPEED,
    FRAME_STATS_WINDOW,
    SIMULATION_SPEEDS,
    SPAWN_COLOR_RANGE,
    SPAWN_MASS_RANGE,
    SPAWN_VELOCITY_SCALE,
)
from .data_models import Body, create_body
from .physics import Simulator
from .scenarios import DEFAULT_SCENARIO, SCENARIOS
from .vector_utils import clamp, vec_add, vec_scale, vec_sub

logger = logging.getLogger(__name__)


def spawn_radius(mass: float) -> int:
    return int((mass + 500.0) / 75.0)


def relative_trail(body: Body, reference: Body) -> List[Tuple[float, float]]:
    """
    Body's trail (plus its current position) as seen from the reference body.

    Entries are paired from the newest end, since both trails gain one point per
    tick; the result is shifted so it ends at the body's current position.
    """
    own = list(body.trail) + [body.position]
    ref = list(reference.trail) + [reference.position]
    n = min(len(own), len(ref))
    own = own[len(own) - n:]
    ref = ref[len(ref) - n:]
    anchor = reference.position
    return [vec_add(vec_sub(p, r), anchor) for p, r in zip(own, ref)]


class SimulationController:
    """
    Holds the simulator and the user-facing simulation settings.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.sim = Simulator()
        self.rng = rng or random.Random()
        self.running = True  # app running
        self.paused = True
        self.sim_speed = DEFAULT_SIM_SPEED
        self.render_orbits = False
        self.relative_orbits = False
        self.scenario_name: Optional[str] = None

        # Drag and drop spawn: world position where the left button went down
        self.spawn_start: Optional[Tuple[float, float]] = None

        # Frame statistics
        self.mspf = 0.0
        self._frames = 0
        self._total_secs = 0.0

        self.last_message: Optional[str] = None

    @property
    def bodies(self) -> List[Body]:
        return self.sim.bodies

    # -----------------------
    # Scenarios
    # -----------------------

    def load_scenario(self, name: str) -> None:
        builder = SCENARIOS.get(name)
        if builder is None:
            raise KeyError(f"Unknown scenario: {name}")
        self.sim.replace_bodies(builder())
        self.scenario_name = name
        self.spawn_start = None
        logger.info("Loaded scenario '%s' with %d bodies", name, len(self.sim.bodies))
        self.last_message = f"Loaded scenario: {name}"

    def load_default(self) -> None:
        self.load_scenario(DEFAULT_SCENARIO)

    # -----------------------
    # Stepping
    # -----------------------

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def set_sim_speed(self, speed: int) -> None:
        if speed not in SIMULATION_SPEEDS:
            raise ValueError(f"Simulation speed must be one of {SIMULATION_SPEEDS}, got {speed!r}")
        self.sim_speed = speed

    def cycle_sim_speed(self) -> int:
        try:
            idx = SIMULATION_SPEEDS.index(self.sim_speed)
        except ValueError:
            idx = len(SIMULATION_SPEEDS) - 1
        self.sim_speed = SIMULATION_SPEEDS[(idx + 1) % len(SIMULATION_SPEEDS)]
        return self.sim_speed

    def advance_frame(self) -> int:
        """Run sim_speed ticks unless paused. Returns the number of ticks run."""
        if self.paused:
            return 0
        for _ in range(self.sim_speed):
            self.sim.step()
        return self.sim_speed

    def single_step(self) -> None:
        self.sim.step()

    def record_frame_time(self, seconds: float) -> None:
        """Accumulate frame times and refresh mspf every FRAME_STATS_WINDOW frames."""
        self._frames += 1
        self._total_secs += seconds
        if self._frames == FRAME_STATS_WINDOW:
            self.mspf = self._total_secs / self._frames * 1000.0
            self._frames = 0
            self._total_secs = 0.0

    # -----------------------
    # Adding and removing bodies
    # -----------------------

    def add_body(self, body: Body) -> None:
        self.sim.add_body(body)
        logger.info("Added body %032x (mass %.1f, radius %d)", body.id, body.mass, body.radius)

    def begin_spawn(self, world_pos: Tuple[float, float]) -> None:
        self.spawn_start = world_pos

    def cancel_spawn(self) -> None:
        self.spawn_start = None

    def finish_spawn(self, world_pos: Tuple[float, float]) -> Optional[Body]:
        """
        Spawn a body where the drag started, launched along the drag direction.

        Mass and colour are random; the radius grows with mass.
        """
        if self.spawn_start is None:
            return None
        start = self.spawn_start
        self.spawn_start = None

        lo, hi = SPAWN_COLOR_RANGE
        color = tuple(int(clamp(self.rng.randint(0, 255), lo, hi)) for _ in range(3))
        mass = self.rng.uniform(*SPAWN_MASS_RANGE)
        velocity = vec_scale(vec_sub(world_pos, start), SPAWN_VELOCITY_SCALE)

        body = create_body(start, velocity, spawn_radius(mass), mass, color, True)
        self.add_body(body)
        return body

    def delete_at(self, world_pos: Tuple[float, float]) -> Optional[Body]:
        """Delete the first non-primary body under world_pos."""
        body = self.sim.body_at(world_pos, skip_primary=True)
        if body is None:
            return None
        self.sim.remove_body(body.id)
        logger.info("Deleted body %032x", body.id)
        return body

    def deletion_blocker(self, body_id: int) -> Optional[str]:
        """Why the body cannot be deleted, or None if it can."""
        idx = self.sim.index_of(body_id)
        if idx is None:
            return "That body no longer exists."
        if idx == 0:
            return "The star cannot be deleted."
        return None

    def delete_body(self, body_id: int) -> bool:
        removed = self.sim.remove_body(body_id)
        if removed:
            logger.info("Deleted body %032x", body_id)
        return removed

    # -----------------------
    # Camera helpers
    # -----------------------

    def follow_at(self, world_pos: Tuple[float, float], camera: Camera2D) -> Optional[Body]:
        """Lock the camera onto the body under world_pos, or unlock it on a miss."""
        body = self.sim.body_at(world_pos)
        camera.following = body.id if body is not None else None
        return body

    def update_follow(self, camera: Camera2D) -> None:
        """Centre the camera on the followed body; drop the lock if the body is gone."""
        if camera.following is None:
            return
        body = self.sim.find_body(camera.following)
        if body is None:
            camera.following = None
            return
        camera.follow(body)

    def orbit_points(self, body: Body, camera: Camera2D) -> List[Tuple[float, float]]:
        """World-space points of the body's orbit line, honouring relative_orbits."""
        if self.relative_orbits:
            reference = self.sim.find_body(camera.following)
            if reference is not None and reference is not body:
                return relative_trail(body, reference)
        return list(body.trail) + [body.position]
