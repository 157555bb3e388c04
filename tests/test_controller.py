"""Tests for the simulation controller (presentation-side state)."""

import random

import pytest

from gravsim.camera import Camera2D
from gravsim.constants import SIMULATION_SPEEDS, SPAWN_COLOR_RANGE, SPAWN_MASS_RANGE
from gravsim.controller import SimulationController, relative_trail, spawn_radius
from gravsim.data_models import Body


@pytest.fixture
def controller():
    ctl = SimulationController(rng=random.Random(1234))
    ctl.load_default()
    return ctl


def test_starts_paused_with_default_scenario(controller):
    assert controller.paused
    assert len(controller.bodies) == 6
    assert controller.bodies[0].is_dynamic is False
    assert controller.advance_frame() == 0
    assert controller.sim.tick_count == 0


def test_advance_frame_runs_sim_speed_ticks(controller):
    controller.toggle_pause()
    controller.set_sim_speed(5)

    assert controller.advance_frame() == 5
    assert controller.sim.tick_count == 5
    assert all(len(b.trail) == 5 for b in controller.bodies)

    controller.single_step()
    assert controller.sim.tick_count == 6


def test_sim_speed_cycle_and_validation(controller):
    controller.sim_speed = SIMULATION_SPEEDS[-1]
    assert controller.cycle_sim_speed() == SIMULATION_SPEEDS[0]
    assert controller.cycle_sim_speed() == SIMULATION_SPEEDS[1]

    with pytest.raises(ValueError):
        controller.set_sim_speed(3)


def test_unknown_scenario_is_rejected(controller):
    with pytest.raises(KeyError):
        controller.load_scenario("No such scene")
    assert len(controller.bodies) == 6


def test_spawn_from_drag(controller):
    """The body appears at the press point, launched along the drag."""
    assert controller.finish_spawn((10.0, 10.0)) is None

    controller.begin_spawn((100.0, 200.0))
    body = controller.finish_spawn((140.0, 170.0))

    assert body is controller.bodies[-1]
    assert controller.spawn_start is None
    assert body.position == (100.0, 200.0)
    assert body.velocity == pytest.approx((2.0, -1.5))
    assert body.is_dynamic
    assert SPAWN_MASS_RANGE[0] <= body.mass <= SPAWN_MASS_RANGE[1]
    assert body.radius == spawn_radius(body.mass)
    assert all(SPAWN_COLOR_RANGE[0] <= c <= SPAWN_COLOR_RANGE[1] for c in body.color)


def test_spawn_radius():
    assert spawn_radius(10.0) == 6
    assert spawn_radius(500.0) == 13


def test_delete_at_never_removes_the_star(controller):
    star = controller.bodies[0]
    assert controller.delete_at(star.position) is None
    assert controller.bodies[0] is star

    target = controller.bodies[3]
    removed = controller.delete_at((target.position[0] + target.radius, target.position[1]))
    assert removed is target
    assert target not in controller.bodies
    assert len(controller.bodies) == 5


def test_delete_body_by_id(controller):
    target = controller.bodies[2]
    assert controller.delete_body(target.id)
    assert not controller.delete_body(target.id)
    assert not controller.delete_body(controller.bodies[0].id)


def test_deletion_blocker_explains_refusals(controller):
    """The star and bodies that are already gone report distinct reasons."""
    star = controller.bodies[0]
    planet = controller.bodies[1]

    assert controller.deletion_blocker(star.id) == "The star cannot be deleted."
    assert controller.deletion_blocker(planet.id) is None

    assert controller.delete_body(planet.id)
    assert controller.deletion_blocker(planet.id) == "That body no longer exists."


def test_follow_and_release(controller):
    cam = Camera2D()
    planet = controller.bodies[1]

    assert controller.follow_at(planet.position, cam) is planet
    assert cam.following == planet.id

    controller.update_follow(cam)
    assert cam.center == [planet.position[0], planet.position[1]]

    assert controller.follow_at((5000.0, 5000.0), cam) is None
    assert cam.following is None


def test_follow_lock_dropped_when_body_disappears(controller):
    cam = Camera2D()
    planet = controller.bodies[4]
    cam.following = planet.id
    controller.delete_body(planet.id)

    controller.update_follow(cam)
    assert cam.following is None


def test_frame_time_average():
    ctl = SimulationController()
    for _ in range(29):
        ctl.record_frame_time(0.01)
    assert ctl.mspf == 0.0
    ctl.record_frame_time(0.01)
    assert ctl.mspf == pytest.approx(10.0)


def test_relative_trail():
    """Points are paired from the newest end and anchored on the reference body."""
    body = Body((2.0, 0.0), (0.0, 0.0), 1, 1.0)
    ref = Body((0.0, 2.0), (0.0, 0.0), 1, 1.0)
    for p in [(9.0, 9.0), (0.0, 0.0), (1.0, 0.0)]:
        body.record_trail_point(p)
    for p in [(0.0, 0.0), (0.0, 1.0)]:
        ref.record_trail_point(p)

    assert relative_trail(body, ref) == [(0.0, 2.0), (1.0, 1.0), (2.0, 0.0)]


def test_orbit_points_absolute_and_relative(controller):
    cam = Camera2D()
    controller.toggle_pause()
    controller.advance_frame()
    planet = controller.bodies[1]

    assert controller.orbit_points(planet, cam) == list(planet.trail) + [planet.position]

    controller.relative_orbits = True
    assert controller.orbit_points(planet, cam) == list(planet.trail) + [planet.position]

    other = controller.bodies[2]
    cam.following = other.id
    assert controller.orbit_points(planet, cam) == relative_trail(planet, other)
