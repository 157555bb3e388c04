"""Tests for the 2D camera."""

import pytest

from gravsim.camera import Camera2D
from gravsim.constants import MOVE_SPEEDS, PAN_STEP, ZOOM_LEVELS
from gravsim.data_models import Body


def test_default_camera_centres_origin():
    cam = Camera2D()
    cam.set_viewport_size(800, 600)

    assert cam.zoom == 1.0
    assert cam.zoom_percent == pytest.approx(100.0)
    assert cam.world_to_screen((0.0, 0.0)) == (400.0, 300.0)
    assert cam.world_to_screen((10.0, -20.0)) == (410.0, 280.0)


def test_screen_world_round_trip():
    cam = Camera2D(center=(150.0, -75.0), zoom=2.5)
    cam.set_viewport_size(1024, 768)

    for point in [(0.0, 0.0), (123.5, -9.25), (-4000.0, 2500.0)]:
        assert cam.screen_to_world(cam.world_to_screen(point)) == pytest.approx(point)


def test_step_zoom_moves_one_level_and_clamps():
    cam = Camera2D()

    cam.step_zoom(1)
    assert cam.zoom == 1.25
    cam.step_zoom(-1)
    cam.step_zoom(-1)
    assert cam.zoom == 0.8

    for _ in range(len(ZOOM_LEVELS) + 3):
        cam.step_zoom(-1)
    assert cam.zoom == ZOOM_LEVELS[0]

    for _ in range(len(ZOOM_LEVELS) + 3):
        cam.step_zoom(1)
    assert cam.zoom == ZOOM_LEVELS[-1]


def test_unlisted_zoom_restarts_from_default_level():
    cam = Camera2D(zoom=0.77)
    cam.step_zoom(1)
    assert cam.zoom == 1.25


def test_zoom_keeps_centre_and_pivot_fixed():
    cam = Camera2D(center=(40.0, 60.0))
    cam.set_viewport_size(800, 600)

    cam.step_zoom(1)
    assert cam.center == [40.0, 60.0]

    pivot = (100, 500)
    before = cam.screen_to_world(pivot)
    cam.step_zoom(1, pivot_screen=pivot)
    assert cam.screen_to_world(pivot) == pytest.approx(before)


def test_keyboard_pan_uses_move_speed():
    cam = Camera2D()
    cam.move_speed = 2.0

    cam.pan(0, 1)
    # The scene moves down, so the camera looks further up
    assert cam.center == [0.0, -2.0 * PAN_STEP]

    cam.zoom = 2.0
    cam.pan(-1, 0)
    assert cam.center == [2.0 * PAN_STEP * 2.0, -2.0 * PAN_STEP]


def test_cycle_move_speed_wraps():
    cam = Camera2D()
    cam.move_speed = MOVE_SPEEDS[-1]
    assert cam.cycle_move_speed() == MOVE_SPEEDS[0]
    assert cam.cycle_move_speed() == MOVE_SPEEDS[1]

    cam.move_speed = 3.3
    assert cam.cycle_move_speed() == MOVE_SPEEDS[0]


def test_follow_centres_on_body():
    cam = Camera2D()
    body = Body((12.0, -7.0), (0.0, 0.0), 3, 1.0)
    cam.follow(body)
    assert cam.center == [12.0, -7.0]
