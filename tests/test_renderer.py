"""Tests for renderer helpers that do not need a window."""

import pytest

pytest.importorskip("pygame")

from gravsim.renderer import _safe_point  # noqa: E402


def test_safe_point_rounds_to_pixels():
    assert _safe_point((10.7, -3.2)) == (10, -3)


@pytest.mark.parametrize("point", [
    (float("nan"), 0.0),
    (0.0, float("inf")),
    (1e9, 0.0),
])
def test_safe_point_rejects_unusable_coordinates(point):
    assert _safe_point(point) is None
