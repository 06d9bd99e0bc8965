"""Tests for the pinhole camera."""

import math

import pytest

from camera.camera import Camera
from core.errors import DegenerateGeometryError
from core.vector import Vector3


def test_center_ray_points_forward(unit_camera):
    ray = unit_camera.generate_ray(0.5, 0.5)
    assert ray.origin == Vector3(0, 0, 0)
    assert ray.direction.normalize() == Vector3(0, 0, -1)


def test_basis_is_orthonormal():
    camera = Camera(Vector3(1, 2, 3), Vector3(-2, 0, 1), 1.5, Vector3(0, 1, 0), 1.0)
    for v in (camera.forward, camera.right, camera.up):
        assert v.length() == pytest.approx(1.0)
    assert camera.forward.dot(camera.right) == pytest.approx(0.0, abs=1e-12)
    assert camera.forward.dot(camera.up) == pytest.approx(0.0, abs=1e-12)
    assert camera.right.dot(camera.up) == pytest.approx(0.0, abs=1e-12)
    assert camera.up.y > 0


def test_corners(unit_camera):
    top_left = unit_camera.generate_ray(0.0, 0.0).direction
    assert (top_left.x, top_left.y, top_left.z) == pytest.approx((-1.0, 1.0, -1.0))
    bottom_right = unit_camera.generate_ray(1.0, 1.0).direction
    assert (bottom_right.x, bottom_right.y, bottom_right.z) == pytest.approx((1.0, -1.0, -1.0))


def test_aspect_ratio_widens_horizontal_extent():
    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), 2.0, Vector3(0, 1, 0), math.pi / 2)
    assert camera.half_width == pytest.approx(2 * camera.half_height)
    right_edge = camera.generate_ray(1.0, 0.5).direction
    assert right_edge.x == pytest.approx(2.0)


def test_up_hint_need_not_be_perpendicular():
    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), 1.0, Vector3(0, 1, -1), 1.0)
    assert camera.up.dot(camera.forward) == pytest.approx(0.0, abs=1e-12)
    assert camera.up.y == pytest.approx(1.0)


@pytest.mark.parametrize("kwargs", [
    dict(target=Vector3(0, 0, 0)),                    # origin == target
    dict(up=Vector3(0, 0, -3)),                       # up parallel to forward
    dict(aspect_ratio=0.0),
    dict(vfov=0.0),
    dict(vfov=math.pi),
])
def test_invalid_cameras_are_rejected(kwargs):
    args = dict(origin=Vector3(0, 0, 0), target=Vector3(0, 0, -1), aspect_ratio=1.0,
                up=Vector3(0, 1, 0), vfov=1.0)
    args.update(kwargs)
    with pytest.raises(DegenerateGeometryError):
        Camera(**args)
