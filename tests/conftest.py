"""Pytest configuration and shared fixtures."""

import math
import os

# Headless pygame for the preview tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.scene import Scene
from geometry.sphere import Sphere
from lights.light import AmbientLight, PointLight
from materials.material import Material


@pytest.fixture
def matte():
    """A white diffuse material with a small ambient term and no reflection."""
    return Material(Vector3(0.8, 0.8, 0.8), ambient=Vector3(0.1, 0.1, 0.1))


@pytest.fixture
def shiny():
    """A material with diffuse, specular and mirror terms."""
    return Material(
        Vector3(0.5, 0.2, 0.2),
        specular=Vector3(0.5, 0.5, 0.5),
        specular_exponent=20.0,
        mirror=Vector3(0.5, 0.5, 0.5),
        ambient=Vector3(0.05, 0.05, 0.05),
    )


@pytest.fixture
def background():
    return Vector3(0.1, 0.2, 0.3)


@pytest.fixture
def two_sphere_scene(matte, background):
    """A unit sphere at the origin with a second one further along -z."""
    return Scene(
        [Sphere(Vector3(0, 0, 0), 1.0, matte), Sphere(Vector3(0, 0, -5), 1.0, matte)],
        background,
    )


@pytest.fixture
def lights():
    return [
        AmbientLight(Vector3(0.2, 0.2, 0.2)),
        PointLight(Vector3(0.8, 0.8, 0.8), Vector3(5, 5, 5)),
    ]


@pytest.fixture
def unit_camera():
    """Camera at the origin looking down -z with a 90 degree square view."""
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), 1.0, Vector3(0, 1, 0), math.pi / 2)


@pytest.fixture
def scene_document():
    """A complete JSON scene document as a dict."""
    return {
        "camera": {"origin": [0, 0, 5], "target": [0, 0, 0], "aspect": 2.0,
                   "up": [0, 1, 0], "vfov": 0.8},
        "background": [0.1, 0.1, 0.2],
        "materials": {
            "red": {"diffuse": [0.9, 0.2, 0.2], "specular": [0.5, 0.5, 0.5],
                    "specular_exponent": 32, "mirror": [0.1, 0.1, 0.1],
                    "ambient": [0.1, 0, 0]},
        },
        "objects": [
            {"type": "sphere", "center": [0, 0, 0], "radius": 1, "material": "red"},
            {"type": "sphere", "center": [2, 0, 0], "radius": 0.5, "material": "red"},
            {"type": "triangle", "vertices": [[-2, -1, -2], [2, -1, -2], [0, -1, 2]],
             "material": {"diffuse": [0.5, 0.5, 0.5]}},
        ],
        "lights": [
            {"type": "ambient", "intensity": [0.2, 0.2, 0.2]},
            {"intensity": [1, 1, 1], "position": [5, 5, 5]},
        ],
    }
