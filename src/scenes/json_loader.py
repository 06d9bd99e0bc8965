# scenes/json_loader.py
"""
Scene description files.

A scene file is a JSON document with a camera, a background color, optional
named materials, the objects and the lights::

    {
      "camera": {"origin": [0, 0, 5], "target": [0, 0, 0], "aspect": 1.5,
                 "up": [0, 1, 0], "vfov": 0.8},
      "background": [0.1, 0.1, 0.2],
      "materials": {"red": {"diffuse": [0.9, 0.2, 0.2], "specular": [0.5, 0.5, 0.5],
                            "specular_exponent": 32, "mirror": [0.1, 0.1, 0.1],
                            "ambient": [0.1, 0, 0]}},
      "objects": [
        {"type": "sphere", "center": [0, 0, 0], "radius": 1, "material": "red"},
        {"type": "triangle", "vertices": [[-2, -1, -2], [2, -1, -2], [0, -1, 2]],
         "material": {"diffuse": [0.5, 0.5, 0.5]}},
        {"type": "mesh", "path": "cube.obj", "material": "red",
         "scale": 0.5, "offset": [2, 0, 0]}
      ],
      "lights": [
        {"type": "ambient", "intensity": [0.2, 0.2, 0.2]},
        {"type": "point", "intensity": [1, 1, 1], "position": [5, 5, 5]}
      ]
    }

Objects naming the same material share one Material instance. A light with no
"type" is a point light when it has a "position" and ambient otherwise.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List
from camera.camera import Camera
from core.errors import SceneFormatError
from core.vector import Vector3
from geometry.hittable import Hittable
from geometry.mesh import load_obj
from geometry.scene import Scene
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from lights.light import AmbientLight, Light, PointLight
from materials.material import Material

logger = logging.getLogger(__name__)

@dataclass
class SceneDescription:
    scene: Scene
    camera: Camera
    lights: List[Light] = field(default_factory=list)

def _require(data: Dict[str, Any], key: str, what: str):
    if not isinstance(data, dict):
        raise SceneFormatError(f"{what} must be an object, got {type(data).__name__}")
    if key not in data:
        raise SceneFormatError(f"{what} is missing '{key}'")
    return data[key]

def _sequence(value, what: str) -> list:
    if not isinstance(value, list):
        raise SceneFormatError(f"{what} must be a list, got {type(value).__name__}")
    return value

def _number(value, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise SceneFormatError(f"{what} must be a number, got {value!r}")
    return float(value)

def _vector(value, what: str) -> Vector3:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneFormatError(f"{what} must be a list of three numbers, got {value!r}")
    return Vector3(*(_number(v, what) for v in value))

def material_from_dict(data: Dict[str, Any], what: str = "material") -> Material:
    def optional_vector(key):
        return _vector(data[key], f"{what}.{key}") if key in data else None

    return Material(
        _vector(_require(data, "diffuse", what), f"{what}.diffuse"),
        specular=optional_vector("specular"),
        specular_exponent=_number(data.get("specular_exponent", 0.0),
                                  f"{what}.specular_exponent"),
        mirror=optional_vector("mirror"),
        ambient=optional_vector("ambient"),
    )

def _material(ref, materials: Dict[str, Material], what: str) -> Material:
    if isinstance(ref, str):
        if ref not in materials:
            raise SceneFormatError(f"{what} refers to unknown material '{ref}'")
        return materials[ref]
    return material_from_dict(ref, what)

def objects_from_dict(data: Dict[str, Any], materials: Dict[str, Material],
                      base_dir: str = ".", what: str = "object") -> List[Hittable]:
    kind = _require(data, "type", what)
    material = _material(_require(data, "material", what), materials, f"{what}.material")

    if kind == "sphere":
        return [Sphere(_vector(_require(data, "center", what), f"{what}.center"),
                       _number(_require(data, "radius", what), f"{what}.radius"),
                       material)]
    if kind == "triangle":
        vertices = _require(data, "vertices", what)
        if not isinstance(vertices, list) or len(vertices) != 3:
            raise SceneFormatError(f"{what}.vertices must list exactly three points")
        return [Triangle(*(_vector(v, f"{what}.vertices") for v in vertices), material)]
    if kind == "mesh":
        path = _require(data, "path", what)
        if not isinstance(path, str):
            raise SceneFormatError(f"{what}.path must be a string, got {path!r}")
        path = os.path.join(base_dir, path)
        offset = _vector(data["offset"], f"{what}.offset") if "offset" in data else None
        scale = _number(data.get("scale", 1.0), f"{what}.scale")
        return load_obj(path, material, scale=scale, offset=offset)
    raise SceneFormatError(f"{what} has unknown type {kind!r}")

def light_from_dict(data: Dict[str, Any], what: str = "light") -> Light:
    intensity = _vector(_require(data, "intensity", what), f"{what}.intensity")
    kind = data.get("type", "point" if "position" in data else "ambient")
    if kind == "ambient":
        return AmbientLight(intensity)
    if kind == "point":
        return PointLight(intensity, _vector(_require(data, "position", what), f"{what}.position"))
    raise SceneFormatError(f"{what} has unknown type {kind!r}")

def camera_from_dict(data: Dict[str, Any], what: str = "camera") -> Camera:
    return Camera(
        _vector(_require(data, "origin", what), f"{what}.origin"),
        _vector(_require(data, "target", what), f"{what}.target"),
        _number(_require(data, "aspect", what), f"{what}.aspect"),
        _vector(_require(data, "up", what), f"{what}.up"),
        _number(_require(data, "vfov", what), f"{what}.vfov"),
    )

def scene_from_dict(data: Dict[str, Any], base_dir: str = ".") -> SceneDescription:
    camera = camera_from_dict(_require(data, "camera", "scene"))
    background = _vector(data.get("background", [0, 0, 0]), "background")

    named = data.get("materials", {})
    if not isinstance(named, dict):
        raise SceneFormatError(f"materials must be an object, got {type(named).__name__}")
    materials = {}
    for name, spec in named.items():
        materials[name] = material_from_dict(spec, f"materials.{name}")

    scene = Scene(background=background)
    for i, spec in enumerate(_sequence(_require(data, "objects", "scene"), "objects")):
        for obj in objects_from_dict(spec, materials, base_dir, f"objects[{i}]"):
            scene.add(obj)

    lights = [light_from_dict(spec, f"lights[{i}]")
              for i, spec in enumerate(_sequence(data.get("lights", []), "lights"))]
    return SceneDescription(scene, camera, lights)

def load_scene(path: str) -> SceneDescription:
    """
    Load a scene file.

    Raises:
        SceneFormatError: If the file is not valid JSON or not a valid scene
        DegenerateGeometryError: If it describes unrenderable geometry
    """
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneFormatError(f"{path} is not valid JSON: {e}") from e

    description = scene_from_dict(data, os.path.dirname(os.path.abspath(path)))
    logger.info("Loaded %s: %d objects, %d lights", path,
                len(description.scene.objects), len(description.lights))
    return description

def default_output_path(scene_path: str) -> str:
    """The scene file name with a .ppm extension."""
    return os.path.splitext(scene_path)[0] + ".ppm"
