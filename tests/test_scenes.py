"""Tests for JSON scene files and the interactive scene builder."""

import copy
import json

import pytest

from core.errors import DegenerateGeometryError, SceneFormatError
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from lights.light import AmbientLight, PointLight
from scenes.interactive import (build_scene_interactively, parse_float, parse_int,
                                parse_vector)
from scenes.json_loader import default_output_path, load_scene, scene_from_dict


class TestSceneFromDict:

    def test_builds_everything(self, scene_document):
        description = scene_from_dict(scene_document)
        scene = description.scene
        assert scene.background == Vector3(0.1, 0.1, 0.2)
        assert [type(o) for o in scene.objects] == [Sphere, Sphere, Triangle]
        assert description.camera.aspect_ratio == 2.0
        assert description.camera.origin == Vector3(0, 0, 5)

    def test_named_materials_are_shared(self, scene_document):
        objects = scene_from_dict(scene_document).scene.objects
        assert objects[0].material is objects[1].material
        assert objects[0].material.specular_exponent == 32.0
        assert objects[2].material.mirror == Vector3(0, 0, 0)

    def test_light_types(self, scene_document):
        lights = scene_from_dict(scene_document).lights
        assert isinstance(lights[0], AmbientLight)
        assert isinstance(lights[1], PointLight)
        assert lights[1].position == Vector3(5, 5, 5)

    def test_light_without_position_is_ambient(self, scene_document):
        scene_document["lights"] = [{"intensity": [1, 1, 1]}]
        assert isinstance(scene_from_dict(scene_document).lights[0], AmbientLight)

    def test_defaults(self, scene_document):
        del scene_document["background"]
        del scene_document["lights"]
        description = scene_from_dict(scene_document)
        assert description.scene.background == Vector3(0, 0, 0)
        assert description.lights == []

    @pytest.mark.parametrize("mutate, message", [
        (lambda d: d.pop("camera"), "missing 'camera'"),
        (lambda d: d.pop("objects"), "missing 'objects'"),
        (lambda d: d["objects"][0].update(material="blue"), "unknown material 'blue'"),
        (lambda d: d["objects"][0].update(center=[0, 0]), "three numbers"),
        (lambda d: d["objects"][0].update(radius="big"), "must be a number"),
        (lambda d: d["objects"][0].update(type="cube"), "unknown type 'cube'"),
        (lambda d: d["lights"].append({"type": "spot", "intensity": [1, 1, 1]}),
         "unknown type 'spot'"),
        (lambda d: d["objects"][2].update(vertices=[[0, 0, 0], [1, 0, 0]]), "three points"),
        (lambda d: d["materials"]["red"].pop("diffuse"), "missing 'diffuse'"),
        (lambda d: d["camera"].update(vfov=True), "must be a number"),
        (lambda d: d.update(materials=[]), "materials must be an object"),
        (lambda d: d.update(objects=5), "objects must be a list"),
        (lambda d: d.update(lights=7), "lights must be a list"),
        (lambda d: d["objects"].append({"type": "mesh", "path": 3, "material": "red"}),
         r"objects\[3\].path must be a string"),
        (lambda d: d["objects"].append(["sphere"]), "must be an object"),
    ])
    def test_format_errors(self, scene_document, mutate, message):
        doc = copy.deepcopy(scene_document)
        mutate(doc)
        with pytest.raises(SceneFormatError, match=message):
            scene_from_dict(doc)

    def test_degenerate_geometry(self, scene_document):
        scene_document["objects"][0]["radius"] = 0
        with pytest.raises(DegenerateGeometryError):
            scene_from_dict(scene_document)


class TestLoadScene:

    def test_load_file_with_mesh(self, tmp_path, scene_document):
        (tmp_path / "models").mkdir()
        (tmp_path / "models" / "tri.obj").write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
        scene_document["objects"].append(
            {"type": "mesh", "path": "models/tri.obj", "material": "red",
             "scale": 2, "offset": [0, 0, -1]})
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(scene_document))

        description = load_scene(str(path))
        mesh_triangle = description.scene.objects[-1]
        assert len(description.scene.objects) == 4
        assert mesh_triangle.v1 == Vector3(2, 0, -1)
        assert mesh_triangle.material is description.scene.objects[0].material

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SceneFormatError, match="not valid JSON"):
            load_scene(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_scene(str(tmp_path / "nope.json"))

    def test_default_output_path(self):
        assert default_output_path("scenes/room.json") == "scenes/room.ppm"


class TestParsers:

    def test_parse_vector(self):
        assert parse_vector("(0.0,1.0,2.5)") == Vector3(0, 1, 2.5)
        assert parse_vector(" (1, -2, 3) ") == Vector3(1, -2, 3)

    @pytest.mark.parametrize("text", ["0,0,0", "(0,0)", "(a,b,c)", "(1,2,3,4)", ""])
    def test_parse_vector_errors(self, text):
        with pytest.raises(SceneFormatError):
            parse_vector(text)

    def test_parse_numbers(self):
        assert parse_float("1") == 1.0
        assert parse_int("320") == 320
        with pytest.raises(SceneFormatError):
            parse_float("one")
        with pytest.raises(SceneFormatError):
            parse_int("1.5")


MATERIAL = ["(0.5,0.5,0.5)", "(0.3,0.3,0.3)", "10", "(0,0,0)", "(0.1,0.1,0.1)"]
CAMERA = ["(0,0,5)", "(0,0,0)", "1.5", "(0,1,0)", "0.8"]


def scripted(answers):
    it = iter(answers)
    prompts = []
    return (lambda: next(it)), prompts.append, prompts


class TestInteractiveBuilder:

    def test_full_session(self):
        answers = (
            ["", "Cube", "Sphere", "1.0", "(0,0,0)"] + MATERIAL
            + ["Triangle", "(0,0,0)", "(1,0,0)", "(0,1,0)"] + MATERIAL
            + ["quit"] + CAMERA
            + ["(0.2,0.2,0.2)", "None", "", "(1,1,1)", "(5,5,5)", "quit"]
            + ["(0,0,0.1)", "picture", "40", "30"]
        )
        read, write, prompts = scripted(answers)
        result = build_scene_interactively(read, write)

        objects = result.description.scene.objects
        assert [type(o) for o in objects] == [Sphere, Triangle]
        assert objects[0].radius == 1.0
        assert objects[0].material.specular_exponent == 10.0
        lights = result.description.lights
        assert isinstance(lights[0], AmbientLight)
        assert isinstance(lights[1], PointLight)
        assert result.description.scene.background == Vector3(0, 0, 0.1)
        assert result.description.camera.aspect_ratio == 1.5
        assert result.output_path == "picture.ppm"
        assert (result.width, result.height) == (40, 30)
        assert prompts

    def test_bad_vector_aborts(self):
        read, write, _ = scripted(["Sphere", "1.0", "0,0,0"])
        with pytest.raises(SceneFormatError):
            build_scene_interactively(read, write)

    def test_degenerate_sphere_aborts(self):
        read, write, _ = scripted(["Sphere", "0", "(0,0,0)"] + MATERIAL)
        with pytest.raises(DegenerateGeometryError):
            build_scene_interactively(read, write)
