# scenes/interactive.py
"""
Build a scene by answering prompts on the terminal.

`read` and `write` default to input() and print() and can be replaced, which
is how the prompts are driven in tests.
"""
from dataclasses import dataclass
from typing import Callable, List
from camera.camera import Camera
from core.errors import SceneFormatError
from core.vector import Vector3
from geometry.hittable import Hittable
from geometry.scene import Scene
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from lights.light import AmbientLight, Light, PointLight
from materials.material import Material
from scenes.json_loader import SceneDescription

QUIT = "quit"

@dataclass
class InteractiveResult:
    description: SceneDescription
    output_path: str
    width: int
    height: int

def parse_vector(text: str) -> Vector3:
    """Parse "(x,y,z)" into a Vector3."""
    text = text.strip()
    parts = text[1:-1].split(',') if text.startswith('(') and text.endswith(')') else []
    if len(parts) != 3:
        raise SceneFormatError(
            f"{text!r} is not a valid vector. Type three numbers separated by "
            "commas inside parentheses, for example (0.0,1.0,2.0)")
    return Vector3(*(parse_float(p) for p in parts))

def parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise SceneFormatError(f"{text.strip()!r} is not a number, for example 1 or 1.0") from None

def parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise SceneFormatError(
            f"{text.strip()!r} is not an integer, type a whole number such as 320") from None

class _Prompter:
    def __init__(self, read: Callable[[], str], write: Callable[[str], None]):
        self.read = read
        self.write = write

    def ask(self, question: str) -> str:
        self.write(question)
        return self.read()

    def ask_word(self, question: str) -> str:
        """First word of the answer; blank answers are asked again."""
        while True:
            words = self.ask(question).split()
            if words:
                return words[0]

    def vector(self, question: str) -> Vector3:
        return parse_vector(self.ask(question))

    def number(self, question: str) -> float:
        return parse_float(self.ask(question))

    def integer(self, question: str) -> int:
        return parse_int(self.ask(question))

def _material(p: _Prompter) -> Material:
    diffuse = p.vector("Diffuse color as (r,g,b), each between 0 and 0.9:")
    specular = p.vector("Specular highlight color as (r,g,b):")
    exponent = p.number("Specular exponent (larger is shinier, e.g. 1.0 to 100.0):")
    mirror = p.vector("Mirror reflectance as (r,g,b):")
    ambient = p.vector("Ambient color as (r,g,b):")
    return Material(diffuse, specular, exponent, mirror, ambient)

def _sphere(p: _Prompter) -> Sphere:
    radius = p.number("Sphere radius:")
    center = p.vector("Sphere center as (x,y,z):")
    return Sphere(center, radius, _material(p))

def _triangle(p: _Prompter) -> Triangle:
    vertices = [p.vector(f"Triangle vertex {i} as (x,y,z):") for i in (1, 2, 3)]
    return Triangle(*vertices, _material(p))

def _objects(p: _Prompter) -> List[Hittable]:
    builders = {"Sphere": _sphere, "Triangle": _triangle}
    objects = []
    while True:
        kind = p.ask_word(f"Object type to add (Sphere or Triangle), or '{QUIT}' when done:")
        if kind == QUIT:
            return objects
        if kind in builders:
            objects.append(builders[kind](p))

def _camera(p: _Prompter) -> Camera:
    origin = p.vector("Camera origin as (x,y,z):")
    target = p.vector("Point the camera looks at as (x,y,z):")
    aspect = p.number("Aspect ratio (width / height):")
    up = p.vector("Camera up direction as (x,y,z):")
    vfov = p.number("Vertical field of view in radians:")
    return Camera(origin, target, aspect, up, vfov)

def _lights(p: _Prompter) -> List[Light]:
    lights = []
    while True:
        answer = p.ask(f"Light intensity as (r,g,b), or '{QUIT}' when done:")
        words = answer.split()
        if not words:
            continue
        if words[0] == QUIT:
            return lights
        intensity = parse_vector(answer)
        position = p.ask("Light position as (x,y,z), or 'None' for ambient light:")
        if position.strip() == "None":
            lights.append(AmbientLight(intensity))
        else:
            lights.append(PointLight(intensity, parse_vector(position)))

def build_scene_interactively(read: Callable[[], str] = input,
                              write: Callable[[str], None] = print) -> InteractiveResult:
    """
    Prompt for objects, camera, lights, background, output file and image size.

    Raises:
        SceneFormatError: If an answer cannot be parsed
        DegenerateGeometryError: If the answers describe unrenderable geometry
    """
    p = _Prompter(read, write)
    objects = _objects(p)
    camera = _camera(p)
    lights = _lights(p)
    background = p.vector("Background color as (r,g,b), each between 0 and 1:")
    output_path = p.ask("Name of the output image (.ppm is added):").strip() + ".ppm"
    width = p.integer("Image width in pixels:")
    height = p.integer("Image height in pixels:")

    description = SceneDescription(Scene(objects, background), camera, lights)
    return InteractiveResult(description, output_path, width, height)
