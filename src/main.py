# main.py
import argparse
import logging
import math
import sys
from config import RENDER_SETTINGS
from camera.camera import Camera
from core.errors import RaytracerError
from core.vector import Vector3
from geometry.scene import Scene
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from lights.light import AmbientLight, PointLight
from materials.presets import ColorPresets, MaterialPresets
from renderer.image_io import save_image
from renderer.raytracer import Renderer, image_height
from renderer.tone_mapping import CHANNEL_POLICIES, to_rgb8
from renderer import preview
from scenes.interactive import build_scene_interactively
from scenes.json_loader import SceneDescription, default_output_path, load_scene

def create_world(aspect_ratio: float = 16 / 9) -> SceneDescription:
    """A small built-in scene: three spheres over a slightly reflective floor."""
    floor = MaterialPresets.plastic(ColorPresets.GRAY, shininess=8.0)
    scene = Scene(background=Vector3(0.05, 0.05, 0.1))

    # Floor made of two triangles
    a, b = Vector3(-6, -1, -8), Vector3(6, -1, -8)
    c, d = Vector3(6, -1, 4), Vector3(-6, -1, 4)
    scene.add(Triangle(a, d, c, floor))
    scene.add(Triangle(a, c, b, floor))

    scene.add(Sphere(Vector3(-2.2, 0, -3), 1.0, MaterialPresets.gold()))
    scene.add(Sphere(Vector3(0, 0, -4), 1.0, MaterialPresets.mirror()))
    scene.add(Sphere(Vector3(2.2, 0, -3), 1.0, MaterialPresets.plastic(ColorPresets.RED)))

    camera = Camera(
        Vector3(0, 1.5, 4),
        Vector3(0, 0, -3),
        aspect_ratio,
        Vector3(0, 1, 0),
        math.radians(50),
    )
    lights = [
        AmbientLight(Vector3(0.3, 0.3, 0.3)),
        PointLight(Vector3(0.7, 0.7, 0.7), Vector3(-4, 6, 2)),
        PointLight(Vector3(0.3, 0.3, 0.4), Vector3(5, 3, 0)),
    ]
    return SceneDescription(scene, camera, lights)

def render_to_file(description: SceneDescription, width: int, height: int, output: str,
                   max_depth: int, workers: int, channel_policy: str):
    renderer = Renderer(width, height, max_depth=max_depth, workers=workers)
    frame = renderer.render(description.camera, description.scene, description.lights)
    pixels = to_rgb8(frame, channel_policy)
    save_image(output, pixels)
    return pixels

def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="raytracer",
        description="Render a scene of spheres and triangles to an image. "
                    "Without a scene file the scene is built from prompts.")
    p.add_argument('scene', nargs='?', help="JSON scene description")
    p.add_argument('width', nargs='?', type=int,
                   help="image width in pixels; height follows the camera aspect ratio")
    p.add_argument('--width', dest='width_option', type=int,
                   help="image width, usable without a scene file (e.g. with --demo)")
    p.add_argument('-o', '--output', help="output image (.ppm, or any format Pillow writes)")
    p.add_argument('--max-depth', type=int, default=RENDER_SETTINGS['max_depth'])
    p.add_argument('--workers', type=int, default=RENDER_SETTINGS['workers'])
    p.add_argument('--channel-policy', choices=CHANNEL_POLICIES,
                   default=RENDER_SETTINGS['channel_policy'])
    p.add_argument('--interactive', action='store_true', help="build the scene from prompts")
    p.add_argument('--demo', action='store_true', help="render the built-in demo scene")
    p.add_argument('--preview', action='store_true', help="show the result in a window")
    p.add_argument('-v', '--verbose', action='store_true')
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    requested_width = args.width_option or args.width or RENDER_SETTINGS['width']

    try:
        if args.demo:
            description = create_world()
            width = requested_width
            height = image_height(width, description.camera.aspect_ratio)
            output = args.output or "demo.ppm"
        elif args.scene and not args.interactive:
            description = load_scene(args.scene)
            width = requested_width
            height = image_height(width, description.camera.aspect_ratio)
            output = args.output or default_output_path(args.scene)
        else:
            print("Welcome to the ray tracer. Let's build a scene.")
            result = build_scene_interactively()
            description = result.description
            width, height = result.width, result.height
            output = args.output or result.output_path

        pixels = render_to_file(description, width, height, output,
                                args.max_depth, args.workers, args.channel_policy)
    except (RaytracerError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        return 1

    print(f"Your rendered scene ({width}x{height}) is in {output}")
    if args.preview:
        preview.show(pixels, output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
