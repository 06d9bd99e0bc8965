# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional, Sequence
import numpy as np
from config import RENDER_SETTINGS
from camera.camera import Camera
from core.errors import DegenerateGeometryError
from core.ray import Ray
from core.utils import reflect
from core.vector import Vector3
from geometry.hittable import Hit
from geometry.scene import Scene
from lights.light import Light

logger = logging.getLogger(__name__)

def image_height(width: int, aspect_ratio: float) -> int:
    """Height matching a camera's aspect ratio: floor(width / aspect)."""
    return int(math.floor(width / aspect_ratio))

def direct_light(hit: Hit, lights: Sequence[Light], scene: Scene, epsilon: float) -> Vector3:
    color = Vector3.zero()
    for light in lights:
        color = color + light.illuminate(hit, scene, epsilon)
    return color

def shade(ray: Ray, hit: Hit, lights: Sequence[Light], depth: int, scene: Scene,
          background: Vector3, epsilon: float = RENDER_SETTINGS['epsilon']) -> Vector3:
    """
    Color seen along `ray`, which struck `hit`: direct light from every light
    plus up to `depth` mirror bounces.

    Each bounce adds the next surface's direct light weighted by the product
    of the mirror colors met so far; a bounce that escapes the scene adds the
    background instead. Runs as a loop so deep bounce limits cannot exhaust
    the stack.
    """
    color = Vector3.zero()
    weight = Vector3(1.0, 1.0, 1.0)
    while True:
        color = color + weight * direct_light(hit, lights, scene, epsilon)
        if depth <= 0:
            return color

        weight = weight * hit.material.mirror
        if weight.is_zero():
            # Nothing further can contribute.
            return color

        bounce = reflect(-ray.direction, hit.normal).normalize()
        ray = Ray(hit.point, bounce).offset(epsilon)
        next_hit = scene.intersect(ray, epsilon)
        if next_hit is None:
            return color + weight * background
        hit = next_hit
        depth -= 1

def trace(ray: Ray, scene: Scene, lights: Sequence[Light], max_depth: int,
          epsilon: float = RENDER_SETTINGS['epsilon']) -> Vector3:
    hit = scene.intersect(ray, epsilon)
    if hit is None:
        return scene.background
    return shade(ray, hit, lights, max_depth, scene, scene.background, epsilon)

def render_rows(camera: Camera, scene: Scene, lights: Sequence[Light],
                width: int, height: int, y0: int, y1: int,
                max_depth: int, epsilon: float) -> np.ndarray:
    """
    Renders rows [y0, y1) of a width x height image, sampling pixel centers.
    Row 0 is the top of the image.
    """
    block = np.zeros((y1 - y0, width, 3), dtype=np.float64)
    for i in range(y0, y1):
        v = (i + 0.5) / height
        for j in range(width):
            u = (j + 0.5) / width
            color = trace(camera.generate_ray(u, v), scene, lights, max_depth, epsilon)
            block[i - y0, j] = (color.x, color.y, color.z)
    return block

def _render_chunk(args):
    # Runs in a worker process.
    y0, y1 = args[5], args[6]
    return y0, y1, render_rows(*args)

class Renderer:
    """
    Casts one ray per pixel and returns the colors as a (height, width, 3)
    float array, row-major with the top-left pixel first.

    With more than one worker, row chunks are rendered by a process pool and
    copied into the frame as they complete. Pixels do not depend on each
    other, so the result does not depend on the worker count.
    """
    def __init__(self, width: int, height: int, max_depth: Optional[int] = None,
                 epsilon: Optional[float] = None, workers: Optional[int] = None,
                 chunk_rows: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise DegenerateGeometryError(
                f"Image dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.max_depth = RENDER_SETTINGS['max_depth'] if max_depth is None else max_depth
        self.epsilon = RENDER_SETTINGS['epsilon'] if epsilon is None else epsilon
        self.workers = RENDER_SETTINGS['workers'] if workers is None else workers
        self.chunk_rows = RENDER_SETTINGS['chunk_rows'] if chunk_rows is None else chunk_rows
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.workers < 1 or self.chunk_rows < 1:
            raise ValueError("workers and chunk_rows must be at least 1")

    def chunks(self):
        return [(y0, min(y0 + self.chunk_rows, self.height))
                for y0 in range(0, self.height, self.chunk_rows)]

    def render(self, camera: Camera, scene: Scene, lights: Sequence[Light]) -> np.ndarray:
        lights = list(lights)
        logger.info("Rendering %dx%d: %d objects, %d lights, max depth %d, %d worker(s)",
                    self.width, self.height, len(scene.objects), len(lights),
                    self.max_depth, self.workers)
        start_time = time.perf_counter()

        frame = np.zeros((self.height, self.width, 3), dtype=np.float64)
        jobs = [(camera, scene, lights, self.width, self.height, y0, y1,
                 self.max_depth, self.epsilon) for y0, y1 in self.chunks()]

        if self.workers == 1 or len(jobs) == 1:
            for job in jobs:
                y0, y1, block = _render_chunk(job)
                frame[y0:y1] = block
        else:
            with ProcessPoolExecutor(max_workers=self.workers) as exe:
                futures = [exe.submit(_render_chunk, job) for job in jobs]
                for f in as_completed(futures):
                    y0, y1, block = f.result()
                    frame[y0:y1] = block
                    logger.debug("Rows %d-%d done", y0, y1 - 1)

        logger.info("Rendered in %.2fs", time.perf_counter() - start_time)
        return frame
