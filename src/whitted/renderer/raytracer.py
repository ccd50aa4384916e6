# renderer/raytracer.py
import logging
import time
from multiprocessing import Pool
from typing import List, Optional, Tuple

from tqdm import tqdm

from whitted.camera.camera import Camera
from whitted.core.vector import Vector3
from whitted.geometry.world import World
from whitted.renderer.canvas import Canvas
from whitted.renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Scene handed to each worker process once, by the pool initializer.
_worker_scene = None


def render_row(camera: Camera, world: World, y: int, max_depth: int) -> List[Vector3]:
    return [world.color_at(camera.ray_for_pixel(x, y), max_depth)
            for x in range(camera.hsize)]


def _init_worker(camera: Camera, world: World, max_depth: int):
    global _worker_scene
    _worker_scene = (camera, world, max_depth)


def _render_row_worker(y: int) -> Tuple[int, List[Vector3]]:
    camera, world, max_depth = _worker_scene
    return y, render_row(camera, world, y, max_depth)


class Renderer:
    """
    Drives the per-pixel shading of a world through a camera.

    Rows don't depend on each other, so with more than one worker they are
    shaded in separate processes, each holding its own read-only copy of the
    scene. Only this process writes to the canvas.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()

    def render_pixel(self, camera: Camera, world: World, x: int, y: int) -> Vector3:
        return world.color_at(camera.ray_for_pixel(x, y), self.settings.max_depth)

    def render(self, camera: Camera, world: World) -> Canvas:
        settings = self.settings
        if settings.subdivide_threshold is not None:
            # Must finish before any worker starts reading the scene.
            world.divide(settings.subdivide_threshold)

        canvas = Canvas(camera.hsize, camera.vsize)
        logger.info("Rendering %dx%d image (max depth %d, %d worker%s)",
                    camera.hsize, camera.vsize, settings.max_depth,
                    settings.workers, "" if settings.workers == 1 else "s")
        start_time = time.perf_counter()

        with tqdm(total=camera.vsize, unit="row", disable=not settings.progress) as progress:
            if settings.workers == 1:
                for y in range(camera.vsize):
                    canvas.write_row(y, render_row(camera, world, y, settings.max_depth))
                    progress.update(1)
            else:
                with Pool(processes=settings.workers,
                          initializer=_init_worker,
                          initargs=(camera, world, settings.max_depth)) as pool:
                    for y, row in pool.imap_unordered(_render_row_worker, range(camera.vsize)):
                        canvas.write_row(y, row)
                        progress.update(1)

        elapsed = time.perf_counter() - start_time
        logger.info("Rendering completed in %.2f seconds", elapsed)
        return canvas


def render(camera: Camera, world: World, settings: Optional[RenderSettings] = None) -> Canvas:
    """Renders `world` as seen by `camera` with the given (or default) settings."""
    return Renderer(settings).render(camera, world)
