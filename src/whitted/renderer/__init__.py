from whitted.renderer.canvas import Canvas
from whitted.renderer.settings import RenderSettings, QUALITY_LEVELS
from whitted.renderer.raytracer import Renderer, render

__all__ = ["Canvas", "RenderSettings", "QUALITY_LEVELS", "Renderer", "render"]
