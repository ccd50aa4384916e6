"""
whitted: an offline Whitted-style ray tracer.

Build a World of shapes and lights, point a Camera at it and hand both to
a Renderer; the result is a Canvas of unclamped float RGB pixels.
"""
import logging

from whitted.core import (
    AABB,
    InvalidGeometry,
    InvalidViewConfiguration,
    Ray,
    SceneError,
    SingularTransform,
    Transform,
    Vector3,
)
from whitted.geometry import (
    Cube,
    Cylinder,
    Group,
    Intersection,
    Plane,
    SmoothTriangle,
    Sphere,
    Triangle,
    World,
    hit,
)
from whitted.lighting import AreaLight, PointLight
from whitted.materials import (
    CheckerTexture,
    GradientTexture,
    Material,
    RingTexture,
    SolidTexture,
    StripeTexture,
)
from whitted.camera import Camera
from whitted.renderer import Canvas, Renderer, RenderSettings, render

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
