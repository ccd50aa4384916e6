# renderer/settings.py
from typing import Optional

from whitted.geometry.world import RECURSION_DEPTH

# Named render configurations.
QUALITY_LEVELS = {
    "draft": {"max_depth": 1, "subdivide_threshold": None},
    "balanced": {"max_depth": RECURSION_DEPTH, "subdivide_threshold": 8},
    "high_quality": {"max_depth": 8, "subdivide_threshold": 4},
}


class RenderSettings:
    """
    Plain values that control a render pass.

    max_depth: how many reflection/refraction bounces a primary ray may spawn.
    subdivide_threshold: when set, groups are subdivided once before the
        render starts so no group keeps more than this many children.
    workers: number of processes rendering rows; 1 renders in-process.
    progress: show a progress bar while rendering.
    """
    def __init__(self, max_depth: int = RECURSION_DEPTH,
                 subdivide_threshold: Optional[int] = None,
                 workers: int = 1,
                 progress: bool = False):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if subdivide_threshold is not None and subdivide_threshold < 1:
            raise ValueError(f"subdivide_threshold must be >= 1, got {subdivide_threshold}")
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.max_depth = max_depth
        self.subdivide_threshold = subdivide_threshold
        self.workers = workers
        self.progress = progress

    @classmethod
    def preset(cls, quality: str, **overrides) -> "RenderSettings":
        try:
            values = dict(QUALITY_LEVELS[quality])
        except KeyError:
            raise ValueError(
                f"unknown quality {quality!r}, expected one of {sorted(QUALITY_LEVELS)}") from None
        values.update(overrides)
        return cls(**values)

    def __repr__(self) -> str:
        return (f"RenderSettings(max_depth={self.max_depth}, "
                f"subdivide_threshold={self.subdivide_threshold}, "
                f"workers={self.workers}, progress={self.progress})")
