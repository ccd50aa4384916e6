# core/errors.py


class SceneError(ValueError):
    """Base class for problems found while building a scene."""


class InvalidGeometry(SceneError):
    """A shape or light cannot be built from the given parameters."""


class SingularTransform(SceneError):
    """A transform matrix has no inverse."""


class InvalidViewConfiguration(SceneError):
    """A camera or view transform cannot produce a usable view."""
