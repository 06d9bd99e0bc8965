# core/errors.py

class RaytracerError(Exception):
    """Base class for every error raised by the ray tracer."""


class DegenerateGeometryError(RaytracerError, ValueError):
    """
    Raised when a caller constructs geometry that cannot be rendered, e.g. a
    zero-radius sphere, a collinear triangle or a camera looking at itself.
    """


class SceneFormatError(RaytracerError, ValueError):
    """Raised when a scene description (file or typed input) is malformed."""
