"""Exception hierarchy.

Configuration errors abort the frame being built. Resource errors abort the run.
"""

from __future__ import annotations


class SandSplineError(Exception):
    """Base class for every error raised by sandspline."""


class ConfigurationError(SandSplineError):
    """Impossible geometry or parameters, detected before anything is drawn."""


class InvalidShapeError(ConfigurationError):
    """Point count / degree / knot combination that cannot form a spline."""


class ResourceError(SandSplineError):
    """Drawing surface or output file could not be acquired or written."""
