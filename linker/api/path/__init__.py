"""Path prefix resolution."""

from .PathBase import PathBase
from .PathResolver import PathResolver

__all__ = ["PathBase", "PathResolver"]
