"""Reference point a path prefix resolves against."""

from enum import Enum


class PathBase(str, Enum):
    WORKSPACE = "workspace"
    CURRENT = "current"
    PARENT = "parent"
    CHILD = "child"
