"""What a link rule points at."""

from enum import Enum


class LinkKind(str, Enum):
    URL = "url"
    FILE = "file"
