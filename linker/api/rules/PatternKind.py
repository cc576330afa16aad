"""Matching strategy of a pattern."""

from enum import Enum


class PatternKind(str, Enum):
    TEXT = "text"
    REGEX = "regex"
    LINE = "line"
