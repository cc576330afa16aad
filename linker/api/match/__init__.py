"""Rule-based pattern matching."""

from .get_file_extension import get_file_extension
from .Match import Match
from .PatternMatcher import PatternMatcher

__all__ = ["Match", "PatternMatcher", "get_file_extension"]
