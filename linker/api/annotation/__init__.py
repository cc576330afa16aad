"""Inline comment annotations."""

from .AnnotationPairer import AnnotationPairer, compile_tag_pattern
from .DEFAULT_TAG_PATTERN import DEFAULT_TAG_PATTERN
from .InlineAnnotation import InlineAnnotation

__all__ = ["DEFAULT_TAG_PATTERN", "AnnotationPairer", "InlineAnnotation", "compile_tag_pattern"]
