"""Link domain: target resolution and scan commands."""

from .LinkScanner import LinkScanner
from .ResolvedTarget import ResolvedTarget
from .resolve_annotation_target import resolve_annotation_target
from .resolve_target import resolve_target
from .scan_document import scan_document

__all__ = ["LinkScanner", "ResolvedTarget", "resolve_annotation_target", "resolve_target", "scan_document"]
