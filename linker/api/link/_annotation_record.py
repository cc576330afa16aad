from typing import Any

from ..annotation.InlineAnnotation import InlineAnnotation
from .resolve_annotation_target import resolve_annotation_target


def _annotation_record(annotation: InlineAnnotation, workspace_root: str | None) -> dict[str, Any]:
    """Serializable view of an annotation with its resolved target or the resolution error."""
    record = annotation.to_dict()
    try:
        resolved = resolve_annotation_target(annotation, workspace_root)
    except ValueError as e:
        record["target"] = None
        record["error"] = str(e)
        return record

    record["target"] = resolved.to_dict()
    record["error"] = f"File not found: {resolved.target}" if resolved.exists is False else None
    return record
