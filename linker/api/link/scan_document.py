"""Scan one document with a prepared scanner."""

from typing import Any

from ._annotation_record import _annotation_record
from ._match_record import _match_record
from .LinkScanner import LinkScanner


def scan_document(scanner: LinkScanner, document_path: str, text: str) -> dict[str, list[dict[str, Any]]]:
    """Rule matches and inline annotations of text, with resolved targets."""
    context = scanner.context_for(document_path)
    return {
        "matches": [_match_record(scanner, m, context) for m in scanner.find_matches(text, document_path)],
        "annotations": [
            _annotation_record(a, scanner.workspace_root) for a in scanner.find_annotations(text, document_path)
        ],
    }
