"""Link at-position API command.

CLI: linker link at <path> <line> <column>
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..StageResult import StageResult
from ._annotation_record import _annotation_record
from ._match_record import _match_record
from ._read_document import _read_document
from .LinkScanner import LinkScanner
from .offset_at import offset_at


def cmd_at(path: str, line: int, column: int, workspace: str | None = None) -> StageResult:
    """Show the link at a 1-based line and column.

    Rule matches take precedence over inline annotations. When several rule
    matches overlap the position all of them are listed, first one first.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        workspace_root = str(Path(workspace or Path.cwd()).expanduser().absolute())
        output: dict[str, Any] = {
            "path": path,
            "line": line,
            "column": column,
            "offset": None,
            "matches": [],
            "annotation": None,
            "errors": [],
        }

        yield (0.2, "Loading configuration...")
        try:
            scanner = LinkScanner.load(workspace_root)
            document, text = _read_document(path)
        except ValueError as e:
            result_obj.fail(f"Lookup failed: {e}", output, str(e))
            return

        offset = offset_at(text, line, column)
        output["path"] = str(document)
        output["offset"] = offset

        yield (0.5, f"Looking for links at offset {offset}...")
        context = scanner.context_for(str(document), line_number=line)
        hits = scanner.matches_at_offset(text, str(document), offset)
        output["matches"] = [_match_record(scanner, m, context) for m in hits]

        if not hits:
            annotation = scanner.annotation_at_offset(text, str(document), offset)
            if annotation is not None:
                output["annotation"] = _annotation_record(annotation, workspace_root)

        yield (1.0, "Complete")
        if output["matches"]:
            result_obj.succeed(f"Found {len(output['matches'])} links at {line}:{column}", output)
        elif output["annotation"]:
            result_obj.succeed(f"Found inline link at {line}:{column}", output)
        else:
            result_obj.fail("No link found at current position", output)

    return StageResult(
        announce=f"Looking up link at {path}:{line}:{column}...",
        progress_callback=do_work,
    )
