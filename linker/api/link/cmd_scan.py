"""Link scan API command.

CLI: linker link scan <path> [--workspace DIR]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..StageResult import StageResult
from ._read_document import _read_document
from .LinkScanner import LinkScanner
from .scan_document import scan_document


def cmd_scan(path: str, workspace: str | None = None) -> StageResult:
    """Find all rule matches and inline annotations in a document.

    Args:
        path: Document to scan.
        workspace: Workspace root (defaults to the current directory).
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        workspace_root = str(Path(workspace or Path.cwd()).expanduser().absolute())
        output: dict[str, Any] = {
            "path": path,
            "workspace": workspace_root,
            "matches": [],
            "annotations": [],
            "errors": [],
            "warnings": [],
        }

        yield (0.1, "Loading configuration...")
        try:
            scanner = LinkScanner.load(workspace_root)
            document, text = _read_document(path)
        except ValueError as e:
            result_obj.fail(f"Scan failed: {e}", output, str(e))
            return

        output["path"] = str(document)
        if not scanner.config.enabled:
            output["warnings"].append("Linker is disabled in configuration")

        yield (0.5, f"Matching {len(scanner.matcher.rules)} rules and inline annotations...")
        output.update(scan_document(scanner, str(document), text))

        yield (1.0, "Complete")
        summary = f"Found {len(output['matches'])} matches and {len(output['annotations'])} annotations"
        result_obj.succeed(summary, output)

    return StageResult(
        announce=f"Scanning {path} for links...",
        progress_callback=do_work,
    )
