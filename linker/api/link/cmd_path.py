"""Path prefix resolve API command.

CLI: linker link path <path> [--file F]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.LinkerConfig import LinkerConfig
from ..path.PathResolver import PathResolver
from ..StageResult import StageResult


def cmd_path(path: str, file: str | None = None, workspace: str | None = None) -> StageResult:
    """Resolve a possibly prefixed path (``#:``, ``~:``, ``<:``, ``>:``)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        workspace_root = str(Path(workspace or Path.cwd()).expanduser().absolute())
        document = str(Path(file).expanduser().absolute()) if file else None
        output: dict[str, Any] = {
            "input": path,
            "resolved": None,
            "prefix": None,
            "description": None,
            "errors": [],
        }

        yield (0.2, "Loading configuration...")
        try:
            config = LinkerConfig.load()
        except ValueError as e:
            result_obj.fail(f"Path resolution failed: {e}", output, str(e))
            return

        resolver = PathResolver(config.path_prefixes)
        prefix = next((p for p in resolver.prefixes if path.startswith(p)), None)

        yield (0.6, "Resolving path...")
        output["resolved"] = resolver.resolve(path, document, workspace_root)
        output["prefix"] = prefix
        output["description"] = resolver.prefix_description(prefix) if prefix else None

        yield (1.0, "Complete")
        result_obj.succeed(f"Resolved to {output['resolved']}", output)

    return StageResult(
        announce=f"Resolving path {path}...",
        progress_callback=do_work,
    )
