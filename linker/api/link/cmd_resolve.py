"""Template resolve API command.

CLI: linker link resolve <template> [--file F] [--line N]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from ..variables.VariableContext import VariableContext
from ..variables.VariableResolver import VariableResolver


def cmd_resolve(
    template: str,
    file: str | None = None,
    line: int | None = None,
    selected_text: str = "",
    workspace: str | None = None,
) -> StageResult:
    """Substitute ${...} variables in a target template."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        workspace_root = str(Path(workspace or Path.cwd()).expanduser().absolute())
        document = str(Path(file).expanduser().absolute()) if file else None

        yield (0.5, "Substituting variables...")
        context = VariableContext(
            workspace_folder=workspace_root,
            file=document,
            line_number=line,
            selected_text=selected_text,
        )
        resolved = VariableResolver().resolve(template, context)

        yield (1.0, "Complete")
        output = {"template": template, "resolved": resolved, "file": document, "errors": []}
        result_obj.succeed(f"Resolved to {resolved}", output)

    return StageResult(
        announce=f"Resolving {template}...",
        progress_callback=do_work,
    )
