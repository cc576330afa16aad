"""Config init API command.

CLI: linker config init [--workspace DIR]
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..rules.DEFAULT_RULES import DEFAULT_RULES
from ..StageResult import StageResult
from .LinkerConfig import LinkerConfig


def cmd_init(workspace: str | None = None) -> StageResult:
    """Create a rule file with example rules; an existing file is left alone."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        workspace_root = Path(workspace or Path.cwd()).expanduser().absolute()
        output: dict[str, Any] = {"rules_path": None, "created": False, "errors": []}

        yield (0.3, "Loading configuration...")
        try:
            config = LinkerConfig.load()
        except ValueError as e:
            result_obj.fail(str(e), output)
            return

        rules_path = config.rules_path(workspace_root)
        output["rules_path"] = str(rules_path)
        if rules_path.exists():
            yield (1.0, "Complete")
            result_obj.fail(f"Rule file already exists: {rules_path}", output)
            return

        yield (0.7, f"Writing {rules_path}...")
        try:
            rules_path.parent.mkdir(parents=True, exist_ok=True)
            rules_path.write_text(json.dumps(DEFAULT_RULES, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            result_obj.fail(f"Failed to write rule file: {e}", output)
            return

        yield (1.0, "Complete")
        output["created"] = True
        result_obj.succeed(f"Created default rule file {rules_path}", output)

    return StageResult(
        announce="Creating default link rules...",
        progress_callback=do_work,
    )
