"""Config show API command.

CLI: linker config show [--workspace DIR]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..rules.load_rules import load_rules
from ..StageResult import StageResult
from .LinkerConfig import LinkerConfig


def cmd_show(workspace: str | None = None) -> StageResult:
    """Show settings, the rule file location and the loaded rules."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        workspace_root = Path(workspace or Path.cwd()).expanduser().absolute()
        output: dict[str, Any] = {
            "config_path": str(LinkerConfig.get_config_path()),
            "content": {},
            "rules_path": None,
            "rules": [],
            "errors": [],
        }

        yield (0.3, "Loading configuration...")
        try:
            config = LinkerConfig.load()
        except ValueError as e:
            result_obj.fail(str(e), output)
            return
        output["content"] = config.to_dict()

        yield (0.6, "Loading link rules...")
        rules_path = config.rules_path(workspace_root)
        output["rules_path"] = str(rules_path)
        try:
            rules = load_rules(rules_path)
        except ValueError as e:
            result_obj.fail(str(e), output)
            return
        output["rules"] = [rule.model_dump(mode="json", by_alias=True, exclude_none=True) for rule in rules]

        yield (1.0, "Complete")
        result_obj.succeed(f"Loaded {len(rules)} link rules", output)

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
