"""Context used for ${...} substitution in target templates."""

import os
from collections.abc import Callable
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class VariableContext:
    """Everything a template may refer to.

    Fields left as None make their tokens stay verbatim, except the
    host-environment ones (cwd, user_home, exec_path) which fall back to the
    running process.
    """

    workspace_folder: str | None = None
    workspace_name: str | None = None
    file: str | None = None
    line_number: int | None = None  # 1-based
    selected_text: str = ""
    env: Callable[[str], str | None] = field(default=os.environ.get, repr=False)
    cwd: str | None = None
    user_home: str | None = None
    app_name: str = "linker"
    app_root: str | None = None
    exec_path: str | None = None
    full_match: str | None = None
    capture_groups: tuple[str | None, ...] | None = None

    def with_match(self, full_match: str | None, capture_groups: tuple[str | None, ...] | None) -> "VariableContext":
        """Return a copy carrying the capture groups of a regex match."""
        return replace(self, full_match=full_match, capture_groups=capture_groups)
