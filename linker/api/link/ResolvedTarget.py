"""Final destination of an activated link."""

import os
from dataclasses import dataclass
from typing import Any

from ..rules.LinkKind import LinkKind


@dataclass(frozen=True)
class ResolvedTarget:
    kind: LinkKind
    target: str
    line_number: int | None = None  # 1-based
    is_text_file: bool = True

    @property
    def preview(self) -> str:
        label = "URL" if self.kind == LinkKind.URL else "File"
        return f"{label}: {self.target}"

    @property
    def exists(self) -> bool | None:
        """Whether a file target is present on disk; None for URLs."""
        if self.kind == LinkKind.URL:
            return None
        return os.path.exists(self.target)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "target": self.target,
            "line_number": self.line_number,
            "is_text_file": self.is_text_file,
            "exists": self.exists,
        }
