"""One concrete occurrence of a pattern in a document."""

from dataclasses import dataclass
from typing import Any

from ..rules.LinkRule import LinkRule
from ..rules.Pattern import Pattern
from ..TextRange import TextRange


@dataclass(frozen=True)
class Match:
    """A rule match; ``range`` covers ``highlighted_text``."""

    rule: LinkRule
    pattern: Pattern
    range: TextRange
    highlighted_text: str
    full_match: str | None = None
    capture_groups: tuple[str | None, ...] | None = None  # index 0 is the whole match

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.rule.name,
            "type": self.rule.kind.value,
            "pattern": self.pattern.kind.value,
            "range": self.range.to_dict(),
            "text": self.highlighted_text,
            "full_match": self.full_match,
            "capture_groups": list(self.capture_groups) if self.capture_groups is not None else None,
        }
