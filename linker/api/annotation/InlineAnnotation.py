"""A comment tag paired with an anchor word in the following code line."""

from dataclasses import dataclass
from typing import Any

from ..TextRange import TextRange


@dataclass(frozen=True)
class InlineAnnotation:
    anchor: str
    href: str
    comment_range: TextRange
    code_range: TextRange
    comment_text: str
    code_text: str
    line_number: int  # 1-based line of the code occurrence

    def contains(self, offset: int) -> bool:
        return self.comment_range.contains(offset) or self.code_range.contains(offset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "anchor": self.anchor,
            "href": self.href,
            "comment_range": self.comment_range.to_dict(),
            "code_range": self.code_range.to_dict(),
            "comment_text": self.comment_text,
            "code_text": self.code_text,
            "line_number": self.line_number,
        }
