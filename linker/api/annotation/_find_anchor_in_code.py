import re
from collections.abc import Iterator

from ..TextRange import TextRange


def _find_anchor_in_code(line: str, line_offset: int, anchor: str) -> Iterator[tuple[TextRange, str]]:
    """Whole-word occurrences of the literal anchor in line."""
    if not anchor:
        return
    for found in re.finditer(rf"\b{re.escape(anchor)}\b", line):
        yield TextRange(line_offset + found.start(), line_offset + found.end()), found.group(0)
