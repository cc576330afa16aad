import re

_LINE_SUFFIX = re.compile(r":(\d+)")


def _extract_line_number(text: str) -> int | None:
    """Line number from a ``name:42`` style match, if any."""
    found = _LINE_SUFFIX.search(text)
    return int(found.group(1)) if found else None
