from collections.abc import Iterator

from ..rules.LinkRule import LinkRule
from ..rules.Pattern import Pattern
from ..TextRange import TextRange
from ._matches_context import _matches_context
from .Match import Match


def _find_line_matches(text: str, pattern: Pattern, rule: LinkRule) -> Iterator[Match]:
    """One match per line containing the value.

    Offsets are taken from the first occurrence of the identical line text in
    the document, so repeated lines all report the earliest position.
    """
    value = pattern.value
    if not value:
        return

    for line in text.split("\n"):
        if value not in line:
            continue

        start = text.find(line) + line.find(value)
        end = start + len(value)
        if _matches_context(text, pattern, start, end):
            yield Match(
                rule=rule,
                pattern=pattern,
                range=TextRange(start, end),
                highlighted_text=value,
            )
