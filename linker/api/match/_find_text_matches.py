import re
from collections.abc import Iterator

from ..rules.LinkRule import LinkRule
from ..rules.Pattern import Pattern
from ..TextRange import TextRange
from ._matches_context import _matches_context
from .Match import Match


def _find_text_matches(text: str, pattern: Pattern, rule: LinkRule) -> Iterator[Match]:
    """Literal search reporting overlapping occurrences ("aa" in "aaaa" -> 0, 1, 2)."""
    if not pattern.value:
        return

    flags = 0 if pattern.effective_case_sensitive else re.IGNORECASE
    # zero-width lookahead: the scan cursor moves one character per hit
    finder = re.compile(f"(?=({re.escape(pattern.value)}))", flags)

    for found in finder.finditer(text):
        start, end = found.span(1)
        if _matches_context(text, pattern, start, end):
            yield Match(
                rule=rule,
                pattern=pattern,
                range=TextRange(start, end),
                highlighted_text=text[start:end],
            )
