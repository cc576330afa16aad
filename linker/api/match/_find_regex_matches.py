import logging
import re
from collections.abc import Iterator

from .._compile_regex import compile_regex
from ..rules.LinkRule import LinkRule
from ..rules.Pattern import Pattern
from ..TextRange import TextRange
from ._matches_context import _matches_context
from .Match import Match

logger = logging.getLogger(__name__)


def _find_regex_matches(text: str, pattern: Pattern, rule: LinkRule) -> Iterator[Match]:
    """All non-overlapping regex matches, optionally highlighting one group.

    The highlighted group is located by searching its text inside the whole
    match, so a group whose text also occurs earlier in the match is
    highlighted at that earlier position.
    """
    try:
        regex = compile_regex(pattern.value, pattern.effective_case_sensitive)
    except re.error as e:
        logger.warning(f"Invalid regex pattern {pattern.value!r} in link {rule.name!r}: {e}")
        return

    group = pattern.highlight_group or 0
    for found in regex.finditer(text):
        whole = found.group(0)
        # "after" is read past the length of the regex source, not the match
        if not _matches_context(text, pattern, found.start(), found.start() + len(pattern.value)):
            continue

        start, end, highlighted = found.start(), found.end(), whole
        if 0 < group <= regex.groups and found.group(group):
            group_text = found.group(group)
            start = found.start() + whole.find(group_text)
            end = start + len(group_text)
            highlighted = group_text

        yield Match(
            rule=rule,
            pattern=pattern,
            range=TextRange(start, end),
            highlighted_text=highlighted,
            full_match=whole,
            capture_groups=(whole, *found.groups()),
        )
