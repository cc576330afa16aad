"""Rule-based link matching over raw document text."""

from collections.abc import Callable, Iterator, Sequence

from ..rules.LinkRule import LinkRule
from ..rules.Pattern import Pattern
from ..rules.PatternKind import PatternKind
from ._find_line_matches import _find_line_matches
from ._find_regex_matches import _find_regex_matches
from ._find_text_matches import _find_text_matches
from .Match import Match

_FINDERS: dict[PatternKind, Callable[[str, Pattern, LinkRule], Iterator[Match]]] = {
    PatternKind.TEXT: _find_text_matches,
    PatternKind.REGEX: _find_regex_matches,
    PatternKind.LINE: _find_line_matches,
}


class PatternMatcher:
    """Find rule matches in a document.

    The matcher keeps no state besides its rule list, which is only ever
    swapped as a whole (see ``update_rules``). Every call rescans the text.
    """

    def __init__(self, rules: Sequence[LinkRule] = ()):
        self._rules: tuple[LinkRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[LinkRule, ...]:
        return self._rules

    def update_rules(self, rules: Sequence[LinkRule]) -> None:
        """Replace the rule list."""
        self._rules = tuple(rules)

    def iter_matches(
        self, text: str, document_extension: str, rules: Sequence[LinkRule] | None = None
    ) -> Iterator[Match]:
        """Lazily yield matches in rule, then pattern, declaration order."""
        for rule in self._rules if rules is None else rules:
            for pattern in rule.patterns:
                if not pattern.applies_to(document_extension):
                    continue
                yield from _FINDERS[pattern.kind](text, pattern, rule)

    def find_matches(
        self, text: str, document_extension: str, rules: Sequence[LinkRule] | None = None
    ) -> list[Match]:
        """All matches of the rules (default: this matcher's rules) in text."""
        return list(self.iter_matches(text, document_extension, rules))

    def match_at_offset(
        self,
        text: str,
        offset: int,
        document_extension: str = "",
        rules: Sequence[LinkRule] | None = None,
    ) -> Match | None:
        """First match whose range contains offset, both ends inclusive."""
        for match in self.iter_matches(text, document_extension, rules):
            if match.range.contains(offset):
                return match
        return None

    def matches_at_offset(
        self,
        text: str,
        offset: int,
        document_extension: str = "",
        rules: Sequence[LinkRule] | None = None,
    ) -> list[Match]:
        """Every match containing offset, for choosing among overlapping links."""
        return [m for m in self.iter_matches(text, document_extension, rules) if m.range.contains(offset)]

    def matches_in_range(
        self,
        text: str,
        start: int,
        end: int,
        document_extension: str = "",
        rules: Sequence[LinkRule] | None = None,
    ) -> list[Match]:
        """Matches lying fully inside ``[start, end]``."""
        return [m for m in self.iter_matches(text, document_extension, rules) if m.range.within(start, end)]
