"""Link rule models and loading."""

from .LinkKind import LinkKind
from .LinkRule import LinkRule
from .Pattern import Pattern
from .PatternContext import PatternContext
from .PatternKind import PatternKind
from .load_rules import load_rules, parse_rules

__all__ = ["LinkKind", "LinkRule", "Pattern", "PatternContext", "PatternKind", "load_rules", "parse_rules"]
