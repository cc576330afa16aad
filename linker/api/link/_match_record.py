from typing import Any

from ..match.Match import Match
from ..variables.VariableContext import VariableContext
from .LinkScanner import LinkScanner
from .resolve_target import resolve_target


def _match_record(scanner: LinkScanner, match: Match, context: VariableContext) -> dict[str, Any]:
    """Serializable view of a match with its resolved target or the resolution error."""
    record = match.to_dict()
    record["icon"] = match.rule.display_icon
    record["description"] = match.rule.description
    record["show_inline"] = match.rule.shows_inline(scanner.config.show_inline)
    try:
        resolved = resolve_target(match, context, scanner.paths, scanner.variables)
    except ValueError as e:
        record["target"] = None
        record["error"] = str(e)
        return record

    record["target"] = resolved.to_dict()
    record["error"] = f"File not found: {resolved.target}" if resolved.exists is False else None
    return record
