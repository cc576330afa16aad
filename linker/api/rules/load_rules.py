"""Load link rules from a JSON rule file."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .LinkRule import LinkRule

logger = logging.getLogger(__name__)


def parse_rules(raw: Any) -> list[LinkRule]:
    """Validate already-decoded rule data.

    Accepts a bare list of rules or an object with a ``links`` list.

    Raises:
        ValueError: If the shape is wrong or a rule fails validation
    """
    if isinstance(raw, dict) and isinstance(raw.get("links"), list):
        entries = raw["links"]
    elif isinstance(raw, list):
        entries = raw
    else:
        raise ValueError('Invalid rule format: expected a list or an object with a "links" list')

    rules: list[LinkRule] = []
    for index, entry in enumerate(entries):
        name = entry.get("name", "unnamed") if isinstance(entry, dict) else "unnamed"
        try:
            rules.append(LinkRule.model_validate(entry))
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(x) for x in first.get("loc", ()))
            detail = f"{loc}: {first.get('msg', str(e))}" if loc else first.get("msg", str(e))
            raise ValueError(f'Invalid link rule #{index} "{name}": {detail}') from e
    return rules


def load_rules(path: Path) -> list[LinkRule]:
    """Load and validate the rule file at path.

    A missing or empty file yields no rules.

    Raises:
        ValueError: If the file is not valid JSON or a rule is invalid
    """
    if not path.exists():
        logger.debug(f"No rule file at {path}")
        return []

    content = path.read_text(encoding="utf-8").strip()
    if not content:
        logger.warning(f"Rule file {path} is empty, no links will be active")
        return []

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in rule file {path}: {e}") from e

    rules = parse_rules(raw)
    logger.debug(f"Loaded {len(rules)} link rules from {path}")
    return rules
