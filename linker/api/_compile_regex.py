"""Compile user-supplied regex sources."""

import re

# Escapes are consumed whole so that \\(?<name>...) still counts as a group,
# while \(?<name> stays literal; lookbehinds (?<= and (?<! are untouched.
_TOKEN = re.compile(
    r"\\k<(?P<ref>[A-Za-z_][A-Za-z0-9_]*)>"
    r"|\\."
    r"|\(\?<(?![=!])(?P<group>[A-Za-z_][A-Za-z0-9_]*)>",
    re.DOTALL,
)


def _rewrite(token: re.Match) -> str:
    if token.group("ref"):
        return f"(?P={token.group('ref')})"
    if token.group("group"):
        return f"(?P<{token.group('group')}>"
    return token.group(0)


def to_python_regex(source: str) -> str:
    """Rewrite ``(?<name>`` groups and ``\\k<name>`` references to Python syntax."""
    return _TOKEN.sub(_rewrite, source)


def compile_regex(source: str, case_sensitive: bool = True) -> re.Pattern:
    """Compile a regex source, accepting both Python and ``(?<name>`` group syntax.

    Raises:
        re.error: If the source is not a valid regular expression
    """
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(to_python_regex(source), flags)
