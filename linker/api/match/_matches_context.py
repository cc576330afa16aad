from ..rules.Pattern import Pattern


def _matches_context(text: str, pattern: Pattern, start: int, end: int) -> bool:
    """Check the verbatim before/after context around ``text[start:end]``."""
    if pattern.context is None:
        return True

    before = pattern.context.before
    if before and text[max(0, start - len(before)) : start] != before:
        return False

    after = pattern.context.after
    if after and text[end : end + len(after)] != after:
        return False

    return True
