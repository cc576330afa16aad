def _has_unclosed_string(text: str) -> bool:
    """Check whether text ends inside a single- or double-quoted string.

    Backslash escapes the next character. A quote of one kind inside a
    string of the other kind is ordinary text.
    """
    in_single = False
    in_double = False
    escape_next = False

    for char in text:
        if escape_next:
            escape_next = False
            continue
        if char == "\\":
            escape_next = True
            continue
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double

    return in_single or in_double
