def offset_at(text: str, line: int, column: int) -> int:
    """Character offset of a 1-based line and column, clamped to the text."""
    lines = text.split("\n")
    line_index = min(max(line, 1), len(lines)) - 1
    offset = sum(len(previous) + 1 for previous in lines[:line_index])
    return offset + min(max(column, 1) - 1, len(lines[line_index]))
