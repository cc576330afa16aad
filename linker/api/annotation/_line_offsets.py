import bisect


def _line_offsets(lines: list[str]) -> list[int]:
    """Start offset of each line of ``"\\n".join(lines)``."""
    offsets = []
    current = 0
    for line in lines:
        offsets.append(current)
        current += len(line) + 1
    return offsets


def _line_index(offset: int, offsets: list[int]) -> int:
    """Index of the line containing offset."""
    return max(bisect.bisect_right(offsets, offset) - 1, 0)
