from ._has_unclosed_string import _has_unclosed_string


def _is_in_comment(line: str, index: int) -> bool:
    """Heuristic: is ``line[index]`` inside a ``//`` comment or a ``/*`` opened on this line?

    This is a backward scan over one line, not a lexer.
    """
    before = line[:index]

    line_comment = before.rfind("//")
    if line_comment != -1 and not _has_unclosed_string(line[line_comment + 2 : index]):
        return True

    block_start = before.rfind("/*")
    if block_start != -1:
        block_end = line.find("*/", block_start + 2)
        if block_end == -1 or block_end > index:
            return True

    return False
