import os


def _join(base: str, relative: str) -> str:
    """Join and normalize, treating a leading separator in relative as part of the path."""
    return os.path.normpath(base + os.sep + relative)
