"""Decide whether a target file opens as text."""

from .TEXT_FILE_EXTENSIONS import TEXT_FILE_EXTENSIONS


def is_text_file(file_path: str) -> bool:
    """True for known text extensions; files without an extension count as text."""
    name = file_path.lower().replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return True
    return f".{name.rsplit('.', 1)[-1]}" in TEXT_FILE_EXTENSIONS
