from pathlib import Path


def _read_document(path: str) -> tuple[Path, str]:
    """Absolute document path and its text.

    Raises:
        ValueError: If the file does not exist or is not UTF-8 text
    """
    document = Path(path).expanduser().absolute()
    if not document.is_file():
        raise ValueError(f"Document not found: {document}")
    try:
        return document, document.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Document is not UTF-8 text: {document}") from e
