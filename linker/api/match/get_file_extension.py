import os


def get_file_extension(file_name: str) -> str:
    """Return the extension including the dot (".py"), or "" when there is none."""
    base = os.path.basename(file_name)
    index = base.rfind(".")
    return base[index:] if index != -1 else ""
