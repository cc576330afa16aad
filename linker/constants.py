"""Shared constants for linker dot-directories and artefact locations."""

LINKER_HOME_EXT = ".linker"  # user-level state/config directory suffix

LINKER_HOME_DISPLAY = f"~/{LINKER_HOME_EXT}"  # user-readable path hint

# Rule file location relative to a workspace root
DEFAULT_RULES_FILE = f"{LINKER_HOME_EXT}/links.json"

# Log file name under the linker home
LOG_FILE_NAME = "linker.log"
