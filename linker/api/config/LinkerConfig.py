"""Top-level linker settings."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_RULES_FILE
from ..annotation.DEFAULT_TAG_PATTERN import DEFAULT_TAG_PATTERN
from .DEFAULT_PATH_PREFIXES import DEFAULT_PATH_PREFIXES
from .get_home_dir import get_home_dir
from .PathPrefixConfig import PathPrefixConfig


class LinkerConfig(BaseModel):
    """Settings for scanning and resolving links."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    auto_reload: bool = Field(True, description="Reload rules when the rule file changes")
    debug: bool = False
    enable_inline_links: bool = True
    inline_link_pattern: str = Field(DEFAULT_TAG_PATTERN, description='Tag regex with "anchor" and "link" groups')
    path_prefixes: dict[str, PathPrefixConfig] = Field(default_factory=lambda: dict(DEFAULT_PATH_PREFIXES))
    rules_file: str = Field(DEFAULT_RULES_FILE, description="Rule file, relative to the workspace root")
    show_inline: bool = Field(True, description="Default for rules that leave showInline unset")

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on LINKER_HOME or default to ~/.linker."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "LinkerConfig":
        """Load and validate config from file, or defaults when there is none.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def rules_path(self, workspace_root: str | Path | None = None) -> Path:
        """Location of the rule file for a workspace (linker home without one)."""
        base = Path(workspace_root) if workspace_root else get_home_dir()
        return base / self.rules_file

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the configuration atomically (temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
