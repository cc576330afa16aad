"""Substitute ${...} tokens in target templates."""

import os
import re
import sys
from pathlib import Path

from .VariableContext import VariableContext

TOKEN_PATTERN = re.compile(r"\$\{([^}]+)\}")


class VariableResolver:
    """Single pass, non-recursive ${...} substitution.

    Substituted text is never rescanned, and any token that is unknown or
    cannot be resolved from the context is left byte-for-byte unchanged.
    """

    def resolve(self, template: str, context: VariableContext) -> str:
        def replace(token: re.Match) -> str:
            value = self._lookup(token.group(1), context)
            return token.group(0) if value is None else value

        return TOKEN_PATTERN.sub(replace, template)

    def _lookup(self, name: str, context: VariableContext) -> str | None:
        if name.startswith("env:"):
            return context.env(name[4:]) or None

        if name.isdigit():
            groups = context.capture_groups
            if groups is None:
                return None
            index = int(name)
            if index >= len(groups):
                return None
            return groups[index] or None

        workspace = context.workspace_folder
        if name == "workspaceFolder":
            return workspace
        if name == "workspaceFolderBasename":
            if not workspace:
                return None
            return context.workspace_name or os.path.basename(os.path.normpath(workspace))

        if name in _FILE_TOKENS:
            if not context.file:
                return None
            return _FILE_TOKENS[name](context.file, workspace)

        if name == "lineNumber":
            return None if context.line_number is None else str(context.line_number)
        if name == "selectedText":
            return context.selected_text or None

        if name == "cwd":
            return context.cwd or os.getcwd()
        if name == "userHome":
            if context.user_home is not None:
                return context.user_home
            return context.env("HOME") or context.env("USERPROFILE") or ""
        if name == "appName":
            return context.app_name
        if name == "appRoot":
            return context.app_root or str(Path(__file__).resolve().parents[2])
        if name == "execPath":
            return context.exec_path or sys.executable

        return None


def _relative_file(file: str, workspace: str | None) -> str | None:
    if not workspace:
        return None
    return os.path.relpath(file, workspace)


def _relative_file_dirname(file: str, workspace: str | None) -> str | None:
    relative = _relative_file(file, workspace)
    if relative is None:
        return None
    return os.path.dirname(relative) or "."


_FILE_TOKENS = {
    "file": lambda file, _workspace: file,
    "fileBasename": lambda file, _workspace: os.path.basename(file),
    "fileDirname": lambda file, _workspace: os.path.dirname(file),
    "fileExtname": lambda file, _workspace: os.path.splitext(file)[1],
    "relativeFile": _relative_file,
    "relativeFileDirname": _relative_file_dirname,
}
