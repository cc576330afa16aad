"""Resolve prefixed relative paths to absolute paths."""

import os
from collections.abc import Mapping

from ..config.DEFAULT_PATH_PREFIXES import DEFAULT_PATH_PREFIXES
from ..config.PathPrefixConfig import PathPrefixConfig
from ._join import _join
from .PathBase import PathBase


class PathResolver:
    """Turn a possibly-prefixed path string into an absolute path string.

    Prefixes are looked up in table order, e.g. with the defaults::

        #:package.json  -> <workspace>/package.json
        ~:helper.py     -> <dir of current document>/helper.py
        <:utils.py      -> <parent of that dir>/utils.py
        >:sub/mod.py    -> <dir of current document>/sub/mod.py

    Only strings are computed; the filesystem is never touched.
    """

    def __init__(self, prefixes: Mapping[str, PathPrefixConfig] | None = None):
        self._prefixes: dict[str, PathPrefixConfig] = dict(DEFAULT_PATH_PREFIXES if prefixes is None else prefixes)

    @property
    def prefixes(self) -> list[str]:
        return list(self._prefixes)

    def resolve(
        self,
        path: str,
        current_document_path: str | None = None,
        workspace_root: str | None = None,
    ) -> str:
        """Resolve path against the base its prefix names.

        Unprefixed paths are workspace-relative, then relative to the current
        document directory, and returned unchanged when neither is known.
        """
        if os.path.isabs(path):
            return path

        for prefix, entry in self._prefixes.items():
            if path.startswith(prefix):
                return self._resolve_by_base(path[len(prefix) :], entry.base, current_document_path, workspace_root)

        if workspace_root:
            return _join(workspace_root, path)
        if current_document_path:
            return _join(os.path.dirname(current_document_path), path)
        return path

    def _resolve_by_base(
        self,
        relative_path: str,
        base: PathBase,
        current_document_path: str | None,
        workspace_root: str | None,
    ) -> str:
        if base == PathBase.WORKSPACE:
            if workspace_root:
                return _join(workspace_root, relative_path)
        elif base == PathBase.PARENT:
            if current_document_path:
                parent_dir = os.path.dirname(os.path.dirname(current_document_path))
                return _join(parent_dir, relative_path)
        elif base in (PathBase.CURRENT, PathBase.CHILD):
            # child shares the current-directory computation
            if current_document_path:
                return _join(os.path.dirname(current_document_path), relative_path)

        if workspace_root:
            return _join(workspace_root, relative_path)
        return relative_path

    def has_prefix(self, path: str) -> bool:
        """Check if a path starts with a configured prefix."""
        return any(path.startswith(prefix) for prefix in self._prefixes)

    def prefix_description(self, prefix: str) -> str | None:
        """Get the description of a configured prefix, if any."""
        entry = self._prefixes.get(prefix)
        return entry.description if entry else None
