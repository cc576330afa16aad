"""Accumulated filesystem events."""

from dataclasses import dataclass, field


@dataclass
class FileEvents:
    """Filesystem events seen since the last poll.

    All paths are absolute paths as strings.
    """

    modified: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    moved: list[tuple[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.modified or self.created or self.deleted or self.moved)

    def touched(self, path: str) -> bool:
        """True if path was created, modified or moved into place."""
        return path in self.modified or path in self.created or any(dest == path for _, dest in self.moved)

    def removed(self, path: str) -> bool:
        """True if path was deleted or moved away."""
        return path in self.deleted or any(src == path for src, _ in self.moved)
