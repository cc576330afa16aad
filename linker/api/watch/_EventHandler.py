"""Filesystem event handler for the rule watcher."""

import threading

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .FileEvents import FileEvents


class _EventHandler(FileSystemEventHandler):
    """Accumulates file events for a fixed set of paths."""

    def __init__(self, paths: set[str]) -> None:
        super().__init__()
        self._paths = paths
        self._modified: set[str] = set()
        self._created: set[str] = set()
        self._deleted: set[str] = set()
        self._moved: dict[str, str] = {}
        self._lock = threading.Lock()

    def _wanted(self, event: FileSystemEvent) -> bool:
        return not event.is_directory

    def on_modified(self, event: FileSystemEvent) -> None:
        if self._wanted(event) and str(event.src_path) in self._paths:
            with self._lock:
                self._modified.add(str(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        if self._wanted(event) and str(event.src_path) in self._paths:
            with self._lock:
                self._created.add(str(event.src_path))

    def on_deleted(self, event: FileSystemEvent) -> None:
        if self._wanted(event) and str(event.src_path) in self._paths:
            with self._lock:
                self._deleted.add(str(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        src, dest = str(event.src_path), str(event.dest_path)
        if self._wanted(event) and (src in self._paths or dest in self._paths):
            with self._lock:
                self._moved[src] = dest

    def get_and_clear_events(self) -> FileEvents:
        with self._lock:
            events = FileEvents(
                modified=sorted(self._modified),
                created=sorted(self._created),
                deleted=sorted(self._deleted),
                moved=list(self._moved.items()),
            )
            self._modified.clear()
            self._created.clear()
            self._deleted.clear()
            self._moved.clear()
        return events
