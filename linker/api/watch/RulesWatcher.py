"""Reload link rules when the rule file changes."""

import logging
from pathlib import Path

from watchdog.observers import Observer

from ..link.LinkScanner import LinkScanner
from ._EventHandler import _EventHandler
from .FileEvents import FileEvents

logger = logging.getLogger(__name__)


class RulesWatcher:
    """Watch the rule file (and optionally one document) of a scanner.

    Events are accumulated by a watchdog observer thread; ``poll`` applies
    them on the caller's thread, so the scanner's rule list is only ever
    replaced as a whole between scans.
    """

    def __init__(
        self,
        scanner: LinkScanner,
        document_path: str | Path | None = None,
        watch_rules: bool = True,
    ):
        self.scanner = scanner
        self.rules_path = str(scanner.rules_path.absolute())
        self.document_path = str(Path(document_path).absolute()) if document_path else None
        self.watch_rules = watch_rules

        watched = {self.rules_path} if watch_rules else set()
        if self.document_path:
            watched.add(self.document_path)
        self._watched = watched
        self._handler = _EventHandler(watched)
        self._observer: Observer | None = None

    def start(self) -> None:
        observer = Observer()
        for directory in sorted({str(Path(p).parent) for p in self._watched}):
            if Path(directory).is_dir():
                observer.schedule(self._handler, directory, recursive=False)
            else:
                logger.warning(f"Not watching missing directory {directory}")
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None

    def __enter__(self) -> "RulesWatcher":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False

    def poll(self) -> tuple[bool, bool]:
        """Apply pending events.

        Returns:
            (rules_changed, document_changed)
        """
        return self.apply(self._handler.get_and_clear_events())

    def apply(self, events: FileEvents) -> tuple[bool, bool]:
        if events.is_empty():
            return False, False

        rules_changed = False
        if self.watch_rules and events.touched(self.rules_path):
            try:
                self.scanner.reload_rules()
                rules_changed = True
            except ValueError as e:
                logger.error(f"Keeping previous link rules: {e}")
        elif self.watch_rules and events.removed(self.rules_path):
            self.scanner.matcher.update_rules([])
            logger.info("Rule file deleted, links disabled")
            rules_changed = True

        document_changed = bool(self.document_path) and events.touched(self.document_path)
        return rules_changed, document_changed
