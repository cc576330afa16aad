"""Automatic rule reloading."""

from .FileEvents import FileEvents
from .RulesWatcher import RulesWatcher

__all__ = ["FileEvents", "RulesWatcher"]
