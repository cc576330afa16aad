"""API module for linker.

Functions defined here serve as the single source of truth for the CLI commands.
"""

__all__ = []
