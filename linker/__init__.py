"""Linker - rule-based and inline link discovery for source text."""

__version__ = "0.3.0"
