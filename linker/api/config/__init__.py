"""Linker settings."""
