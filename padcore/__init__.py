"""Editing core of a simple text editor: buffer, undo/redo, indentation, search, menu state and settings."""

__version__ = "0.1.0"