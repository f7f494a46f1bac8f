"""Configuration, key bindings, event handling, table layout and formatting for a terminal music player."""

__version__ = "0.1.0"