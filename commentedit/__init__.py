"""Extract, edit and rewrite comments in source files, with a tkinter editor."""

__version__ = "0.1.0"

__all__ = ["extractor", "saver", "session", "gui"]