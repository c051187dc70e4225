"""Signal-based messaging between processes, with formatting, text, memory, list and line-reading helpers."""

__version__ = "1.0.0"