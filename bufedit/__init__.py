"""Edit named in-memory audio buffers, with one level of undo."""

__version__ = "0.1.0"
__all__ = ["buffer", "effects", "editor"]