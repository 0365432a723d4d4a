"""Classic competitive programming problems solved as plain Python functions."""

__version__ = "0.1.0"
__all__ = ["text", "graphs", "geometry", "dynamic", "arrays", "puzzles"]