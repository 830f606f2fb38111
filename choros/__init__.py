"""Task lifecycle scheduling and graph-based navigation for robots."""

__version__ = "0.1.0"
__all__ = ["lifecycle", "navigation"]