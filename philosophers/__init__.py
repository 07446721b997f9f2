"""Dining philosophers simulation with threads, locks and a monitor."""

__version__ = "1.0.0"
__all__ = ["config", "table", "routines", "monitor", "cli"]