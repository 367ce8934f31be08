"""Process and thread CPU timers, a steady clock and RFC 3339 timestamps."""

__version__ = "1.9.4"
__all__ = ["timers"]