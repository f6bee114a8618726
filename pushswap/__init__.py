"""Sort integers with two stacks and a fixed set of operations."""

__version__ = "1.0.0"
__all__ = ["stack", "parsing", "sorting", "formatting", "bench", "cli"]