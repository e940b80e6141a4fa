"""C-style character, memory and string helpers, fd output and a minimal printf."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "printf"]