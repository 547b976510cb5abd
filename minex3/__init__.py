"""A small 2D arcade space-ship game, with its logic usable without a window."""

__version__ = "0.1.0"
__all__ = ["__version__"]