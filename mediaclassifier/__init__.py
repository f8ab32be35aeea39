"""Sort media files into extension and date folders."""

__version__ = "1.1.0"
__all__ = ["__version__"]