"""Draw the circle through three points on a grayscale canvas."""

__version__ = "0.1.0"

__all__ = ["__version__"]