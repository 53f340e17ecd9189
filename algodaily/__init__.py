"""Classic algorithm problems solved as plain Python functions."""

__version__ = "0.1.0"