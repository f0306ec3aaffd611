"""Console management of massage therapists stored in a fixed-width record file."""

__version__ = "0.1.0"
__all__ = ["__version__"]