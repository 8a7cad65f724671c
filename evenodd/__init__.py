"""Sort random numbers from worker threads into shared even and odd lists."""

__version__ = "0.1.0"
__all__ = ["__version__"]