"""CPU scheduling, contiguous memory allocation and page replacement algorithms."""

__version__ = "0.1.0"