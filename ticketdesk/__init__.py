"""Console help desk for technical-service tickets, with small container types."""

__version__ = "0.1.0"
__all__ = ["__version__"]