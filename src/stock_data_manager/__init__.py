"""Daily price ingestion and moving-average indicators."""

__version__ = "0.1.0"
