"""Order-item round grouping and status aggregation service."""

__version__ = "0.1.0"
