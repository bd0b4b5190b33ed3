"""Evidence scoring and aggregation for claim veracity analysis."""

__version__ = "0.1.0"
