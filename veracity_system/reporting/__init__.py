"""Presentation mappings for analysis results."""

from veracity_system.reporting.veracity import VERACITY_BUCKETS, to_veracity

__all__ = ["VERACITY_BUCKETS", "to_veracity"]
