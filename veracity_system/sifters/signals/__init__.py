"""Secondary per-source quality signals: directness, methodology, recency."""

from veracity_system.sifters.signals.directness import DirectnessEstimator
from veracity_system.sifters.signals.methodology import MethodologyEstimator
from veracity_system.sifters.signals.recency import RecencyEstimator, parse_publish_date

__all__ = [
    "DirectnessEstimator",
    "MethodologyEstimator",
    "RecencyEstimator",
    "parse_publish_date",
]
