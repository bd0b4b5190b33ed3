"""Evidence aggregation: per-source quality, EQS, SDI and consensus.

- EvidenceAggregator: canonical algorithm with the well-established-fact boost
- LegacyEvidenceScorer: first-generation simple heuristics, selected explicitly
- score_evidence: entry point dispatching on ScoringConfig.variant
"""

from veracity_system.sifters.aggregation.evidence_aggregator import (
    EvidenceAggregator,
    score_evidence,
)
from veracity_system.sifters.aggregation.legacy_scorer import LegacyEvidenceScorer
from veracity_system.sifters.aggregation.reductions import (
    QUALITY_WEIGHTS,
    compute_eqs,
    compute_sdi,
    quality_score,
    round_half_up,
    select_top_n,
    tally_consensus,
)

__all__ = [
    "EvidenceAggregator",
    "LegacyEvidenceScorer",
    "QUALITY_WEIGHTS",
    "compute_eqs",
    "compute_sdi",
    "quality_score",
    "round_half_up",
    "score_evidence",
    "select_top_n",
    "tally_consensus",
]
