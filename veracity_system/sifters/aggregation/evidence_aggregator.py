"""Canonical evidence scoring and aggregation.

Scores every source once, then reduces the set to:
- EQS: directness-squared weighted quality of the top-N sources (0-100)
- SDI: diversity of TLDs, stances and source types (0-10)
- Consensus: stance tally over all sources

Well-established-fact boost (raises EQS only, never lowers it):
- >=2 supporting, 0 challenging, >=1 high-credibility supporter -> floor 95
- >=1 supporting, 0 challenging, >=2 high-directness supporters -> floor 90
- supporting > challenging, >=1 high-credibility supporter       -> floor 85

Every function here is pure and total: identical inputs (including the
reference time) give identical output, and missing fields fall back to
midpoint defaults instead of raising.

Usage:
    from veracity_system.sifters.aggregation import score_evidence

    result = score_evidence(claim, "en", sources)
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from veracity_system.config.settings import ScoringConfig
from veracity_system.data_management.schemas import (
    AggregateResult,
    RawSource,
    ScoredSource,
    Stance,
)
from veracity_system.sifters.aggregation.legacy_scorer import LegacyEvidenceScorer
from veracity_system.sifters.aggregation.reductions import (
    compute_eqs,
    compute_sdi,
    quality_score,
    select_top_n,
    tally_consensus,
)
from veracity_system.sifters.credibility import CredibilityEstimator
from veracity_system.sifters.signals import (
    DirectnessEstimator,
    MethodologyEstimator,
    RecencyEstimator,
)
from veracity_system.sifters.stance import StanceClassifier
from veracity_system.sifters.text.keywords import is_well_established_fact
from veracity_system.utils.logging import get_structured_logger

STRONG_SUPPORT_FLOOR = 95
MODERATE_SUPPORT_FLOOR = 90
NET_SUPPORT_FLOOR = 85


class EvidenceAggregator:
    """Scores raw sources and reduces them to EQS, SDI and consensus.

    Estimators are injectable for testing; defaults are built from the
    ScoringConfig (only the fact-checker list affects them).
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        credibility_estimator: Optional[CredibilityEstimator] = None,
        directness_estimator: Optional[DirectnessEstimator] = None,
        methodology_estimator: Optional[MethodologyEstimator] = None,
        recency_estimator: Optional[RecencyEstimator] = None,
        stance_classifier: Optional[StanceClassifier] = None,
    ) -> None:
        self.config = config or ScoringConfig()
        self.credibility = credibility_estimator or CredibilityEstimator(
            factcheck_domains=self.config.factcheck_domains
        )
        self.directness = directness_estimator or DirectnessEstimator()
        self.methodology = methodology_estimator or MethodologyEstimator()
        self.recency = recency_estimator or RecencyEstimator()
        self.stance = stance_classifier or StanceClassifier()
        self._logger = get_structured_logger(__name__, component="EvidenceAggregator")

    def score_source(
        self,
        claim: str,
        source: RawSource,
        now: datetime,
        well_established: bool,
    ) -> ScoredSource:
        """Compute every per-source score. discovered_via is carried through untouched."""
        directness = self.directness.score(claim, source.snippet, well_established)
        methodology = self.methodology.score(source.snippet)
        recency = self.recency.score(source.publish_date, now)
        stance = self.stance.classify(claim, source.snippet, well_established)
        if source.credibility_score is not None:
            credibility = source.credibility_score
        else:
            credibility = self.credibility.estimate(
                source.domain, source.source_type, source.discovered_via
            )

        return ScoredSource(
            **source.model_dump(exclude={"credibility_score"}),
            credibility_score=credibility,
            directness_score=directness,
            methodology_score=methodology,
            recency_score=recency,
            stance=stance,
            quality_score=quality_score(credibility, directness, methodology, recency),
        )

    def score_all(
        self,
        claim: str,
        language: str,
        sources: Sequence[RawSource],
        now: Optional[datetime] = None,
        is_paid: bool = False,
    ) -> AggregateResult:
        """Score sources and aggregate.

        Args:
            claim: Claim text.
            language: Claim language (recorded in logs; heuristics are English).
            sources: Validated raw sources. Empty yields EQS 0, SDI 0.
            now: Reference time for recency (defaults to current UTC time).
            is_paid: Reserved for tiering; does not alter the algorithm.

        Returns:
            Frozen AggregateResult.
        """
        now = now or datetime.now(timezone.utc)
        well_established = is_well_established_fact(claim)

        scored = [self.score_source(claim, s, now, well_established) for s in sources]
        top = select_top_n(scored, self.config.top_n)
        eqs = compute_eqs(top)

        floor = self._well_established_floor(scored) if well_established else None
        if floor is not None and floor > eqs:
            eqs = floor
        else:
            floor = None

        consensus = tally_consensus(scored)
        sdi = compute_sdi(scored)

        self._logger.info(
            "evidence_scored",
            language=language,
            sources=len(scored),
            top_n=len(top),
            eqs=eqs,
            sdi=sdi,
            supporting=consensus.supporting,
            challenging=consensus.challenging,
            well_established=well_established,
            eqs_floor=floor,
        )

        return AggregateResult(
            eqs=eqs,
            sdi=sdi,
            sources_with_scores=scored,
            consensus=consensus,
            well_established_fact=well_established,
            eqs_floor=floor,
            variant="canonical",
        )

    def _well_established_floor(self, scored: Sequence[ScoredSource]) -> Optional[int]:
        """EQS floor for a well-established fact claim, or None if evidence is not supportive."""
        supporting = [s for s in scored if s.stance == Stance.SUPPORTING]
        challenging = sum(1 for s in scored if s.stance == Stance.CHALLENGING)
        high_credibility = sum(
            1 for s in supporting
            if s.credibility_score >= self.config.high_credibility_threshold
        )
        high_directness = sum(
            1 for s in supporting
            if s.directness_score >= self.config.high_directness_threshold
        )

        if len(supporting) >= 2 and challenging == 0 and high_credibility >= 1:
            return STRONG_SUPPORT_FLOOR
        if len(supporting) >= 1 and challenging == 0 and high_directness >= 2:
            return MODERATE_SUPPORT_FLOOR
        if len(supporting) > challenging and high_credibility >= 1:
            return NET_SUPPORT_FLOOR
        return None


def score_evidence(
    claim: str,
    language: str,
    sources: Sequence[RawSource],
    config: Optional[ScoringConfig] = None,
    now: Optional[datetime] = None,
    is_paid: bool = False,
) -> AggregateResult:
    """Scoring entry point. Dispatches on ``config.variant``."""
    config = config or ScoringConfig()
    if config.variant == "legacy":
        return LegacyEvidenceScorer(config).score_all(claim, language, sources, now, is_paid)
    return EvidenceAggregator(config).score_all(claim, language, sources, now, is_paid)


__all__ = [
    "EvidenceAggregator",
    "MODERATE_SUPPORT_FLOOR",
    "NET_SUPPORT_FLOOR",
    "STRONG_SUPPORT_FLOOR",
    "score_evidence",
]
