"""Legacy scoring variant: the first-generation simple heuristics.

Kept as an explicitly selected alternative (SCORING_VARIANT=legacy). It gives
different numbers from the canonical EvidenceAggregator for the same input and
is never mixed with it.

Differences from the canonical variant:
- Directness is raw token-set overlap over max(8, claim token count), with no
  stop-word filtering, phrase bonus or well-established floor
- Stance: any denial term -> challenging, else any affirmation -> supporting
- Missing credibility is 0.5 (no domain lookup)
- A directness of 0 is weighted as 0.5 in the EQS
- No well-established-fact EQS floors
"""

import re
from datetime import datetime, timezone
from typing import Optional, Sequence

from veracity_system.config.settings import ScoringConfig
from veracity_system.config.source_credibility import DEFAULT_CREDIBILITY
from veracity_system.data_management.schemas import (
    AggregateResult,
    RawSource,
    ScoredSource,
    Stance,
)
from veracity_system.sifters.aggregation.reductions import (
    compute_eqs,
    compute_sdi,
    quality_score,
    select_top_n,
    tally_consensus,
)
from veracity_system.sifters.signals.recency import RecencyEstimator
from veracity_system.sifters.text.keywords import tokenize
from veracity_system.utils.logging import get_structured_logger

LEGACY_DIRECTNESS_DENOMINATOR = 8
LEGACY_DEFAULT = 0.5

_LEGACY_NEGATION = re.compile(r"\b(not|no|false|hoax|refute|debunk|deny|dispute|contradict)\b")
_LEGACY_AFFIRMATION = re.compile(r"\b(confirm|corroborate|support|affirm|verify)\b")
_LEGACY_METHOD = re.compile(
    r"study|dataset|methodology|replication|survey|randomized|placebo|meta-?analysis",
    re.IGNORECASE,
)


def legacy_directness(claim: str, snippet: Optional[str]) -> float:
    if not snippet:
        return LEGACY_DEFAULT
    claim_tokens = tokenize(claim)
    overlap = len(claim_tokens & tokenize(snippet))
    return max(0.0, min(1.0, overlap / max(LEGACY_DIRECTNESS_DENOMINATOR, len(claim_tokens))))


def legacy_stance(snippet: Optional[str]) -> Stance:
    if not snippet:
        return Stance.NEUTRAL
    text = snippet.lower()
    if _LEGACY_NEGATION.search(text):
        return Stance.CHALLENGING
    if _LEGACY_AFFIRMATION.search(text):
        return Stance.SUPPORTING
    return Stance.NEUTRAL


class LegacyEvidenceScorer:
    """First-generation scoring: token overlap, bare keyword stance, no floors."""

    def __init__(self, config: Optional[ScoringConfig] = None) -> None:
        self.config = config or ScoringConfig(variant="legacy")
        self.recency = RecencyEstimator()
        self._logger = get_structured_logger(__name__, component="LegacyEvidenceScorer")

    def score_all(
        self,
        claim: str,
        language: str,
        sources: Sequence[RawSource],
        now: Optional[datetime] = None,
        is_paid: bool = False,
    ) -> AggregateResult:
        now = now or datetime.now(timezone.utc)
        scored: list[ScoredSource] = []
        for source in sources:
            directness = legacy_directness(claim, source.snippet)
            methodology = 0.8 if _LEGACY_METHOD.search(source.snippet or "") else LEGACY_DEFAULT
            recency = self.recency.score(source.publish_date, now)
            credibility = (
                source.credibility_score
                if source.credibility_score is not None
                else DEFAULT_CREDIBILITY
            )
            scored.append(
                ScoredSource(
                    **source.model_dump(exclude={"credibility_score"}),
                    credibility_score=credibility,
                    directness_score=directness,
                    methodology_score=methodology,
                    recency_score=recency,
                    stance=legacy_stance(source.snippet),
                    quality_score=quality_score(credibility, directness, methodology, recency),
                )
            )

        top = select_top_n(scored, self.config.top_n)
        eqs = compute_eqs(top, directness_of=lambda s: s.directness_score or LEGACY_DEFAULT)
        sdi = compute_sdi(scored)
        consensus = tally_consensus(scored)

        self._logger.info(
            "evidence_scored_legacy",
            language=language,
            sources=len(scored),
            eqs=eqs,
            sdi=sdi,
        )

        return AggregateResult(
            eqs=eqs,
            sdi=sdi,
            sources_with_scores=scored,
            consensus=consensus,
            variant="legacy",
        )


__all__ = ["LegacyEvidenceScorer", "legacy_directness", "legacy_stance"]
