"""Reductions shared by both scoring variants.

quality = 0.40*credibility + 0.25*directness + 0.15*methodology
        + 0.10*recency + 0.10*NEUTRAL_SLANT

The last term is a fixed slot for a political-lean/slant signal that is not
computed; it always contributes 0.05.

EQS = round(100 * sum(d^2 * q) / sum(d^2)) over the top-N sources by directness.
SDI = round(10 * min(1, (TLDs + stances + source types) / 20)) over all sources.
"""

import math
from typing import Callable, Iterable, Sequence

from veracity_system.data_management.schemas import Consensus, ScoredSource, Stance

QUALITY_WEIGHTS: dict[str, float] = {
    "credibility": 0.40,
    "directness": 0.25,
    "methodology": 0.15,
    "recency": 0.10,
    "slant": 0.10,
}
NEUTRAL_SLANT = 0.5

SDI_NORMALIZER = 20
DEFAULT_TOP_N = 5


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def quality_score(
    credibility: float,
    directness: float,
    methodology: float,
    recency: float,
) -> float:
    """Weighted per-source quality, clamped to [0, 1]."""
    w = QUALITY_WEIGHTS
    total = (
        w["credibility"] * credibility
        + w["directness"] * directness
        + w["methodology"] * methodology
        + w["recency"] * recency
        + w["slant"] * NEUTRAL_SLANT
    )
    return max(0.0, min(1.0, total))


def select_top_n(sources: Sequence[ScoredSource], n: int = DEFAULT_TOP_N) -> list[ScoredSource]:
    """Top-N by directness, descending. sorted() is stable, so ties keep input order."""
    return sorted(sources, key=lambda s: s.directness_score, reverse=True)[:n]


def compute_eqs(
    top: Iterable[ScoredSource],
    directness_of: Callable[[ScoredSource], float] = lambda s: s.directness_score,
) -> int:
    """Directness-squared weighted mean quality, scaled to 0-100.

    A zero denominator (no sources, or all directness 0) is treated as 1.
    """
    numerator = 0.0
    denominator = 0.0
    for source in top:
        weight = directness_of(source) ** 2
        numerator += weight * source.quality_score
        denominator += weight
    return max(0, min(100, round_half_up(100 * numerator / (denominator or 1))))


def domain_suffix(domain: str) -> str:
    return domain.rsplit(".", 1)[-1] if domain else "unknown"


def compute_sdi(sources: Sequence[ScoredSource]) -> int:
    """Crude diversity count over TLDs, stances and source types."""
    if not sources:
        return 0
    suffixes = {domain_suffix(s.domain) for s in sources}
    stances = {s.stance for s in sources}
    types = {s.source_type.value if s.source_type else "unknown" for s in sources}
    distinct = min(SDI_NORMALIZER, len(suffixes) + len(stances) + len(types))
    return round_half_up(10 * distinct / SDI_NORMALIZER)


def tally_consensus(sources: Iterable[ScoredSource]) -> Consensus:
    counts = {stance: 0 for stance in Stance}
    for source in sources:
        counts[source.stance] += 1
    return Consensus(
        supporting=counts[Stance.SUPPORTING],
        challenging=counts[Stance.CHALLENGING],
        neutral=counts[Stance.NEUTRAL],
    )


__all__ = [
    "DEFAULT_TOP_N",
    "NEUTRAL_SLANT",
    "QUALITY_WEIGHTS",
    "compute_eqs",
    "compute_sdi",
    "quality_score",
    "round_half_up",
    "select_top_n",
    "tally_consensus",
]
