"""Directness: lexical overlap between a claim and a source snippet.

score = matched_keywords / max(keyword_count, 3)
      + 0.3 if a claim clause (>10 chars) appears verbatim in the snippet

Well-established fact claims with at least two matched keywords are floored
at 0.8: encyclopedic snippets restate such facts without repeating the
claim's phrasing. The result is clamped to [0, 1].
"""

from typing import Optional

from veracity_system.sifters.text.keywords import (
    claim_clauses,
    count_matched_keywords,
    extract_keywords,
    is_well_established_fact,
)

DEFAULT_DIRECTNESS = 0.5
PHRASE_MATCH_BONUS = 0.3
MIN_KEYWORD_DENOMINATOR = 3
WELL_ESTABLISHED_FLOOR = 0.8
WELL_ESTABLISHED_MIN_MATCHES = 2


class DirectnessEstimator:
    """Approximates how directly a snippet addresses the claim."""

    def __init__(
        self,
        phrase_bonus: float = PHRASE_MATCH_BONUS,
        well_established_floor: float = WELL_ESTABLISHED_FLOOR,
    ) -> None:
        self.phrase_bonus = phrase_bonus
        self.well_established_floor = well_established_floor

    def score(
        self,
        claim: str,
        snippet: Optional[str],
        well_established: Optional[bool] = None,
    ) -> float:
        """
        Score directness of a snippet for a claim.

        Args:
            claim: Claim text.
            snippet: Source snippet; None or empty yields DEFAULT_DIRECTNESS.
            well_established: Precomputed fact-pattern flag (computed if None).

        Returns:
            Directness in [0, 1].
        """
        if not snippet:
            return DEFAULT_DIRECTNESS

        keywords = extract_keywords(claim)
        matched = count_matched_keywords(keywords, snippet)
        score = matched / max(len(keywords), MIN_KEYWORD_DENOMINATOR)

        snippet_lower = snippet.lower()
        if any(clause in snippet_lower for clause in claim_clauses(claim)):
            score += self.phrase_bonus

        if well_established is None:
            well_established = is_well_established_fact(claim)
        if well_established and matched >= WELL_ESTABLISHED_MIN_MATCHES:
            score = max(score, self.well_established_floor)

        return max(0.0, min(1.0, score))
