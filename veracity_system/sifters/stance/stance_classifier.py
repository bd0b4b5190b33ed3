"""Heuristic stance classification as an ordered rule chain.

The rules are evaluated in fixed priority order and the first match wins.
This is NOT a scored classifier. It leans toward SUPPORTING for
well-established facts so uncontested claims are not flagged as unverified.

| #  | Rule                    | Condition                                                    | Stance      |
|----|-------------------------|--------------------------------------------------------------|-------------|
| 1  | denial_near_keyword     | denial term followed within 50 chars by a claim keyword      | challenging |
| 2  | affirmation             | affirmation term anywhere                                    | supporting  |
| 3  | well_established_fact   | fact pattern, coverage >= max(1, min(ceil(k/2), 2)), and definitional/explanatory phrasing or coverage >= 2 | supporting |
| 4  | explanatory_coverage    | explanatory connective, coverage >= max(1, min(ceil(0.6k), 3)) | supporting  |
| 5  | definitional_coverage   | definitional phrasing, coverage >= 2                         | supporting  |
| -  | (fallthrough)           |                                                              | neutral     |
"""

import math
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from veracity_system.config.lexicon import (
    AFFIRMATION_PATTERN,
    DEFINITIONAL_PATTERN,
    EXPLANATORY_PATTERN,
    NEGATION_PATTERN,
)
from veracity_system.config.logging import get_logger
from veracity_system.data_management.schemas import Stance
from veracity_system.sifters.text.keywords import (
    count_matched_keywords,
    extract_keywords,
    is_well_established_fact,
)

NEGATION_WINDOW_CHARS = 50

_NEGATION_RE = re.compile(NEGATION_PATTERN, re.IGNORECASE)
_AFFIRMATION_RE = re.compile(AFFIRMATION_PATTERN, re.IGNORECASE)
_DEFINITIONAL_RE = re.compile(DEFINITIONAL_PATTERN, re.IGNORECASE)
_EXPLANATORY_RE = re.compile(EXPLANATORY_PATTERN, re.IGNORECASE)


@dataclass
class StanceContext:
    """Features shared by every rule for one (claim, snippet) pair.

    Attributes:
        snippet: Lowercased snippet text.
        keywords: Claim keywords from the shared tokenizer.
        matched: Number of keywords present in the snippet.
        well_established: Claim matches a well-established fact pattern.
    """

    snippet: str
    keywords: List[str] = field(default_factory=list)
    matched: int = 0
    well_established: bool = False


@dataclass(frozen=True)
class StanceRule:
    """One (predicate, outcome) entry in the rule chain."""

    name: str
    predicate: Callable[[StanceContext], bool]
    stance: Stance


def _keyword_pattern(keywords: List[str]) -> Optional[re.Pattern]:
    if not keywords:
        return None
    alternatives = "|".join(re.escape(k) for k in sorted(set(keywords), key=len, reverse=True))
    return re.compile(rf"\b(?:{alternatives})\b")


def denial_near_keyword(ctx: StanceContext, window: int = NEGATION_WINDOW_CHARS) -> bool:
    """A denial term is followed by a claim keyword within ``window`` characters."""
    keyword_re = _keyword_pattern(ctx.keywords)
    if keyword_re is None:
        return False
    for match in _NEGATION_RE.finditer(ctx.snippet):
        following = ctx.snippet[match.end(): match.end() + window]
        if keyword_re.search(following):
            return True
    return False


def has_affirmation(ctx: StanceContext) -> bool:
    return bool(_AFFIRMATION_RE.search(ctx.snippet))


def well_established_support(ctx: StanceContext) -> bool:
    if not ctx.well_established:
        return False
    required = min(math.ceil(len(ctx.keywords) / 2), 2)
    # At least one keyword must appear, even for claims with none
    if ctx.matched < max(1, required):
        return False
    has_phrasing = bool(_DEFINITIONAL_RE.search(ctx.snippet) or _EXPLANATORY_RE.search(ctx.snippet))
    return has_phrasing or ctx.matched >= 2


def explanatory_coverage(ctx: StanceContext) -> bool:
    required = min(math.ceil(len(ctx.keywords) * 0.6), 3)
    return bool(_EXPLANATORY_RE.search(ctx.snippet)) and ctx.matched >= max(1, required)


def definitional_coverage(ctx: StanceContext) -> bool:
    return bool(_DEFINITIONAL_RE.search(ctx.snippet)) and ctx.matched >= 2


STANCE_RULES: List[StanceRule] = [
    StanceRule("denial_near_keyword", denial_near_keyword, Stance.CHALLENGING),
    StanceRule("affirmation", has_affirmation, Stance.SUPPORTING),
    StanceRule("well_established_fact", well_established_support, Stance.SUPPORTING),
    StanceRule("explanatory_coverage", explanatory_coverage, Stance.SUPPORTING),
    StanceRule("definitional_coverage", definitional_coverage, Stance.SUPPORTING),
]


class StanceClassifier:
    """
    Labels a snippet as supporting, challenging or neutral toward a claim.

    Usage:
        classifier = StanceClassifier()
        stance = classifier.classify(claim, snippet)

    Attributes:
        rules: Ordered rule chain; the first rule whose predicate holds decides.
    """

    def __init__(self, rules: Optional[List[StanceRule]] = None):
        self.rules = rules if rules is not None else STANCE_RULES
        self._logger = get_logger("StanceClassifier")

    def build_context(
        self,
        claim: str,
        snippet: str,
        well_established: Optional[bool] = None,
    ) -> StanceContext:
        keywords = extract_keywords(claim)
        if well_established is None:
            well_established = is_well_established_fact(claim)
        return StanceContext(
            snippet=snippet.lower(),
            keywords=keywords,
            matched=count_matched_keywords(keywords, snippet),
            well_established=well_established,
        )

    def classify(
        self,
        claim: str,
        snippet: Optional[str],
        well_established: Optional[bool] = None,
    ) -> Stance:
        """
        Classify stance of a snippet toward a claim.

        Args:
            claim: Claim text.
            snippet: Source snippet; None or empty yields NEUTRAL.
            well_established: Precomputed fact-pattern flag (computed if None).

        Returns:
            Stance of the first matching rule, or NEUTRAL.
        """
        if not snippet:
            return Stance.NEUTRAL

        ctx = self.build_context(claim, snippet, well_established)
        rule = self.matching_rule(ctx)
        if rule is None:
            return Stance.NEUTRAL

        self._logger.bind(matched=ctx.matched).debug(f"Stance {rule.stance.value} via {rule.name}")
        return rule.stance

    def matching_rule(self, ctx: StanceContext) -> Optional[StanceRule]:
        """First rule whose predicate holds, or None."""
        for rule in self.rules:
            if rule.predicate(ctx):
                return rule
        return None


__all__ = [
    "STANCE_RULES",
    "StanceClassifier",
    "StanceContext",
    "StanceRule",
    "denial_near_keyword",
]
