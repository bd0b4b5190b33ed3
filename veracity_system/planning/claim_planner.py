"""Claim-type classification and search planning.

Classifies a claim into scientific / medical / historical / political /
general (first matching category wins, in that order) and builds the queries
and domain allow-lists the search collaborator runs:
- Fact-check query: keywords + claim-type context terms
- Counter query: fewer keywords + debunking vocabulary
- Preferred domains: base reference domains + claim-type domains

Keywords come from the same tokenizer the directness estimator uses.

Usage:
    from veracity_system.planning import ClaimPlanner

    planner = ClaimPlanner()
    plan = planner.plan("Water boils at 100 degrees Celsius at sea level")
"""

import re
from typing import Iterable, Optional

from veracity_system.config.lexicon import (
    BASE_RELEVANT_DOMAINS,
    CLAIM_TYPE_CONTEXT,
    CLAIM_TYPE_DOMAINS,
    CLAIM_TYPE_PATTERNS,
)
from veracity_system.config.source_credibility import DEFAULT_FACTCHECK_DOMAINS
from veracity_system.data_management.schemas import ClaimAnalysis, ClaimType, SearchPlan
from veracity_system.sifters.text.keywords import extract_keywords
from veracity_system.utils.logging import get_structured_logger

COUNTER_KEYWORD_LIMIT = 3

# Evaluation order; GENERAL is the fallback
_CLAIM_TYPE_ORDER = [
    ClaimType.SCIENTIFIC,
    ClaimType.MEDICAL,
    ClaimType.HISTORICAL,
    ClaimType.POLITICAL,
]
_COMPILED_TYPE_PATTERNS = {
    claim_type: [re.compile(p, re.IGNORECASE) for p in CLAIM_TYPE_PATTERNS[claim_type.value]]
    for claim_type in _CLAIM_TYPE_ORDER
}


class ClaimPlanner:
    """Classifies claims and builds search plans."""

    def __init__(self, factcheck_domains: Optional[Iterable[str]] = None) -> None:
        """Initialize ClaimPlanner.

        Args:
            factcheck_domains: Domains for the fact-check preflight pass.
        """
        self.factcheck_domains = list(factcheck_domains or DEFAULT_FACTCHECK_DOMAINS)
        self._logger = get_structured_logger(__name__, component="ClaimPlanner")

    def classify(self, claim: str) -> ClaimType:
        """First claim type whose patterns match, else GENERAL."""
        for claim_type in _CLAIM_TYPE_ORDER:
            if any(p.search(claim) for p in _COMPILED_TYPE_PATTERNS[claim_type]):
                return claim_type
        return ClaimType.GENERAL

    def analyze(self, claim: str) -> ClaimAnalysis:
        """Claim type, keywords (<= 8) and context terms."""
        claim_type = self.classify(claim)
        return ClaimAnalysis(
            claim_type=claim_type,
            keywords=extract_keywords(claim),
            context=list(CLAIM_TYPE_CONTEXT[claim_type.value]),
        )

    def plan(self, claim: str) -> SearchPlan:
        """Build the full search plan for a claim."""
        analysis = self.analyze(claim)
        plan = SearchPlan(
            claim=claim,
            analysis=analysis,
            fact_check_query=self._fact_check_query(claim, analysis),
            general_query=claim.strip(),
            counter_query=self._counter_query(claim, analysis),
            preferred_domains=self._relevant_domains(analysis.claim_type),
            fact_check_domains=list(self.factcheck_domains),
        )

        self._logger.info(
            "search_plan_built",
            claim_type=analysis.claim_type.value,
            keywords=len(analysis.keywords),
            preferred_domains=len(plan.preferred_domains),
        )
        return plan

    # ── Query construction ───────────────────────────────────────────

    def _fact_check_query(self, claim: str, analysis: ClaimAnalysis) -> str:
        keywords = " ".join(analysis.keywords)
        context = " ".join(analysis.context)
        claim_type = analysis.claim_type

        if claim_type == ClaimType.SCIENTIFIC:
            return f"{keywords} {context} scientific explanation research"
        elif claim_type == ClaimType.MEDICAL:
            return f"{keywords} {context} medical information"
        elif claim_type == ClaimType.HISTORICAL:
            return f"{keywords} {context} historical facts"
        elif claim_type == ClaimType.POLITICAL:
            return f'"{claim.strip()}" {context} snopes politifact'
        return f'"{claim.strip()}" {context} true false'

    def _counter_query(self, claim: str, analysis: ClaimAnalysis) -> str:
        keywords = " ".join(analysis.keywords[:COUNTER_KEYWORD_LIMIT])
        claim_type = analysis.claim_type

        if claim_type == ClaimType.SCIENTIFIC:
            return f"{keywords} myth debunked incorrect misconception false"
        elif claim_type == ClaimType.MEDICAL:
            return f"{keywords} myth medical misinformation false claim"
        elif claim_type == ClaimType.HISTORICAL:
            return f"{keywords} myth historical inaccuracy false disputed"
        elif claim_type == ClaimType.POLITICAL:
            return f'"{claim.strip()}" false misleading fact check debunked'
        return f'"{claim.strip()}" myth false debunked incorrect wrong'

    def _relevant_domains(self, claim_type: ClaimType) -> list[str]:
        domains = list(BASE_RELEVANT_DOMAINS)
        for domain in CLAIM_TYPE_DOMAINS.get(claim_type.value, []):
            if domain not in domains:
                domains.append(domain)
        return domains


__all__ = ["ClaimPlanner"]
