"""Domain credibility estimation.

Maps a source domain (plus optional source type and discovery pass) to a
trust score in [0, 1]. Pure lookup and pattern matching, no I/O. Unknown
domains resolve to DEFAULT_CREDIBILITY; nothing here raises.

Lookup priority:
1. Exact domain in the trust table
2. Parent domain in the trust table (news.bbc.co.uk -> bbc.co.uk)
3. TLD pattern (.gov, .edu, .org, ...)
4. Source-type default
5. DEFAULT_CREDIBILITY

Fact-checker adjustments are applied on top of the looked-up base.
"""

from typing import Dict, Iterable, Optional

from veracity_system.config.logging import get_logger
from veracity_system.config.source_credibility import (
    BASE_TRUST,
    DEFAULT_CREDIBILITY,
    DEFAULT_FACTCHECK_DOMAINS,
    DOMAIN_PATTERN_DEFAULTS,
    FACTCHECK_BOOST,
    FACTCHECK_FLOOR,
    SOURCE_TYPE_DEFAULTS,
)
from veracity_system.data_management.schemas import DiscoveredVia, SourceType, normalize_domain


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def domain_matches(domain: str, candidates: Iterable[str]) -> bool:
    """True if domain equals a candidate or is a subdomain of one."""
    return any(domain == c or domain.endswith("." + c) for c in candidates)


class CredibilityEstimator:
    """
    Computes a trust score for a source domain.

    Usage:
        estimator = CredibilityEstimator()
        score = estimator.estimate("britannica.com", SourceType.ACADEMIC)

    Attributes:
        trust_table: Dict mapping domains to trust scores
        type_defaults: Dict mapping source types to default scores
        factcheck_domains: Fact-checker allow-list (floored at FACTCHECK_FLOOR)
    """

    def __init__(
        self,
        trust_table: Optional[Dict[str, float]] = None,
        type_defaults: Optional[Dict[str, float]] = None,
        factcheck_domains: Optional[Iterable[str]] = None,
    ):
        self.trust_table = trust_table or BASE_TRUST
        self.type_defaults = type_defaults or SOURCE_TYPE_DEFAULTS
        self.factcheck_domains = tuple(
            normalize_domain(d) for d in (factcheck_domains or DEFAULT_FACTCHECK_DOMAINS)
        )
        self.logger = get_logger("CredibilityEstimator")

    def estimate(
        self,
        domain: str,
        source_type: Optional[SourceType] = None,
        discovered_via: Optional[DiscoveredVia] = None,
    ) -> float:
        """
        Estimate credibility for a domain.

        Args:
            domain: Registrable host (www. is stripped if present)
            source_type: Optional source category
            discovered_via: Optional discovery pass; fact-check preflight earns a boost

        Returns:
            Trust score clamped to [0, 1]
        """
        domain = normalize_domain(domain or "")
        score = self._base_trust(domain, source_type)

        if self.is_fact_checker(domain):
            score = max(score, FACTCHECK_FLOOR)
        if discovered_via == DiscoveredVia.FACTCHECK_PREFLIGHT:
            score += FACTCHECK_BOOST

        score = _clamp01(score)
        self.logger.bind(
            source_type=source_type.value if source_type else None,
            discovered_via=discovered_via.value if discovered_via else None,
        ).debug(f"Credibility {score:.2f} for {domain or 'unknown'}")
        return score

    def is_fact_checker(self, domain: str) -> bool:
        """True if domain is on the fact-checker allow-list."""
        return bool(domain) and domain_matches(normalize_domain(domain), self.factcheck_domains)

    def _base_trust(self, domain: str, source_type: Optional[SourceType]) -> float:
        if not domain:
            return DEFAULT_CREDIBILITY

        if domain in self.trust_table:
            return self.trust_table[domain]

        # Walk up parent domains: a.b.example.com -> b.example.com -> example.com
        labels = domain.split(".")
        for i in range(1, len(labels) - 1):
            parent = ".".join(labels[i:])
            if parent in self.trust_table:
                return self.trust_table[parent]

        for suffix, score in DOMAIN_PATTERN_DEFAULTS.items():
            if domain.endswith(suffix):
                return score

        if source_type is not None:
            return self.type_defaults.get(source_type.value, DEFAULT_CREDIBILITY)
        return DEFAULT_CREDIBILITY


__all__ = ["CredibilityEstimator", "domain_matches"]
