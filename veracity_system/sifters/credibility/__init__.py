"""Credibility estimation for evidence sources.

- CredibilityEstimator: trust table + TLD patterns + source-type defaults,
  with a fact-checker floor and a fact-check preflight boost.
"""

from veracity_system.sifters.credibility.credibility_estimator import (
    CredibilityEstimator,
    domain_matches,
)

__all__ = ["CredibilityEstimator", "domain_matches"]
