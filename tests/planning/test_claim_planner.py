"""Tests for ClaimPlanner.

Tests cover:
- Claim-type classification order
- Keyword and context extraction
- Query templates per claim type
- Preferred and fact-check domain lists
"""

import pytest

from veracity_system.config.lexicon import BASE_RELEVANT_DOMAINS
from veracity_system.config.source_credibility import DEFAULT_FACTCHECK_DOMAINS
from veracity_system.data_management.schemas import ClaimType
from veracity_system.planning import ClaimPlanner

WATER_CLAIM = "Water boils at 100 degrees Celsius at sea level"


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def planner():
    return ClaimPlanner()


# ── Tests ────────────────────────────────────────────────────────────


class TestClassify:
    """Tests for claim-type classification."""

    @pytest.mark.parametrize(
        "claim,expected",
        [
            (WATER_CLAIM, ClaimType.SCIENTIFIC),
            ("The sky is blue because of Rayleigh scattering", ClaimType.SCIENTIFIC),
            ("Aspirin reduces heart attack risk", ClaimType.MEDICAL),
            ("The Berlin Wall fell in 1989", ClaimType.HISTORICAL),
            ("The senate passed a new tax law", ClaimType.POLITICAL),
            ("Pineapples grow on trees", ClaimType.GENERAL),
        ],
    )
    def test_claim_types(self, planner, claim, expected):
        assert planner.classify(claim) == expected

    def test_historical_checked_before_political(self, planner):
        """'president' appears in both vocabularies; historical wins."""
        assert planner.classify("The president signed the bill") == ClaimType.HISTORICAL


class TestAnalyze:
    """Tests for ClaimPlanner.analyze."""

    def test_keywords_and_context(self, planner):
        analysis = planner.analyze(WATER_CLAIM)
        assert analysis.claim_type == ClaimType.SCIENTIFIC
        assert analysis.keywords == ["water", "boils", "100", "degrees", "celsius", "sea", "level"]
        assert "physics" in analysis.context

    def test_keyword_limit(self, planner):
        claim = "alpha bravo charlie delta echo foxtrot golf hotel india juliet"
        assert len(planner.analyze(claim).keywords) == 8


class TestPlan:
    """Tests for ClaimPlanner.plan."""

    def test_scientific_queries(self, planner):
        plan = planner.plan(WATER_CLAIM)
        assert plan.claim == WATER_CLAIM
        assert plan.general_query == WATER_CLAIM
        assert plan.fact_check_query.startswith("water boils 100 degrees celsius sea level")
        assert plan.fact_check_query.endswith("scientific explanation research")
        assert plan.counter_query == "water boils 100 myth debunked incorrect misconception false"

    def test_political_queries_quote_claim(self, planner):
        claim = "The senate passed a new tax law"
        plan = planner.plan(claim)
        assert plan.fact_check_query.startswith(f'"{claim}"')
        assert plan.fact_check_query.endswith("snopes politifact")
        assert plan.counter_query == f'"{claim}" false misleading fact check debunked'

    def test_general_counter_query(self, planner):
        plan = planner.plan("Pineapples grow on trees")
        assert plan.counter_query == '"Pineapples grow on trees" myth false debunked incorrect wrong'

    def test_preferred_domains(self, planner):
        plan = planner.plan("The senate passed a new tax law")
        assert plan.preferred_domains[: len(BASE_RELEVANT_DOMAINS)] == BASE_RELEVANT_DOMAINS
        assert "politifact.com" in plan.preferred_domains
        assert len(plan.preferred_domains) == len(set(plan.preferred_domains))

    def test_general_claims_use_base_domains(self, planner):
        plan = planner.plan("Pineapples grow on trees")
        assert plan.preferred_domains == BASE_RELEVANT_DOMAINS

    def test_fact_check_domains_default(self, planner):
        assert planner.plan(WATER_CLAIM).fact_check_domains == list(DEFAULT_FACTCHECK_DOMAINS)

    def test_fact_check_domains_custom(self):
        planner = ClaimPlanner(["fullfact.org"])
        assert planner.plan(WATER_CLAIM).fact_check_domains == ["fullfact.org"]
