"""Tests for the shared reductions: quality, top-N, EQS, SDI and consensus."""

import pytest

from veracity_system.data_management.schemas import ScoredSource, SourceType, Stance
from veracity_system.sifters.aggregation import (
    QUALITY_WEIGHTS,
    compute_eqs,
    compute_sdi,
    quality_score,
    round_half_up,
    select_top_n,
    tally_consensus,
)


def scored(
    domain: str = "example.com",
    directness: float = 0.5,
    quality: float = 0.5,
    stance: Stance = Stance.NEUTRAL,
    source_type: SourceType | None = None,
) -> ScoredSource:
    return ScoredSource(
        url=f"https://{domain}/page",
        domain=domain,
        source_type=source_type,
        credibility_score=0.5,
        directness_score=directness,
        methodology_score=0.5,
        recency_score=0.5,
        stance=stance,
        quality_score=quality,
    )


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (84.4, 84)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestQualityScore:
    """Tests for quality_score."""

    def test_weights_sum_to_one(self):
        assert sum(QUALITY_WEIGHTS.values()) == pytest.approx(1.0)

    def test_neutral_slant_contributes_constant(self):
        assert quality_score(0.0, 0.0, 0.0, 0.0) == pytest.approx(0.05)

    def test_all_ones(self):
        assert quality_score(1.0, 1.0, 1.0, 1.0) == pytest.approx(0.95)

    def test_weighted_sum(self):
        assert quality_score(0.8, 0.8, 0.5, 0.5) == pytest.approx(0.695)

    @pytest.mark.parametrize("component", range(4))
    def test_monotonic_in_each_component(self, component):
        low = [0.5, 0.5, 0.5, 0.5]
        high = list(low)
        high[component] = 0.9
        assert quality_score(*high) > quality_score(*low)


class TestSelectTopN:
    """Tests for select_top_n."""

    def test_orders_by_directness(self):
        sources = [scored("a.com", 0.2), scored("b.com", 0.9), scored("c.com", 0.5)]
        assert [s.domain for s in select_top_n(sources, 2)] == ["b.com", "c.com"]

    def test_ties_keep_input_order(self):
        sources = [scored("a.com", 0.7), scored("b.com", 0.7), scored("c.com", 0.7)]
        assert [s.domain for s in select_top_n(sources, 2)] == ["a.com", "b.com"]

    def test_fewer_sources_than_n(self):
        assert len(select_top_n([scored()], 5)) == 1


class TestComputeEqs:
    """Tests for compute_eqs."""

    def test_directness_squared_weighting(self):
        top = [scored(directness=1.0, quality=0.8), scored(directness=0.5, quality=0.4)]
        assert compute_eqs(top) == 72

    def test_empty(self):
        assert compute_eqs([]) == 0

    def test_zero_directness(self):
        assert compute_eqs([scored(directness=0.0, quality=0.9)]) == 0

    def test_custom_directness_accessor(self):
        top = [scored(directness=0.0, quality=0.42)]
        assert compute_eqs(top, directness_of=lambda s: s.directness_score or 0.5) == 42


class TestComputeSdi:
    """Tests for compute_sdi."""

    def test_empty(self):
        assert compute_sdi([]) == 0

    def test_single_source(self):
        """1 TLD + 1 stance + 1 type = 3 of 20 -> 1.5 -> 2."""
        assert compute_sdi([scored()]) == 2

    def test_diverse_sources(self):
        sources = [
            scored("a.com", stance=Stance.SUPPORTING, source_type=SourceType.NEWS),
            scored("b.org", stance=Stance.CHALLENGING, source_type=SourceType.NGO),
            scored("c.gov", stance=Stance.NEUTRAL, source_type=SourceType.GOV),
            scored("d.edu", stance=Stance.NEUTRAL, source_type=SourceType.EDU),
        ]
        # 4 TLDs + 3 stances + 4 types = 11 -> 5.5 -> 6
        assert compute_sdi(sources) == 6

    def test_capped_at_ten(self):
        tlds = ["com", "org", "gov", "edu", "net", "io", "uk", "de", "fr", "jp",
                "ca", "au", "es", "it", "nl"]
        types = list(SourceType)
        sources = [
            scored(f"site.{tld}", stance=list(Stance)[i % 3], source_type=types[i % len(types)])
            for i, tld in enumerate(tlds)
        ]
        assert compute_sdi(sources) == 10


class TestTallyConsensus:
    """Tests for tally_consensus."""

    def test_counts(self):
        sources = [
            scored(stance=Stance.SUPPORTING),
            scored(stance=Stance.SUPPORTING),
            scored(stance=Stance.CHALLENGING),
        ]
        consensus = tally_consensus(sources)
        assert (consensus.supporting, consensus.challenging, consensus.neutral) == (2, 1, 0)
        assert consensus.total == 3

    def test_empty(self):
        assert tally_consensus([]).total == 0
