"""Tests for boundary validation of raw search results.

Tests cover:
- Claim validation
- Domain derivation and normalization
- camelCase keys from the search layer
- Fact-checker provenance tagging
- Domain de-duplication and the source cap
- InputError for malformed records
"""

import pytest

from veracity_system.data_management.schemas import DiscoveredVia, RawSource, SourceType
from veracity_system.errors import InputError
from veracity_system.pipeline import (
    build_raw_sources,
    dedupe_by_domain,
    domain_of,
    validate_claim,
)


class TestValidateClaim:
    """Tests for validate_claim."""

    def test_strips_whitespace(self):
        assert validate_claim("  The sky is blue  ") == "The sky is blue"

    @pytest.mark.parametrize("claim", ["", "   ", None, 42])
    def test_rejects_empty(self, claim):
        with pytest.raises(InputError):
            validate_claim(claim)


class TestDomainOf:
    """Tests for domain_of."""

    def test_strips_www_and_lowercases(self):
        assert domain_of("https://WWW.Britannica.com/science") == "britannica.com"

    def test_keeps_subdomain(self):
        assert domain_of("https://news.bbc.co.uk/story") == "news.bbc.co.uk"

    def test_no_host(self):
        assert domain_of("not a url") == "unknown"


class TestBuildRawSources:
    """Tests for build_raw_sources."""

    def test_dict_records(self):
        sources = build_raw_sources(
            [{"url": "https://www.britannica.com/x", "snippet": "Water boils."}]
        )
        assert len(sources) == 1
        assert sources[0].domain == "britannica.com"
        assert sources[0].discovered_via == DiscoveredVia.SEARCH
        assert sources[0].source_type is None

    def test_camel_case_keys(self):
        sources = build_raw_sources(
            [
                {
                    "url": "https://example.com/a",
                    "publishDate": "2026-01-01",
                    "sourceType": "news",
                    "discoveredVia": "counter-evidence",
                    "credibilityScore": 0.42,
                }
            ]
        )
        source = sources[0]
        assert source.publish_date == "2026-01-01"
        assert source.source_type == SourceType.NEWS
        assert source.discovered_via == DiscoveredVia.COUNTER_EVIDENCE
        assert source.credibility_score == 0.42

    def test_unknown_source_type(self):
        sources = build_raw_sources([{"url": "https://example.com/a", "sourceType": "forum"}])
        assert sources[0].source_type == SourceType.UNKNOWN

    def test_fact_checker_tagging(self):
        sources = build_raw_sources([{"url": "https://www.snopes.com/fact-check/x"}])
        assert sources[0].source_type == SourceType.FACTCHECK
        assert sources[0].discovered_via == DiscoveredVia.FACTCHECK_PREFLIGHT

    def test_existing_provenance_is_kept(self):
        sources = build_raw_sources(
            [
                {
                    "url": "https://www.snopes.com/fact-check/x",
                    "source_type": "news",
                    "discovered_via": "counter-evidence",
                }
            ]
        )
        assert sources[0].source_type == SourceType.NEWS
        assert sources[0].discovered_via == DiscoveredVia.COUNTER_EVIDENCE

    def test_custom_fact_checkers(self):
        sources = build_raw_sources(
            [{"url": "https://snopes.com/a"}, {"url": "https://fullfact.org/b"}],
            factcheck_domains=["fullfact.org"],
        )
        assert sources[0].discovered_via == DiscoveredVia.SEARCH
        assert sources[1].discovered_via == DiscoveredVia.FACTCHECK_PREFLIGHT

    def test_raw_source_instances_accepted(self):
        source = RawSource(url="https://example.com/a")
        assert build_raw_sources([source])[0].domain == "example.com"

    def test_dedupes_by_domain(self):
        sources = build_raw_sources(
            [
                {"url": "https://example.com/first"},
                {"url": "https://www.example.com/second"},
                {"url": "https://other.com/x"},
            ]
        )
        assert [s.url for s in sources] == ["https://example.com/first", "https://other.com/x"]

    def test_cap(self):
        records = [{"url": f"https://site{i}.com/"} for i in range(20)]
        assert len(build_raw_sources(records, cap=5)) == 5
        assert len(build_raw_sources(records)) == 12

    def test_empty_list(self):
        assert build_raw_sources([]) == []

    def test_none_rejected(self):
        with pytest.raises(InputError):
            build_raw_sources(None)

    def test_missing_url_rejected(self):
        with pytest.raises(InputError, match="index 1"):
            build_raw_sources([{"url": "https://example.com"}, {"snippet": "orphan"}])

    def test_out_of_range_credibility_rejected(self):
        with pytest.raises(InputError):
            build_raw_sources([{"url": "https://example.com", "credibility_score": 1.5}])

    def test_non_mapping_rejected(self):
        with pytest.raises(InputError):
            build_raw_sources(["https://example.com"])


class TestDedupeByDomain:
    """Tests for dedupe_by_domain."""

    def test_first_occurrence_wins(self):
        sources = [
            RawSource(url="https://a.com/1", snippet="first"),
            RawSource(url="https://a.com/2", snippet="second"),
        ]
        kept = dedupe_by_domain(sources)
        assert len(kept) == 1
        assert kept[0].snippet == "first"
