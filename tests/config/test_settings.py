"""Tests for Settings and ScoringConfig loading."""

import pytest
from pydantic import ValidationError

from veracity_system.config.settings import ScoringConfig, Settings, load_scoring_config
from veracity_system.config.source_credibility import DEFAULT_FACTCHECK_DOMAINS
from veracity_system.errors import ConfigurationError


class TestSettings:
    """Tests for environment-backed settings."""

    def test_defaults(self, monkeypatch):
        for name in ("EQS_TOP_N", "FACTCHECK_DOMAINS", "SCORING_VARIANT", "SOURCE_CAP"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.eqs_top_n == 5
        assert settings.scoring_variant == "canonical"
        assert settings.source_cap == 12
        assert settings.factcheck_domain_list() == DEFAULT_FACTCHECK_DOMAINS

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("EQS_TOP_N", "3")
        monkeypatch.setenv("FACTCHECK_DOMAINS", "FullFact.org, snopes.com ,")
        settings = Settings(_env_file=None)
        assert settings.eqs_top_n == 3
        assert settings.factcheck_domain_list() == ("fullfact.org", "snopes.com")


class TestLoadScoringConfig:
    """Tests for load_scoring_config."""

    def test_builds_config(self):
        config = load_scoring_config(
            Settings(_env_file=None, eqs_top_n=7, scoring_variant="LEGACY", factcheck_domains="a.org")
        )
        assert config.top_n == 7
        assert config.variant == "legacy"
        assert config.factcheck_domains == ("a.org",)

    def test_invalid_top_n(self):
        with pytest.raises(ConfigurationError):
            load_scoring_config(Settings(_env_file=None, eqs_top_n=0))

    def test_unknown_variant(self):
        with pytest.raises(ConfigurationError):
            load_scoring_config(Settings(_env_file=None, scoring_variant="experimental"))


class TestScoringConfig:
    """Tests for the immutable ScoringConfig."""

    def test_defaults(self):
        config = ScoringConfig()
        assert config.top_n == 5
        assert config.variant == "canonical"
        assert config.high_credibility_threshold == 0.8
        assert config.high_directness_threshold == 0.7

    def test_frozen(self):
        config = ScoringConfig()
        with pytest.raises(ValidationError):
            config.top_n = 10

    def test_list_domains_coerced_to_tuple(self):
        assert ScoringConfig(factcheck_domains=["a.org"]).factcheck_domains == ("a.org",)
