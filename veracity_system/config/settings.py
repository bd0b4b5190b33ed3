"""Application settings using Pydantic BaseSettings for environment variable management.

Environment-style tunables (top-N, fact-checker domains, timeouts) are read
here once. Scoring code never reads them directly: it receives an immutable
ScoringConfig built by load_scoring_config().
"""

from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from veracity_system.config.source_credibility import DEFAULT_FACTCHECK_DOMAINS
from veracity_system.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        eqs_top_n: Number of most direct sources reduced into the EQS
        factcheck_domains: Comma-separated fact-checker allow-list (empty = built-in list)
        factcheck_timeout_ms: Budget for the fact-check preflight search (collaborator)
        analysis_timeout_s: Overall per-request budget for the analysis pipeline
        scoring_variant: "canonical" (well-established-fact boost) or "legacy"
        source_cap: Maximum number of de-duplicated sources accepted per request
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
    """

    eqs_top_n: int = Field(
        default=5,
        description="Top-N sources (by directness) used for the EQS"
    )
    factcheck_domains: str = Field(
        default="",
        description="Comma-separated fact-checker domains; empty uses built-in list"
    )
    factcheck_timeout_ms: int = Field(
        default=4000,
        description="Fact-check preflight timeout in milliseconds"
    )
    analysis_timeout_s: float = Field(
        default=30.0,
        description="Per-request analysis timeout in seconds"
    )
    scoring_variant: str = Field(
        default="canonical",
        description="Scoring algorithm: canonical or legacy"
    )
    source_cap: int = Field(
        default=12,
        description="Maximum sources kept after domain de-duplication"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def factcheck_domain_list(self) -> tuple[str, ...]:
        """Parse FACTCHECK_DOMAINS, falling back to the built-in list."""
        raw = self.factcheck_domains.strip()
        if not raw:
            return DEFAULT_FACTCHECK_DOMAINS
        return tuple(d.strip().lower() for d in raw.split(",") if d.strip())


class ScoringConfig(BaseModel):
    """Immutable tunables passed explicitly into the scoring entry point.

    Attributes:
        top_n: Sources (by directness) reduced into the EQS
        factcheck_domains: Fact-checker allow-list used for the credibility floor
        variant: Which scoring algorithm to run
        high_credibility_threshold: Credibility counted as "high" by the EQS floors
        high_directness_threshold: Directness counted as "high" by the EQS floors
    """

    top_n: int = Field(default=5, ge=1)
    factcheck_domains: tuple[str, ...] = Field(default=DEFAULT_FACTCHECK_DOMAINS)
    variant: Literal["canonical", "legacy"] = "canonical"
    high_credibility_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    high_directness_threshold: float = Field(default=0.7, ge=0.0, le=1.0)

    model_config = {"frozen": True}


def load_scoring_config(source: Settings | None = None) -> ScoringConfig:
    """
    Build a ScoringConfig from settings.

    Args:
        source: Settings to read (defaults to the module singleton)

    Returns:
        Frozen ScoringConfig

    Raises:
        ConfigurationError: If a tunable is out of range or unknown
    """
    source = source or settings
    try:
        return ScoringConfig(
            top_n=source.eqs_top_n,
            factcheck_domains=source.factcheck_domain_list(),
            variant=source.scoring_variant.lower(),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid scoring configuration: {e}") from e


# Singleton instance - import this throughout the application
settings = Settings()
