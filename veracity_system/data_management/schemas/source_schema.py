"""Evidence source schemas for the scoring core.

RawSource is the strict record that search results must be validated into
before they reach the scoring core. ScoredSource extends it with the
per-source heuristic scores; it is produced once per source and is frozen.

Per-source quality is a fixed weighted sum of the component scores, so every
ScoredSource can be re-derived from its own fields (plus the claim).
"""

from enum import Enum
from typing import Optional
from urllib.parse import urlparse

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class Stance(str, Enum):
    """Stance of a source toward the claim."""

    SUPPORTING = "supporting"
    CHALLENGING = "challenging"
    NEUTRAL = "neutral"


class SourceType(str, Enum):
    """Coarse category of the publishing site."""

    NEWS = "news"
    GOV = "gov"
    EDU = "edu"
    NGO = "ngo"
    BLOG = "blog"
    ACADEMIC = "academic"
    FACTCHECK = "factcheck"
    UNKNOWN = "unknown"


class DiscoveredVia(str, Enum):
    """Which search pass found the source. Never rewritten after discovery."""

    SEARCH = "search"
    FACTCHECK_PREFLIGHT = "factcheck-preflight"
    COUNTER_EVIDENCE = "counter-evidence"


def normalize_domain(value: str) -> str:
    """Lowercase a host and strip a leading ``www.``."""
    domain = value.strip().lower()
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


class RawSource(BaseModel):
    """Single evidence candidate as returned by the search collaborator.

    Accepts both snake_case and the camelCase keys used by the search layer
    (publishDate, sourceType, discoveredVia, credibilityScore). When domain is
    absent it is derived from the URL host.
    """

    url: str = Field(..., min_length=1, description="URL of the evidence source")
    title: Optional[str] = Field(default=None, description="Result title")
    snippet: Optional[str] = Field(default=None, description="Text excerpt from the source")
    publish_date: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("publish_date", "publishDate"),
        description="ISO-8601 publication date, unparsed",
    )
    domain: str = Field(..., min_length=1, description="Registrable host, lowercase, no www.")
    source_type: Optional[SourceType] = Field(
        default=None,
        validation_alias=AliasChoices("source_type", "sourceType"),
    )
    language: Optional[str] = Field(default=None)
    discovered_via: Optional[DiscoveredVia] = Field(
        default=None,
        validation_alias=AliasChoices("discovered_via", "discoveredVia"),
    )
    credibility_score: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("credibility_score", "credibilityScore"),
        description="Precomputed trust score; derived from domain when absent",
    )

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://www.britannica.com/science/boiling-point",
                    "title": "Boiling point | Britannica",
                    "snippet": "Water boils at 100°C (212°F) at standard atmospheric pressure.",
                    "publish_date": "2024-05-01",
                    "domain": "britannica.com",
                    "source_type": "academic",
                    "discovered_via": "search",
                }
            ]
        },
    }

    @model_validator(mode="before")
    @classmethod
    def derive_domain(cls, data):
        """Fill domain from the URL host when the caller left it out."""
        if isinstance(data, dict) and not data.get("domain") and data.get("url"):
            host = urlparse(str(data["url"])).hostname
            if host:
                data = {**data, "domain": host}
        return data

    @field_validator("domain")
    @classmethod
    def clean_domain(cls, value: str) -> str:
        domain = normalize_domain(value)
        if not domain:
            raise ValueError("domain must not be blank")
        return domain

    @field_validator("source_type", mode="before")
    @classmethod
    def unknown_source_type(cls, value):
        """Map unrecognised source type labels to UNKNOWN instead of failing."""
        if value is None or isinstance(value, SourceType):
            return value
        try:
            return SourceType(str(value).lower())
        except ValueError:
            return SourceType.UNKNOWN


class ScoredSource(RawSource):
    """RawSource plus heuristic scores. Produced exactly once per source."""

    credibility_score: float = Field(..., ge=0.0, le=1.0)
    directness_score: float = Field(..., ge=0.0, le=1.0)
    methodology_score: float = Field(..., ge=0.0, le=1.0)
    recency_score: float = Field(..., ge=0.0, le=1.0)
    stance: Stance = Field(...)
    quality_score: float = Field(..., ge=0.0, le=1.0)

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


__all__ = [
    "DiscoveredVia",
    "RawSource",
    "ScoredSource",
    "SourceType",
    "Stance",
    "normalize_domain",
]
