"""Aggregate and report schemas for one claim-analysis request.

AggregateResult is derived, never stored independently of the sources that
produced it: eqs and sdi must be reproducible from sources_with_scores and
the claim. It is frozen once built and persisted as a snapshot.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from veracity_system.data_management.schemas.source_schema import ScoredSource


class ClaimType(str, Enum):
    """Domain category of a claim, used to bias queries and domain allow-lists."""

    SCIENTIFIC = "scientific"
    MEDICAL = "medical"
    HISTORICAL = "historical"
    POLITICAL = "political"
    GENERAL = "general"


class Consensus(BaseModel):
    """Stance tally over every scored source (not just the top-N)."""

    supporting: int = Field(default=0, ge=0)
    challenging: int = Field(default=0, ge=0)
    neutral: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @property
    def total(self) -> int:
        return self.supporting + self.challenging + self.neutral


class AggregateResult(BaseModel):
    """Evidence Quality Score, Source Diversity Index and consensus for a claim."""

    eqs: int = Field(..., ge=0, le=100, description="Evidence Quality Score")
    sdi: int = Field(..., ge=0, le=10, description="Source Diversity Index")
    sources_with_scores: list[ScoredSource] = Field(default_factory=list)
    consensus: Consensus = Field(default_factory=Consensus)
    well_established_fact: bool = Field(
        default=False,
        description="Claim matched a well-established fact pattern",
    )
    eqs_floor: Optional[int] = Field(
        default=None,
        description="Floor applied by the well-established-fact boost, if any",
    )
    variant: str = Field(default="canonical", description="Scoring algorithm used")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "eqs": 85,
                    "sdi": 2,
                    "sources_with_scores": [],
                    "consensus": {"supporting": 1, "challenging": 0, "neutral": 0},
                    "well_established_fact": True,
                    "eqs_floor": 85,
                    "variant": "canonical",
                }
            ]
        },
    }


class ClaimAnalysis(BaseModel):
    """Claim category plus the keyword and context terms used to build queries."""

    claim_type: ClaimType
    keywords: list[str] = Field(default_factory=list)
    context: list[str] = Field(default_factory=list)


class SearchPlan(BaseModel):
    """Queries and domain allow-lists handed to the search collaborator.

    The planner only builds the plan; executing it is the collaborator's job.
    """

    claim: str
    analysis: ClaimAnalysis
    fact_check_query: str = Field(..., description="Query for the fact-check preflight pass")
    general_query: str = Field(..., description="Query for the general search pass")
    counter_query: str = Field(..., description="Query for the counter-evidence pass")
    preferred_domains: list[str] = Field(
        default_factory=list,
        description="Base + claim-type domains worth including in search",
    )
    fact_check_domains: list[str] = Field(
        default_factory=list,
        description="Domains searched during the fact-check preflight",
    )


class VeracityVerdict(BaseModel):
    """Presentation bucket for an EQS."""

    score: int = Field(..., ge=0, le=100, description="Bucketed veracity score")
    label: str = Field(..., description="Short machine-friendly label")
    summary: str = Field(..., description="Human-readable summary sentence")


class AnalysisReport(BaseModel):
    """Everything the persistence and presentation collaborators need."""

    analysis_id: str
    claim: str
    language: str
    claim_analysis: ClaimAnalysis
    aggregate: AggregateResult
    veracity: VeracityVerdict


__all__ = [
    "AggregateResult",
    "AnalysisReport",
    "ClaimAnalysis",
    "ClaimType",
    "Consensus",
    "SearchPlan",
    "VeracityVerdict",
]
