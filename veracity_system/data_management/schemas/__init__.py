"""Schema package for evidence sources, aggregates and analysis reports.

Primary exports:
- RawSource: validated search result entering the scoring core
- ScoredSource: RawSource plus heuristic scores (frozen)
- AggregateResult: EQS, SDI and consensus for one claim (frozen)
- AnalysisReport: aggregate plus veracity verdict for presentation

Usage:
    from veracity_system.data_management.schemas import RawSource
    source = RawSource(url="https://www.britannica.com/x", snippet="...")
    assert source.domain == "britannica.com"
"""

from veracity_system.data_management.schemas.source_schema import (
    DiscoveredVia,
    RawSource,
    ScoredSource,
    SourceType,
    Stance,
    normalize_domain,
)
from veracity_system.data_management.schemas.analysis_schema import (
    AggregateResult,
    AnalysisReport,
    ClaimAnalysis,
    ClaimType,
    Consensus,
    SearchPlan,
    VeracityVerdict,
)

__all__ = [
    "AggregateResult",
    "AnalysisReport",
    "ClaimAnalysis",
    "ClaimType",
    "Consensus",
    "DiscoveredVia",
    "RawSource",
    "ScoredSource",
    "SearchPlan",
    "SourceType",
    "Stance",
    "VeracityVerdict",
    "normalize_domain",
]
