"""Claim analysis orchestration and source intake."""

from veracity_system.pipeline.analysis_pipeline import AnalysisPipeline
from veracity_system.pipeline.source_intake import (
    build_raw_sources,
    dedupe_by_domain,
    domain_of,
    validate_claim,
)

__all__ = [
    "AnalysisPipeline",
    "build_raw_sources",
    "dedupe_by_domain",
    "domain_of",
    "validate_claim",
]
