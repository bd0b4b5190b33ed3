"""Claim analysis pipeline: intake -> credibility -> scoring -> presentation.

Wires the scoring core to its collaborators' data. Search results come in
as raw records, the report goes out to persistence and presentation. The
pipeline itself does no I/O.

The scoring core is synchronous. analyze_async() runs it in a worker thread
under the caller's timeout budget; the core has no cancellation points of
its own.

Usage:
    from veracity_system.pipeline import AnalysisPipeline

    pipeline = AnalysisPipeline()
    report = pipeline.analyze(claim, search_results)
    report = await pipeline.analyze_async(claim, search_results, timeout_s=10)
"""

import asyncio
from datetime import datetime
from typing import Optional, Sequence

from veracity_system.config.settings import ScoringConfig, load_scoring_config, settings
from veracity_system.data_management.schemas import AnalysisReport, RawSource
from veracity_system.pipeline.source_intake import (
    SourceRecord,
    build_raw_sources,
    validate_claim,
)
from veracity_system.planning import ClaimPlanner
from veracity_system.reporting import to_veracity
from veracity_system.sifters.aggregation import score_evidence
from veracity_system.sifters.credibility import CredibilityEstimator
from veracity_system.sifters.text import detect_language, normalize_language
from veracity_system.utils.logging import get_correlation_id, get_structured_logger


class AnalysisPipeline:
    """Runs one claim analysis end to end.

    Credibility is assessed for each source before scoring, so persisted
    ScoredSources always carry a derived score.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        source_cap: Optional[int] = None,
        planner: Optional[ClaimPlanner] = None,
        credibility_estimator: Optional[CredibilityEstimator] = None,
    ) -> None:
        """Initialize AnalysisPipeline.

        Args:
            config: Scoring tunables. Loaded from settings if None.
            source_cap: Max sources after de-duplication (settings default).
            planner: Claim planner. Built from the config if None.
            credibility_estimator: Estimator used during assessment.
        """
        self.config = config or load_scoring_config()
        self.source_cap = source_cap or settings.source_cap
        self.planner = planner or ClaimPlanner(self.config.factcheck_domains)
        self.credibility = credibility_estimator or CredibilityEstimator(
            factcheck_domains=self.config.factcheck_domains
        )

    def analyze(
        self,
        claim: str,
        records: Sequence[SourceRecord],
        language: Optional[str] = None,
        analysis_id: Optional[str] = None,
        now: Optional[datetime] = None,
        is_paid: bool = False,
    ) -> AnalysisReport:
        """
        Analyze a claim against search results.

        Args:
            claim: Claim text.
            records: Raw search results (dicts or RawSource).
            language: Claim language code. Detected from the claim if None.
            analysis_id: Request ID; generated if None.
            now: Reference time for recency scoring.
            is_paid: Reserved for tiering.

        Returns:
            AnalysisReport with aggregate, veracity verdict and claim analysis.

        Raises:
            InputError: If the claim is empty or a record is malformed.
        """
        analysis_id = analysis_id or get_correlation_id()
        log = get_structured_logger(
            __name__, analysis_id=analysis_id, component="AnalysisPipeline"
        )

        claim = validate_claim(claim)
        if language is None:
            language = detect_language(claim)
        else:
            language = normalize_language(language)
        sources = build_raw_sources(records, self.config.factcheck_domains, self.source_cap)
        log.info(
            "sources_accepted",
            received=len(records),
            accepted=len(sources),
            language=language,
        )

        assessed = [self._assess(source) for source in sources]
        aggregate = score_evidence(
            claim, language, assessed, config=self.config, now=now, is_paid=is_paid
        )
        veracity = to_veracity(aggregate.eqs, len(aggregate.sources_with_scores))

        log.info(
            "analysis_complete",
            eqs=aggregate.eqs,
            sdi=aggregate.sdi,
            veracity=veracity.score,
            label=veracity.label,
        )

        return AnalysisReport(
            analysis_id=analysis_id,
            claim=claim,
            language=language,
            claim_analysis=self.planner.analyze(claim),
            aggregate=aggregate,
            veracity=veracity,
        )

    async def analyze_async(
        self,
        claim: str,
        records: Sequence[SourceRecord],
        language: Optional[str] = None,
        analysis_id: Optional[str] = None,
        timeout_s: Optional[float] = None,
        now: Optional[datetime] = None,
        is_paid: bool = False,
    ) -> AnalysisReport:
        """Run analyze() in a worker thread under a timeout.

        Raises:
            asyncio.TimeoutError: If the budget (settings default) is exceeded.
            InputError: As analyze().
        """
        budget = timeout_s if timeout_s is not None else settings.analysis_timeout_s
        return await asyncio.wait_for(
            asyncio.to_thread(
                self.analyze, claim, records, language, analysis_id, now, is_paid
            ),
            timeout=budget,
        )

    def _assess(self, source: RawSource) -> RawSource:
        """Attach a credibility score unless the collaborator already supplied one."""
        if source.credibility_score is not None:
            return source
        score = self.credibility.estimate(
            source.domain, source.source_type, source.discovered_via
        )
        return source.model_copy(update={"credibility_score": score})


__all__ = ["AnalysisPipeline"]
