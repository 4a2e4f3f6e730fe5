"""
Fundamental Screener - Bounded Concurrent Orchestrator.

Fetches the candidate list, evaluates every candidate's fundamentals on a
bounded pool of worker threads and returns the passing companies ranked
by ROE.

Per candidate: Pending -> Admitted -> Enriching -> Evaluating ->
{Passed | Rejected | Failed | Faulted}. Only Passed adds to the result.
Failures of one candidate are logged and never abort the run; only a
failing candidate source is surfaced to the caller.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import datetime
from typing import Any, List, Optional, Tuple

from fundamental_screener import __version__
from fundamental_screener.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_screener.config.models import (
    DEFAULT_FILTER,
    FilterConfig,
    ScreenerSettings,
)
from fundamental_screener.domain.entities import (
    Candidate,
    EnrichedStockRecord,
    ScreeningResult,
)
from fundamental_screener.domain.exceptions import ScreenerError
from fundamental_screener.domain.value_objects import CandidateOutcome, CandidateReport
from fundamental_screener.interfaces.audit_logger import AuditLogger
from fundamental_screener.interfaces.candidate_source import CandidateSource
from fundamental_screener.interfaces.enricher import Enricher, RuleEvaluator
from fundamental_screener.interfaces.metrics_collector import MetricsCollector
from fundamental_screener.pipeline.admission import AdmissionGate
from fundamental_screener.pipeline.results import ResultCollection, rank_by_roe
from fundamental_screener.pipeline.run_context import RunContext
from fundamental_screener.resilience.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

# Enrichment errors that are expected data problems rather than faults
EXPECTED_ENRICHMENT_ERRORS = (ScreenerError, OSError, TimeoutError, ValueError)


class FundamentalScreener:
    """Screens candidates concurrently under a fixed worker ceiling."""

    def __init__(
        self,
        candidate_source: CandidateSource,
        enricher: Enricher,
        rule_evaluator: RuleEvaluator,
        settings: Optional[ScreenerSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize screener with all dependencies.

        Args:
            candidate_source: Upstream pre-filtered candidate list
            enricher: Builds the financial history of one candidate
            rule_evaluator: Returns the defects of one record
            settings: Worker ceiling (defaults to 64 workers)
            audit_logger: For audit trail (optional)
            metrics_collector: For performance metrics (in-memory by default)
            error_handler: Retries the candidate fetch (optional)
        """
        self.candidate_source = candidate_source
        self.enricher = enricher
        self.rule_evaluator = rule_evaluator
        self.settings = settings or ScreenerSettings()
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector or InMemoryMetricsCollector()
        self.error_handler = error_handler

    def screen_with_defaults(self, context: RunContext) -> List[EnrichedStockRecord]:
        """Screen with the default filter configuration."""
        return self.screen_with_filter(context, DEFAULT_FILTER)

    def screen_with_filter(
        self,
        context: RunContext,
        filter_config: FilterConfig,
    ) -> List[EnrichedStockRecord]:
        """Screen with the given filter and return the ranked good companies."""
        return self.run(context, filter_config).stocks

    def run(
        self,
        context: RunContext,
        filter_config: FilterConfig = DEFAULT_FILTER,
    ) -> ScreeningResult:
        """
        Execute a full screening run.

        Args:
            context: Cancellable run context
            filter_config: Pre-filter passed to the candidate source

        Returns:
            ScreeningResult with the passing records ranked by ROE

        Raises:
            Exception: Whatever the candidate source raises
            RetryExhausted: If an error handler is configured and every
                fetch attempt failed
        """
        start_time = time.perf_counter()
        self._notify(self.audit_logger, "set_correlation_id", context.correlation_id)

        candidates = self._fetch_candidates(context, filter_config)
        worker_count = min(len(candidates), self.settings.max_worker_count)
        logger.info(
            f"Screening will filter from {len(candidates)} stocks "
            f"with {worker_count} workers"
        )
        self._notify(self.audit_logger, "log_run_start", len(candidates), worker_count)

        collection = ResultCollection()
        gate: Optional[AdmissionGate] = None
        if candidates:
            gate = AdmissionGate(worker_count)
            self._fan_out(context, candidates, gate, collection)

        stocks = rank_by_roe(collection.passed())
        total_duration = time.perf_counter() - start_time
        logger.info(f"Screening selected {len(stocks)} stocks in {total_duration:.3f}s")
        if context.cancelled:
            logger.warning(f"Screening run was cancelled: {context.reason}")

        outcomes = collection.outcomes()
        self._record_metrics(len(candidates), outcomes, total_duration)
        self._notify(self.audit_logger, "log_run_end", len(stocks), total_duration, outcomes)

        return ScreeningResult(
            correlation_id=context.correlation_id,
            filter_config=filter_config,
            candidate_count=len(candidates),
            stocks=stocks,
            outcomes=outcomes,
            reports=collection.reports(),
            rejections=collection.rejections(),
            failures=collection.failures(),
            metrics=self._collect_metrics(),
            metadata=self._build_metadata(context, worker_count, gate, total_duration),
        )

    def _fetch_candidates(
        self,
        context: RunContext,
        filter_config: FilterConfig,
    ) -> List[Candidate]:
        """Fetch candidates; any error here is fatal to the run."""
        fetch_start = time.perf_counter()
        if self.error_handler:
            candidates = self.error_handler.retry(
                lambda: self.candidate_source.fetch_candidates(context, filter_config),
                operation_name="fetch_candidates",
                context=context,
            )
        else:
            candidates = self.candidate_source.fetch_candidates(context, filter_config)

        self._notify(
            self.metrics_collector,
            "record_timing",
            "fetch_candidates_seconds",
            time.perf_counter() - fetch_start,
        )
        return list(candidates)

    def _fan_out(
        self,
        context: RunContext,
        candidates: List[Candidate],
        gate: AdmissionGate,
        collection: ResultCollection,
    ) -> None:
        """Run one task per candidate, at most ``gate.capacity`` at a time."""
        futures: List[Future] = []
        with ThreadPoolExecutor(
            max_workers=gate.capacity, thread_name_prefix="screener"
        ) as executor:
            for index, candidate in enumerate(candidates):
                # Blocks the launcher until a slot frees up
                gate.acquire()
                try:
                    futures.append(
                        executor.submit(
                            self._screen_one, context, index, candidate, gate, collection
                        )
                    )
                except BaseException:
                    gate.release()
                    raise
            wait(futures)

    def _screen_one(
        self,
        context: RunContext,
        index: int,
        candidate: Candidate,
        gate: AdmissionGate,
        collection: ResultCollection,
    ) -> None:
        """Task body for one candidate. Never raises; always frees its slot."""
        task_start = time.perf_counter()
        try:
            try:
                report, record = self._evaluate(context, candidate)
            except Exception as e:
                logger.exception(
                    f"Recovered from fault while screening "
                    f"{candidate.name} {candidate.secucode}"
                )
                report = CandidateReport(
                    secucode=candidate.secucode,
                    outcome=CandidateOutcome.FAULTED,
                    error=f"{type(e).__name__}: {e}",
                )
                record = None
                self._notify(
                    self.audit_logger, "log_candidate_failed", candidate, "evaluate", report.error
                )

            report = report.model_copy(
                update={"duration_seconds": time.perf_counter() - task_start}
            )
            collection.add(index, report, record)
            self._notify(
                self.metrics_collector,
                "record_timing",
                "candidate_seconds",
                report.duration_seconds,
                {"outcome": report.outcome.value},
            )
        except Exception:
            logger.exception(
                f"Could not record the outcome of {candidate.name} {candidate.secucode}"
            )
        finally:
            gate.release()

    def _evaluate(
        self,
        context: RunContext,
        candidate: Candidate,
    ) -> Tuple[CandidateReport, Optional[EnrichedStockRecord]]:
        """Enrich and check one candidate."""
        try:
            record = self.enricher.build_record(context, candidate)
        except EXPECTED_ENRICHMENT_ERRORS as e:
            logger.error(f"build_record failed for {candidate.name} {candidate.secucode}: {e}")
            self._notify(self.audit_logger, "log_candidate_failed", candidate, "enrich", str(e))
            return (
                CandidateReport(
                    secucode=candidate.secucode,
                    outcome=CandidateOutcome.FAILED,
                    error=f"{type(e).__name__}: {e}",
                ),
                None,
            )

        defects = list(self.rule_evaluator.evaluate(context, record))
        if not defects:
            return (
                CandidateReport(secucode=record.secucode, outcome=CandidateOutcome.PASSED),
                record,
            )

        logger.info(f"{record.name} {record.secucode} has some defects: {defects}")
        self._notify(self.audit_logger, "log_candidate_rejected", record, defects)
        return (
            CandidateReport(
                secucode=record.secucode,
                outcome=CandidateOutcome.REJECTED,
                defects=defects,
            ),
            None,
        )

    def _record_metrics(
        self,
        candidate_count: int,
        outcomes: dict,
        duration: float,
    ) -> None:
        self._notify(self.metrics_collector, "record_count", "candidates_total", candidate_count)
        for outcome, count in outcomes.items():
            self._notify(
                self.metrics_collector,
                "record_count",
                "candidates_by_outcome",
                count,
                {"outcome": outcome},
            )
        self._notify(self.metrics_collector, "record_timing", "screening_total_seconds", duration)

    def _collect_metrics(self) -> dict:
        try:
            return self.metrics_collector.get_metrics()
        except Exception:
            logger.exception("Could not read metrics for the screening result")
            return {}

    def _notify(self, target: Optional[object], method: str, *args: Any) -> None:
        """Call an audit or metrics hook. A failing hook is logged and ignored."""
        if target is None:
            return
        try:
            getattr(target, method)(*args)
        except Exception:
            logger.exception(f"{type(target).__name__}.{method} failed")

    def _build_metadata(
        self,
        context: RunContext,
        worker_count: int,
        gate: Optional[AdmissionGate],
        duration: float,
    ) -> dict:
        """Build result metadata."""
        return {
            "correlation_id": context.correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "worker_count": worker_count,
            "admissions": gate.acquired if gate else 0,
            "releases": gate.released if gate else 0,
            "peak_in_flight": gate.peak_in_flight if gate else 0,
            "cancelled": context.cancelled,
            "version": __version__,
        }
