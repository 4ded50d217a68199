"""
Valuation Pipeline - Main Orchestrator.

The ValuationPipeline coordinates one estimation request:
validation, artificial analysis delay, strategy execution behind the
failure boundary, audit logging and metrics.
"""

from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Any, Callable, Dict, Optional, Protocol

import pydantic

from site_valuator.config.models import ValuationConfig
from site_valuator.domain.entities import (
    EstimationOutcome,
    EstimationRequest,
    FailedEstimation,
)
from site_valuator.registry.strategy_registry import (
    StrategyRegistry,
    create_default_registry,
)
from site_valuator.resilience.error_handler import ErrorHandler, EstimationFailure
from site_valuator.validation.request_validator import (
    RequestValidator,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_estimation_start(
        self, domain_or_url: Optional[str], strategy: str, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_estimation_end(
        self,
        domain: str,
        estimated_value: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_failure(self, domain_or_url: Optional[str], reason: str) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(self, name: str, value: int = 1, tags: Optional[Dict] = None) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class ValuationPipeline:
    """Main orchestrator for estimation requests."""

    def __init__(
        self,
        config: Optional[ValuationConfig] = None,
        registry: Optional[StrategyRegistry] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        error_handler: Optional[ErrorHandler] = None,
        request_validator: Optional[RequestValidator] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize pipeline with its dependencies.

        Args:
            config: Valuation configuration (defaults if None)
            registry: Strategy registry (built from config if None)
            audit_logger: For the per-request audit trail (optional)
            metrics_collector: For timings and counts (optional)
            error_handler: Failure boundary (default ErrorHandler)
            request_validator: Input validation (validator built from registry)
            sleep: Used for the artificial analysis delay
        """
        self.config = config or ValuationConfig()
        if registry is None:
            seed = self.config.global_settings.random_seed
            rng = random.Random(seed) if seed is not None else None
            registry = create_default_registry(self.config, rng=rng)
        self.registry = registry
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.error_handler = error_handler or ErrorHandler()
        self.request_validator = request_validator or RequestValidator(
            self.registry.names(enabled_only=False)
        )
        self._sleep = sleep

    def estimate(
        self,
        domain_or_url: Optional[str],
        strategy: Optional[str] = None,
    ) -> EstimationOutcome:
        """
        Estimate the value of a domain.

        Never raises: every failure is returned as a FailedEstimation that
        carries the original input.

        Args:
            domain_or_url: Raw user input
            strategy: Strategy name (config default if None)

        Returns:
            ValuationResult, RevenueValuationResult or FailedEstimation
        """
        start_time = time.perf_counter()
        strategy_name = strategy or self.config.global_settings.default_strategy
        correlation_id = str(uuid.uuid4())
        self._audit("set_correlation_id", correlation_id)
        self._audit("log_estimation_start", domain_or_url, strategy_name)

        result = self.error_handler.guard(
            lambda: self._run(domain_or_url, strategy_name, correlation_id),
            domain_or_url,
            strategy=strategy_name,
        )

        duration = time.perf_counter() - start_time
        self._record(result, strategy_name, duration)
        return result

    def _run(
        self,
        domain_or_url: Optional[str],
        strategy_name: str,
        correlation_id: str,
    ) -> EstimationOutcome:
        """Build and validate the request, pause, then run the strategy."""
        try:
            request = EstimationRequest(
                domain_or_url=domain_or_url,
                strategy=strategy_name,
                correlation_id=correlation_id,
            )
        except pydantic.ValidationError as e:
            reason = "; ".join(err["msg"] for err in e.errors())
            raise EstimationFailure(reason, domain_or_url) from e

        try:
            self.request_validator.validate(request)
        except ValidationError as e:
            raise EstimationFailure(e.message, request.domain_or_url) from e

        try:
            strategy = self.registry.get_strategy(request.strategy)
        except KeyError as e:
            raise EstimationFailure(str(e.args[0]), request.domain_or_url) from e

        delay = strategy.analysis_delay_seconds
        if delay > 0:
            logger.debug(f"Analyzing {request.domain_or_url!r} for {delay:.1f}s")
            self._sleep(delay)

        return strategy.estimate(request.domain_or_url)

    def _record(
        self,
        result: EstimationOutcome,
        strategy_name: str,
        duration: float,
    ) -> None:
        tags = {"strategy": strategy_name}
        outcome = "success" if result.is_success else "failure"

        self._collect("record_timing", "estimation_duration_seconds", duration, tags)
        self._collect("record_count", "estimations_total", 1, {**tags, "outcome": outcome})

        if isinstance(result, FailedEstimation):
            self._audit("log_failure", result.domain, result.reason)
        else:
            self._audit(
                "log_estimation_end", result.domain, result.estimated_value, duration
            )

    # Observability adapters must not turn a finished estimation into an error
    def _audit(self, method: str, *args: Any) -> None:
        if self.audit_logger is None:
            return
        try:
            getattr(self.audit_logger, method)(*args)
        except Exception:
            logger.exception(f"Audit logger failed in {method}")

    def _collect(self, method: str, *args: Any) -> None:
        if self.metrics_collector is None:
            return
        try:
            getattr(self.metrics_collector, method)(*args)
        except Exception:
            logger.exception(f"Metrics collector failed in {method}")


def estimate(
    domain_or_url: Optional[str],
    strategy: Optional[str] = None,
    config: Optional[ValuationConfig] = None,
) -> EstimationOutcome:
    """
    Convenience function: estimate with a default pipeline.

    Example:
        >>> result = estimate("https://www.google.com")
        >>> result.estimated_value
        2700103500
    """
    return ValuationPipeline(config=config).estimate(domain_or_url, strategy)
