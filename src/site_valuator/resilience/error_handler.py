"""
Error Handler - Failure Boundary for Estimations.

Provides:
    - EstimationFailure, the single error kind of the estimator
    - Conversion of any failure into a FailedEstimation record

Design Notes:
    - No retries: a failure is recoverable by resubmitting
    - No partial results
    - The original, unnormalized input is kept on the failure record
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, Union

from site_valuator.domain.entities import GENERIC_ERROR_MESSAGE, FailedEstimation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EstimationFailure(Exception):
    """Raised when an estimation cannot produce a result."""

    def __init__(self, reason: str, domain: Optional[str] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.domain = domain


@dataclass
class FailureStats:
    """Counters kept by an ErrorHandler."""
    total_calls: int = 0
    failures: int = 0
    unexpected_errors: int = 0

    @property
    def failure_rate(self) -> float:
        """Failures as a fraction of calls (0.0 to 1.0)."""
        if self.total_calls == 0:
            return 0.0
        return self.failures / self.total_calls


class ErrorHandler:
    """Runs estimations and turns every failure into a FailedEstimation."""

    def __init__(self, error_message: str = GENERIC_ERROR_MESSAGE) -> None:
        self.error_message = error_message
        self.stats = FailureStats()

    def guard(
        self,
        func: Callable[[], T],
        domain_or_url: Optional[str],
        strategy: Optional[str] = None,
    ) -> Union[T, FailedEstimation]:
        """
        Execute an estimation, never raising past this call.

        Args:
            func: Estimation to run
            domain_or_url: Original user input, kept on failure
            strategy: Strategy name for the failure record

        Returns:
            The estimation result, or a FailedEstimation
        """
        self.stats.total_calls += 1
        try:
            return func()
        except EstimationFailure as e:
            self.stats.failures += 1
            logger.warning(f"Estimation failed for {domain_or_url!r}: {e.reason}")
            return self.to_failure(e, domain_or_url, strategy)
        except Exception as e:
            self.stats.failures += 1
            self.stats.unexpected_errors += 1
            logger.exception(f"Unexpected error estimating {domain_or_url!r}")
            wrapped = EstimationFailure(f"{type(e).__name__}: {e}", domain_or_url)
            return self.to_failure(wrapped, domain_or_url, strategy)

    def to_failure(
        self,
        error: EstimationFailure,
        domain_or_url: Optional[str],
        strategy: Optional[str] = None,
    ) -> FailedEstimation:
        """Build the failure record for an EstimationFailure."""
        return FailedEstimation(
            domain=domain_or_url,
            error=self.error_message,
            reason=error.reason,
            strategy=None if strategy is None else str(strategy),
        )

    def reset(self) -> None:
        """Reset failure counters."""
        self.stats = FailureStats()
