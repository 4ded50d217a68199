"""
Console Audit Logger.

A simple audit logger that prints one line per estimation event.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log all events. If False, only outcomes.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_estimation_start(
        self,
        domain_or_url: Optional[str],
        strategy: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._log("INFO", f"Analyzing {domain_or_url!r} with {strategy}")

    def log_estimation_end(
        self,
        domain: str,
        estimated_value: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(
            "INFO",
            f"Estimated {domain}: ${estimated_value:,} ({duration_seconds:.3f}s)",
        )

    def log_failure(
        self,
        domain_or_url: Optional[str],
        reason: str,
    ) -> None:
        self._log("WARN", f"Estimation failed for {domain_or_url!r}: {reason}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
