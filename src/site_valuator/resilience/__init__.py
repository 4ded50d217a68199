"""
Resilience Package - Failure Boundary.

Every estimation failure is returned as a FailedEstimation record instead of
propagating to the caller.
"""

from site_valuator.resilience.error_handler import (
    ErrorHandler,
    EstimationFailure,
    FailureStats,
)

__all__ = [
    "ErrorHandler",
    "EstimationFailure",
    "FailureStats",
]
