"""
Domain Layer - Request, Result and Metric Records.

Entities:
    - EstimationRequest: One estimation call
    - ValuationResult: Heuristic estimation outcome
    - RevenueValuationResult: Revenue multiple estimation outcome
    - FailedEstimation: Failure marker carrying the original input

Value Objects:
    - DomainMetrics: Age, traffic, authority, length, extension
    - ValueBreakdown: Components of the heuristic formula
    - RevenueInputs / RevenueValuation: Revenue multiple model

All records are frozen Pydantic models.
"""

from site_valuator.domain.entities import (
    EstimationOutcome,
    EstimationRequest,
    FailedEstimation,
    RevenueValuationResult,
    StrategyName,
    ValuationResult,
)
from site_valuator.domain.value_objects import (
    DomainMetrics,
    RevenueInputs,
    RevenueValuation,
    ValueBreakdown,
)

__all__ = [
    "EstimationOutcome",
    "EstimationRequest",
    "FailedEstimation",
    "RevenueValuationResult",
    "StrategyName",
    "ValuationResult",
    "DomainMetrics",
    "RevenueInputs",
    "RevenueValuation",
    "ValueBreakdown",
]
