"""
Core Domain Entities.

This module defines the request and result records of the Site Valuator.
A result is created fresh for every estimation request and never outlives
the request/response cycle.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from site_valuator.domain.value_objects import (
    DomainMetrics,
    RevenueInputs,
    RevenueValuation,
    ValueBreakdown,
)


GENERIC_ERROR_MESSAGE = "Unable to calculate value"


class StrategyName(str, Enum):
    """Names of the built-in valuation strategies."""

    HEURISTIC = "heuristic"
    REVENUE_MULTIPLE = "revenue_multiple"


class EstimationRequest(BaseModel):
    """Input for a single estimation."""

    domain_or_url: Optional[str] = Field(
        default=None, description="Raw user input, possibly with protocol prefix"
    )
    strategy: str = Field(default=StrategyName.HEURISTIC.value)
    correlation_id: str = Field(..., description="Unique request identifier")

    model_config = {"frozen": True}


class ValuationResult(BaseModel):
    """Successful heuristic estimation."""

    domain: str = Field(..., description="Normalized domain")
    estimated_value: int = Field(..., ge=0)
    metrics: DomainMetrics
    breakdown: Optional[ValueBreakdown] = None
    currency: str = "USD"
    last_updated: datetime = Field(default_factory=datetime.now)
    strategy: str = StrategyName.HEURISTIC.value

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return True


class RevenueValuationResult(BaseModel):
    """Successful revenue multiple estimation."""

    domain: str = Field(..., description="Normalized domain")
    estimated_value: int
    inputs: RevenueInputs
    revenue: RevenueValuation
    currency: str = "USD"
    last_updated: datetime = Field(default_factory=datetime.now)
    strategy: str = StrategyName.REVENUE_MULTIPLE.value

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return True


class FailedEstimation(BaseModel):
    """Failure marker returned instead of raising past the pipeline."""

    domain: Any = Field(
        default=None, description="Original input, kept as given"
    )
    error: str = GENERIC_ERROR_MESSAGE
    reason: str = ""
    strategy: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return False


EstimationOutcome = Union[ValuationResult, RevenueValuationResult, FailedEstimation]
