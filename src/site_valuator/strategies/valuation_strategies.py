"""
Valuation Strategies - Named, Independent Valuation Models.

Provides Strategy Pattern implementations:
    - HeuristicValuationStrategy: known-domain tables plus randomized
      fallbacks fed into the weighted value formula (canonical)
    - RevenueMultipleStrategy: monthly revenue x multiple, driven by
      visitor and RPM sliders

Design Notes:
    - The two models never share constants
    - Randomness comes from an injected source
    - Configuration injected via constructor
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from site_valuator.config.models import HeuristicStrategyConfig, RevenueStrategyConfig
from site_valuator.domain.entities import (
    RevenueValuationResult,
    StrategyName,
    ValuationResult,
)
from site_valuator.domain.value_objects import RevenueInputs, RevenueValuation
from site_valuator.estimation.metric_estimators import RandomSource, derive_metrics
from site_valuator.estimation.normalizer import normalize_domain
from site_valuator.estimation.revenue_model import (
    calculate_revenue,
    default_inputs,
    scan_visitors,
)
from site_valuator.estimation.value_formula import calculate_breakdown, round_half_up
from site_valuator.validation.request_validator import RequestValidator

logger = logging.getLogger(__name__)


class ValuationStrategy(Protocol):
    """Strategy protocol for domain valuation models."""

    @property
    def name(self) -> str:
        ...

    @property
    def analysis_delay_seconds(self) -> float:
        ...

    def estimate(self, domain_or_url: str) -> Any:
        """
        Estimate the value of a domain.

        Args:
            domain_or_url: Raw input; the strategy normalizes it

        Returns:
            A result record with domain and estimated_value
        """
        ...


class HeuristicValuationStrategy:
    """Known-domain lookups and randomized heuristics."""

    def __init__(
        self,
        config: Optional[HeuristicStrategyConfig] = None,
        rng: Optional[RandomSource] = None,
        currency: str = "USD",
    ) -> None:
        self.config = config or HeuristicStrategyConfig()
        self.rng = rng
        self.currency = currency

    @property
    def name(self) -> str:
        return StrategyName.HEURISTIC.value

    @property
    def analysis_delay_seconds(self) -> float:
        return self.config.analysis_delay_seconds

    def estimate(self, domain_or_url: str) -> ValuationResult:
        domain = normalize_domain(domain_or_url)
        metrics = derive_metrics(domain, self.rng)
        breakdown = calculate_breakdown(metrics)

        logger.debug(
            f"Heuristic value for {domain!r}: ${breakdown.estimated_value:,} "
            f"(multiplier x{breakdown.popularity_multiplier})"
        )

        return ValuationResult(
            domain=domain,
            estimated_value=breakdown.estimated_value,
            metrics=metrics,
            breakdown=breakdown,
            currency=self.currency,
            strategy=self.name,
        )


class RevenueMultipleStrategy:
    """
    Revenue multiple valuation.

    Scanning a domain simulates a visitor count; RPM and multiple keep their
    configured slider positions. recalculate() serves slider changes, which
    need no domain at all.
    """

    def __init__(
        self,
        config: Optional[RevenueStrategyConfig] = None,
        rng: Optional[RandomSource] = None,
        currency: str = "USD",
    ) -> None:
        self.config = config or RevenueStrategyConfig()
        self.rng = rng
        self.currency = currency

    @property
    def name(self) -> str:
        return StrategyName.REVENUE_MULTIPLE.value

    @property
    def analysis_delay_seconds(self) -> float:
        return self.config.analysis_delay_seconds

    def estimate(self, domain_or_url: str) -> RevenueValuationResult:
        domain = normalize_domain(domain_or_url)
        visitors = scan_visitors(self.rng, self.config)
        inputs = default_inputs(self.config).model_copy(
            update={"monthly_visitors": visitors}
        )
        revenue = calculate_revenue(inputs)

        logger.debug(
            f"Revenue value for {domain!r}: visitors={visitors:,}, "
            f"monthly=${revenue.monthly_revenue:,.2f}, value=${revenue.website_value:,.0f}"
        )

        return RevenueValuationResult(
            domain=domain,
            estimated_value=round_half_up(revenue.website_value),
            inputs=inputs,
            revenue=revenue,
            currency=self.currency,
            strategy=self.name,
        )

    def recalculate(self, inputs: RevenueInputs) -> RevenueValuation:
        """
        Recompute revenue for new slider positions.

        Raises:
            ValidationError: If a slider value is outside its configured range
        """
        RequestValidator().validate_revenue_inputs(inputs, self.config)
        return calculate_revenue(inputs)
