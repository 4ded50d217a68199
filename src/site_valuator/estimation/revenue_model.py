"""
Revenue Multiple Model.

A standalone valuation driven by two sliders, monthly visitors and revenue
per thousand visitors (RPM):

    monthly revenue = visitors / 1000 x RPM
    website value   = monthly revenue x multiple

Domain heuristics play no part here. The constants of this model are kept
separate from the heuristic value formula.
"""

from __future__ import annotations

from typing import Optional

from site_valuator.config.models import RevenueStrategyConfig
from site_valuator.domain.value_objects import RevenueInputs, RevenueValuation
from site_valuator.estimation.metric_estimators import RandomSource, resolve_rng

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12


def calculate_revenue(inputs: RevenueInputs) -> RevenueValuation:
    """Compute daily, monthly and yearly revenue plus the website value."""
    monthly_revenue = (inputs.monthly_visitors / 1000) * inputs.revenue_per_thousand
    return RevenueValuation(
        monthly_revenue=monthly_revenue,
        daily_revenue=monthly_revenue / DAYS_PER_MONTH,
        yearly_revenue=monthly_revenue * MONTHS_PER_YEAR,
        website_value=monthly_revenue * inputs.multiple,
    )


def default_inputs(config: Optional[RevenueStrategyConfig] = None) -> RevenueInputs:
    """Slider positions before any domain is scanned."""
    config = config or RevenueStrategyConfig()
    return RevenueInputs(
        monthly_visitors=config.default_monthly_visitors,
        revenue_per_thousand=config.default_revenue_per_thousand,
        multiple=config.default_multiple,
    )


def scan_visitors(
    rng: Optional[RandomSource] = None,
    config: Optional[RevenueStrategyConfig] = None,
) -> int:
    """Simulated visitor count for a scanned domain, uniform in the scan range."""
    config = config or RevenueStrategyConfig()
    return resolve_rng(rng).randint(
        config.scan_min_visitors, config.scan_max_visitors
    )
