"""
Estimation Package - Pure Valuation Functions.

    Domain string -> normalize -> derive metrics -> weighted value formula

plus the independent revenue multiple model. Nothing here logs results,
sleeps or keeps state; orchestration lives in the pipeline package.
"""

from site_valuator.estimation.metric_estimators import (
    RandomSource,
    derive_metrics,
    estimate_domain_age,
    estimate_domain_authority,
    estimate_traffic,
)
from site_valuator.estimation.normalizer import extract_extension, normalize_domain
from site_valuator.estimation.revenue_model import (
    calculate_revenue,
    default_inputs,
    scan_visitors,
)
from site_valuator.estimation.value_formula import (
    calculate_breakdown,
    calculate_value,
    extension_bonus,
    length_bonus,
)

__all__ = [
    "RandomSource",
    "derive_metrics",
    "estimate_domain_age",
    "estimate_domain_authority",
    "estimate_traffic",
    "extract_extension",
    "normalize_domain",
    "calculate_revenue",
    "default_inputs",
    "scan_visitors",
    "calculate_breakdown",
    "calculate_value",
    "extension_bonus",
    "length_bonus",
]
