"""
Pipeline Package - Estimation Orchestration.

    - ValuationPipeline: Validation, delay, strategy, failure boundary
    - estimate: One-shot convenience entry point
"""

from site_valuator.pipeline.valuation_pipeline import ValuationPipeline, estimate

__all__ = [
    "ValuationPipeline",
    "estimate",
]
