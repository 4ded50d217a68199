"""
Site Valuator - Hypothetical Website Value Estimation.

Estimates a monetary value for a website domain with one of two
independent, named strategies:
    - heuristic: known-domain tables plus randomized fallback metrics,
      combined by a weighted value formula (default)
    - revenue_multiple: monthly revenue from visitors and RPM, times a
      multiple

Main Components:
    - domain: Result records and metric value objects
    - estimation: Pure functions (normalize, metrics, formulas)
    - strategies: The two valuation models
    - registry: Name -> strategy lookup
    - pipeline: Orchestration and the estimate() entry point
    - adapters: Audit logging, metrics, display formatting
    - config: Configuration models and loaders

Example:
    >>> from site_valuator import estimate
    >>> result = estimate("https://www.example.com")
    >>> print(result.domain, result.estimated_value)

"""

import logging

from site_valuator.pipeline.valuation_pipeline import ValuationPipeline, estimate

__version__ = "1.0.0"

__all__ = ["ValuationPipeline", "configure_logging", "estimate"]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Site Valuator.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import site_valuator
        >>> site_valuator.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("site_valuator").setLevel(level)
