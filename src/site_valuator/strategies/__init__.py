"""
Strategies Package - Named Valuation Models.

    - heuristic: HeuristicValuationStrategy (default)
    - revenue_multiple: RevenueMultipleStrategy
"""

from site_valuator.strategies.valuation_strategies import (
    HeuristicValuationStrategy,
    RevenueMultipleStrategy,
    ValuationStrategy,
)

__all__ = [
    "HeuristicValuationStrategy",
    "RevenueMultipleStrategy",
    "ValuationStrategy",
]
