"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - ValuationConfig: Root configuration object
    - GlobalConfig: Default strategy, currency, random seed
    - HeuristicStrategyConfig: Analysis delay for the heuristic model
    - RevenueStrategyConfig: Slider defaults and bounds for the revenue model
"""

from site_valuator.config.loader import ConfigLoader, load_config
from site_valuator.config.models import (
    GlobalConfig,
    HeuristicStrategyConfig,
    RevenueStrategyConfig,
    ValuationConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "GlobalConfig",
    "HeuristicStrategyConfig",
    "RevenueStrategyConfig",
    "ValuationConfig",
]
