"""
Registry Package - Named Strategy Management.

    - StrategyRegistry: Thread-safe name -> strategy registry
    - create_default_registry: Registry with both built-in strategies
"""

from site_valuator.registry.strategy_registry import (
    StrategyInfo,
    StrategyRegistry,
    create_default_registry,
)

__all__ = [
    "StrategyInfo",
    "StrategyRegistry",
    "create_default_registry",
]
