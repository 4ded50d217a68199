"""
Strategy Registry - Named Valuation Strategy Management.

Thread-safe registry mapping strategy names to strategy instances, so the
two valuation models can be exposed side by side and selected by name.

Usage:
    registry = create_default_registry(config)
    strategy = registry.get_strategy("revenue_multiple")
    result = strategy.estimate("example.com")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional

from site_valuator.config.models import ValuationConfig
from site_valuator.estimation.metric_estimators import RandomSource
from site_valuator.strategies.valuation_strategies import (
    HeuristicValuationStrategy,
    RevenueMultipleStrategy,
    ValuationStrategy,
)

logger = logging.getLogger(__name__)


@dataclass
class StrategyInfo:
    """Metadata about a registered strategy."""

    name: str
    version: str
    strategy: Any
    enabled: bool = True
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "version": self.version,
            "enabled": self.enabled,
            "description": self.description,
            "tags": self.tags,
            "strategy_type": type(self.strategy).__name__,
        }


class StrategyRegistry:
    """
    Thread-safe registry of valuation strategies.

    Supports:
        - Registration under the strategy's own name
        - Enable/disable without unregistering
        - Version tracking per strategy
    """

    def __init__(self) -> None:
        self._strategies: Dict[str, StrategyInfo] = {}
        self._lock = RLock()

    def register(
        self,
        strategy: ValuationStrategy,
        version: str = "1.0.0",
        description: str = "",
        enabled: bool = True,
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a strategy under strategy.name.

        Raises:
            ValueError: If a strategy with this name is already registered
        """
        with self._lock:
            name = strategy.name
            if name in self._strategies:
                raise ValueError(
                    f"Strategy '{name}' is already registered. "
                    f"Use unregister() first."
                )
            self._strategies[name] = StrategyInfo(
                name=name,
                version=version,
                strategy=strategy,
                enabled=enabled,
                description=description,
                tags=tags or [],
            )
            logger.info(f"Registered strategy: {name} v{version}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a strategy by name.

        Returns:
            True if removed, False if not found
        """
        with self._lock:
            if name not in self._strategies:
                logger.warning(f"Cannot unregister: strategy '{name}' not found")
                return False
            del self._strategies[name]
            logger.info(f"Unregistered strategy: {name}")
            return True

    def get_strategy(self, name: str) -> ValuationStrategy:
        """
        Get an enabled strategy by name.

        Raises:
            KeyError: If the strategy is unknown or disabled
        """
        with self._lock:
            info = self._strategies.get(name)
            if info is None:
                raise KeyError(f"Unknown strategy: {name}")
            if not info.enabled:
                raise KeyError(f"Strategy disabled: {name}")
            return info.strategy

    def list_all(self) -> Dict[str, StrategyInfo]:
        with self._lock:
            return dict(self._strategies)

    def names(self, enabled_only: bool = True) -> List[str]:
        """Registered strategy names, in registration order."""
        with self._lock:
            return [
                name
                for name, info in self._strategies.items()
                if info.enabled or not enabled_only
            ]

    def set_enabled(self, name: str, enabled: bool) -> bool:
        """
        Enable or disable a strategy.

        Returns:
            True if updated, False if not found
        """
        with self._lock:
            if name not in self._strategies:
                return False
            self._strategies[name].enabled = enabled
            logger.info(f"{'Enabled' if enabled else 'Disabled'} strategy: {name}")
            return True

    def get_versions(self) -> Dict[str, str]:
        with self._lock:
            return {name: info.version for name, info in self._strategies.items()}

    @property
    def registered_count(self) -> int:
        with self._lock:
            return len(self._strategies)

    def clear(self) -> None:
        with self._lock:
            self._strategies.clear()
            logger.info("Cleared all strategies from registry")


def create_default_registry(
    config: Optional[ValuationConfig] = None,
    rng: Optional[RandomSource] = None,
) -> StrategyRegistry:
    """
    Registry with both built-in strategies, configured from config.

    Args:
        config: Valuation configuration (defaults if None)
        rng: Random source shared by both strategies

    Returns:
        StrategyRegistry with "heuristic" and "revenue_multiple"
    """
    config = config or ValuationConfig()
    currency = config.global_settings.currency

    registry = StrategyRegistry()
    registry.register(
        HeuristicValuationStrategy(config.heuristic, rng=rng, currency=currency),
        description="Known-domain tables with randomized fallback heuristics",
        enabled=config.heuristic.enabled,
        tags=["domain", "canonical"],
    )
    registry.register(
        RevenueMultipleStrategy(config.revenue_multiple, rng=rng, currency=currency),
        description="Monthly revenue from visitors and RPM, times a multiple",
        enabled=config.revenue_multiple.enabled,
        tags=["revenue"],
    )
    return registry
