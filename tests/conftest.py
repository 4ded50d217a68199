"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from pathlib import Path
from unittest.mock import Mock

import pytest

from site_valuator.adapters.console_logger import ConsoleAuditLogger
from site_valuator.adapters.metrics_collector import InMemoryMetricsCollector
from site_valuator.config.models import (
    HeuristicStrategyConfig,
    RevenueStrategyConfig,
    ValuationConfig,
)
from site_valuator.pipeline.valuation_pipeline import ValuationPipeline
from site_valuator.registry.strategy_registry import create_default_registry
from tests.fixtures.random_sources import FixedRandom


KNOWN_DOMAINS = ["google.com", "facebook.com", "amazon.com", "youtube.com", "twitter.com"]


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def default_config_path() -> Path:
    """Path to the shipped default configuration."""
    return Path(__file__).parent.parent / "config" / "default.yaml"


@pytest.fixture
def instant_config() -> ValuationConfig:
    """Default configuration without the artificial analysis delay."""
    return ValuationConfig(
        heuristic=HeuristicStrategyConfig(analysis_delay_seconds=0),
        revenue_multiple=RevenueStrategyConfig(analysis_delay_seconds=0),
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def low_rng() -> FixedRandom:
    return FixedRandom("low")


@pytest.fixture
def high_rng() -> FixedRandom:
    return FixedRandom("high")


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def fake_sleep() -> Mock:
    """Stand-in for time.sleep."""
    return Mock()


@pytest.fixture
def pipeline(
    instant_config: ValuationConfig,
    seeded_rng: random.Random,
    console_logger: ConsoleAuditLogger,
    metrics_collector: InMemoryMetricsCollector,
    fake_sleep: Mock,
) -> ValuationPipeline:
    """Fully wired pipeline with no delay and a seeded random source."""
    return ValuationPipeline(
        config=instant_config,
        registry=create_default_registry(instant_config, rng=seeded_rng),
        audit_logger=console_logger,
        metrics_collector=metrics_collector,
        sleep=fake_sleep,
    )
