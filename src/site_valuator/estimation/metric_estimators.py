"""
Metric Estimators - Lookup-or-Randomize Heuristics.

Each estimator returns the literal value for a known domain and falls back
to a randomized estimate otherwise. The random source is injected so callers
can pass a seeded random.Random or a deterministic stub; with the default
source, unknown domains give different results on every call.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from site_valuator.domain.value_objects import DomainMetrics
from site_valuator.estimation.known_domains import (
    KNOWN_DOMAIN_AGES,
    KNOWN_DOMAIN_AUTHORITY,
    KNOWN_MONTHLY_TRAFFIC,
    is_fully_known,
)
from site_valuator.estimation.normalizer import extract_extension

logger = logging.getLogger(__name__)

# Fallback ranges (inclusive)
MIN_ESTIMATED_AGE = 1
MAX_ESTIMATED_AGE = 10
MIN_ESTIMATED_AUTHORITY = 10
MAX_ESTIMATED_AUTHORITY = 59

BASE_TRAFFIC = 10_000
MIN_TRAFFIC_MULTIPLIER = 1
MAX_TRAFFIC_MULTIPLIER = 100
SHORT_DOMAIN_LENGTH = 10
SHORT_DOMAIN_TRAFFIC_MULTIPLIER = 10
COM_TRAFFIC_MULTIPLIER = 5


class RandomSource(Protocol):
    """Anything with random.Random.randint semantics."""

    def randint(self, a: int, b: int) -> int:
        ...


_default_rng = random.Random()


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    """Injected source, or the shared module-level generator."""
    return rng if rng is not None else _default_rng


def estimate_domain_age(domain: str, rng: Optional[RandomSource] = None) -> int:
    """Age in years: known value, else uniform in [1, 10]."""
    if domain in KNOWN_DOMAIN_AGES:
        return KNOWN_DOMAIN_AGES[domain]
    return resolve_rng(rng).randint(MIN_ESTIMATED_AGE, MAX_ESTIMATED_AGE)


def estimate_traffic(domain: str, rng: Optional[RandomSource] = None) -> int:
    """
    Monthly visits: known value, else 10000 x R x L x E.

    R is uniform in [1, 100], L is 10 for domains shorter than 10 characters,
    E is 5 for domains ending in ".com".
    """
    if domain in KNOWN_MONTHLY_TRAFFIC:
        return KNOWN_MONTHLY_TRAFFIC[domain]

    random_multiplier = resolve_rng(rng).randint(
        MIN_TRAFFIC_MULTIPLIER, MAX_TRAFFIC_MULTIPLIER
    )
    length_multiplier = (
        SHORT_DOMAIN_TRAFFIC_MULTIPLIER if len(domain) < SHORT_DOMAIN_LENGTH else 1
    )
    extension_multiplier = COM_TRAFFIC_MULTIPLIER if domain.endswith(".com") else 1

    return BASE_TRAFFIC * random_multiplier * length_multiplier * extension_multiplier


def estimate_domain_authority(domain: str, rng: Optional[RandomSource] = None) -> int:
    """Authority score: known value, else uniform in [10, 59]."""
    if domain in KNOWN_DOMAIN_AUTHORITY:
        return KNOWN_DOMAIN_AUTHORITY[domain]
    return resolve_rng(rng).randint(
        MIN_ESTIMATED_AUTHORITY, MAX_ESTIMATED_AUTHORITY
    )


def derive_metrics(domain: str, rng: Optional[RandomSource] = None) -> DomainMetrics:
    """
    Derive all metrics for an already normalized domain.

    Args:
        domain: Normalized domain (see normalize_domain)
        rng: Random source for unknown domains

    Returns:
        Frozen DomainMetrics record
    """
    metrics = DomainMetrics(
        domain_age_years=estimate_domain_age(domain, rng),
        monthly_traffic=estimate_traffic(domain, rng),
        domain_authority=estimate_domain_authority(domain, rng),
        has_ssl=True,
        domain_length=len(domain),
        extension=extract_extension(domain),
    )
    logger.debug(
        f"Metrics for {domain!r}: age={metrics.domain_age_years}, "
        f"traffic={metrics.monthly_traffic:,}, authority={metrics.domain_authority}, "
        f"known={is_fully_known(domain)}"
    )
    return metrics
