"""
Unit Tests for Metric Estimators.

Test Aspects Covered:
    ✅ Business Logic: Known-domain lookups, fallback formulas
    ✅ Edge Cases: Empty domain, random bounds, immutable tables
"""

from __future__ import annotations

import random

import pytest

from site_valuator.estimation.known_domains import (
    KNOWN_DOMAIN_AGES,
    KNOWN_DOMAIN_AUTHORITY,
    KNOWN_MONTHLY_TRAFFIC,
    is_fully_known,
)
from site_valuator.estimation.metric_estimators import (
    derive_metrics,
    estimate_domain_age,
    estimate_domain_authority,
    estimate_traffic,
)
from tests.conftest import KNOWN_DOMAINS
from tests.fixtures.random_sources import FixedRandom


class TestKnownDomains:
    """Test cases for the lookup tables."""

    @pytest.mark.parametrize("domain", KNOWN_DOMAINS)
    def test_known_domains_are_deterministic(self, domain: str) -> None:
        """
        SCENARIO: Same known domain estimated with different random sources
        EXPECTED: Identical age and traffic every time
        """
        # Act
        first = derive_metrics(domain, random.Random(1))
        second = derive_metrics(domain, random.Random(2))

        # Assert
        assert first.domain_age_years == second.domain_age_years
        assert first.monthly_traffic == second.monthly_traffic
        if domain in KNOWN_DOMAIN_AUTHORITY:
            assert first.domain_authority == second.domain_authority

    def test_google_literal_metrics(self) -> None:
        """
        SCENARIO: google.com
        EXPECTED: age 25, traffic 90B, authority 100, extension com
        """
        # Act
        metrics = derive_metrics("google.com", FixedRandom())

        # Assert
        assert metrics.domain_age_years == 25
        assert metrics.monthly_traffic == 90_000_000_000
        assert metrics.domain_authority == 100
        assert metrics.extension == "com"
        assert metrics.domain_length == 10
        assert metrics.has_ssl is True

    def test_authority_table_differs_from_others(self) -> None:
        """
        SCENARIO: wikipedia.org and twitter.com
        EXPECTED: wikipedia.org has only authority, twitter.com no authority
        """
        # Arrange
        rng = FixedRandom("low")

        # Act & Assert
        assert estimate_domain_authority("wikipedia.org", rng) == 93
        assert estimate_domain_authority("twitter.com", rng) == 10
        assert rng.calls == [(10, 59)]
        assert "wikipedia.org" not in KNOWN_DOMAIN_AGES
        assert is_fully_known("google.com")
        assert not is_fully_known("twitter.com")

    def test_tables_are_read_only(self) -> None:
        """
        SCENARIO: Attempt to modify a lookup table
        EXPECTED: TypeError
        """
        with pytest.raises(TypeError):
            KNOWN_DOMAIN_AGES["example.com"] = 1  # type: ignore[index]
        with pytest.raises(TypeError):
            KNOWN_MONTHLY_TRAFFIC["example.com"] = 1  # type: ignore[index]
        with pytest.raises(TypeError):
            KNOWN_DOMAIN_AUTHORITY["example.com"] = 1  # type: ignore[index]

    def test_lookup_uses_exact_key(self) -> None:
        """
        SCENARIO: Known domain with different case
        EXPECTED: Treated as unknown
        """
        assert estimate_domain_age("Google.com", FixedRandom("high")) == 10


class TestFallbackEstimates:
    """Test cases for unknown-domain fallbacks."""

    def test_age_and_authority_within_bounds(self) -> None:
        """
        SCENARIO: Many samples for an unknown domain
        EXPECTED: Age in [1, 10], authority in [10, 59]
        """
        # Arrange
        rng = random.Random(7)

        # Act
        ages = [estimate_domain_age("unknown-site.io", rng) for _ in range(500)]
        authorities = [
            estimate_domain_authority("unknown-site.io", rng) for _ in range(500)
        ]

        # Assert
        assert min(ages) >= 1 and max(ages) <= 10
        assert min(authorities) >= 10 and max(authorities) <= 59

    def test_bounds_are_inclusive(self) -> None:
        """
        SCENARIO: Stub returning range bounds
        EXPECTED: Exactly the documented extremes
        """
        assert estimate_domain_age("example.org", FixedRandom("low")) == 1
        assert estimate_domain_age("example.org", FixedRandom("high")) == 10
        assert estimate_domain_authority("example.org", FixedRandom("low")) == 10
        assert estimate_domain_authority("example.org", FixedRandom("high")) == 59

    @pytest.mark.parametrize(
        "domain,pick,expected",
        [
            ("abc.com", "low", 10_000 * 1 * 10 * 5),
            ("example.org", "low", 10_000 * 1 * 1 * 1),
            ("longerdomain.com", "low", 10_000 * 1 * 1 * 5),
            ("abc.net", "high", 10_000 * 100 * 10 * 1),
            ("", "low", 10_000 * 1 * 10 * 1),
        ],
    )
    def test_traffic_formula(self, domain: str, pick: str, expected: int) -> None:
        """
        SCENARIO: Unknown domains of different length and extension
        EXPECTED: 10000 x R x length multiplier x .com multiplier
        """
        assert estimate_traffic(domain, FixedRandom(pick)) == expected

    def test_unseeded_default_source_is_used(self) -> None:
        """
        SCENARIO: No random source passed
        EXPECTED: Still a value within bounds
        """
        assert 1 <= estimate_domain_age("example.net") <= 10


class TestDeriveMetrics:
    """Test cases for derive_metrics."""

    def test_empty_domain(self) -> None:
        """
        SCENARIO: Domain normalized to ""
        EXPECTED: Well-formed metrics with extension "com" and length 0
        """
        # Act
        metrics = derive_metrics("", FixedRandom())

        # Assert
        assert metrics.extension == "com"
        assert metrics.domain_length == 0
        assert metrics.domain_age_years == 1

    def test_camel_case_serialization(self) -> None:
        """
        SCENARIO: Metrics dumped for a presentation layer
        EXPECTED: camelCase keys
        """
        # Act
        data = derive_metrics("google.com").model_dump(by_alias=True)

        # Assert
        assert data == {
            "domainAgeYears": 25,
            "monthlyTraffic": 90_000_000_000,
            "domainAuthority": 100,
            "hasSSL": True,
            "domainLength": 10,
            "extension": "com",
        }

    def test_metrics_are_frozen(self) -> None:
        """
        SCENARIO: Attempt to change a derived metric
        EXPECTED: Pydantic refuses
        """
        metrics = derive_metrics("google.com")
        with pytest.raises(Exception):
            metrics.domain_authority = 1  # type: ignore[misc]
