"""
Unit Tests for the Value Formula.

Test Aspects Covered:
    ✅ Business Logic: Weighted sum, bonuses, popularity multipliers
    ✅ Edge Cases: Threshold boundaries, half-up rounding, empty domain
"""

from __future__ import annotations

import random

import pytest

from site_valuator.domain.value_objects import DomainMetrics
from site_valuator.estimation.metric_estimators import derive_metrics
from site_valuator.estimation.value_formula import (
    calculate_breakdown,
    calculate_value,
    extension_bonus,
    length_bonus,
    popularity_multiplier,
    round_half_up,
)
from tests.fixtures.random_sources import FixedRandom


def create_metrics(
    age: int = 1,
    traffic: int = 0,
    authority: int = 10,
    length: int = 20,
    extension: str = "io",
) -> DomainMetrics:
    """Helper to build metrics directly."""
    return DomainMetrics(
        domain_age_years=age,
        monthly_traffic=traffic,
        domain_authority=authority,
        domain_length=length,
        extension=extension,
    )


class TestBonuses:
    """Test cases for the bonus tables."""

    @pytest.mark.parametrize(
        "extension,expected",
        [("com", 10_000), ("org", 5_000), ("net", 3_000), ("io", 1_000), ("", 1_000)],
    )
    def test_extension_bonus(self, extension: str, expected: int) -> None:
        """
        SCENARIO: Each extension branch
        EXPECTED: 10000 / 5000 / 3000 / 1000
        """
        assert extension_bonus(extension) == expected

    @pytest.mark.parametrize(
        "length,expected",
        [(0, 5_000), (9, 5_000), (10, 2_000), (14, 2_000), (15, 500), (40, 500)],
    )
    def test_length_bonus(self, length: int, expected: int) -> None:
        """
        SCENARIO: Lengths around the 10 and 15 thresholds
        EXPECTED: 5000 below 10, 2000 below 15, else 500
        """
        assert length_bonus(length) == expected

    @pytest.mark.parametrize(
        "traffic,expected",
        [
            (1_000_000, 1.0),
            (1_000_001, 1.5),
            (10_000_000, 1.5),
            (10_000_001, 3.0),
        ],
    )
    def test_popularity_multiplier(self, traffic: int, expected: float) -> None:
        """
        SCENARIO: Traffic at and just above each threshold
        EXPECTED: Strictly-greater comparisons, cumulative x3
        """
        assert popularity_multiplier(traffic) == expected


class TestCalculateValue:
    """Test cases for calculate_value."""

    def test_google_literal_value(self) -> None:
        """
        SCENARIO: google.com (traffic 90B, authority 100, age 25, length 10)
        EXPECTED: (900000000 + 10000 + 12500 + 2000 + 10000) x 3
        """
        # Arrange
        metrics = derive_metrics("google.com")

        # Act
        value = calculate_value(metrics)

        # Assert
        assert value == 2_700_103_500

    @pytest.mark.parametrize(
        "domain,expected",
        [
            ("facebook.com", 600_094_800),
            ("amazon.com", 150_106_800),
            ("youtube.com", 900_093_000),
        ],
    )
    def test_other_fully_known_domains(self, domain: str, expected: int) -> None:
        """
        SCENARIO: Domains present in all three tables
        EXPECTED: Literal, reproducible values
        """
        assert calculate_value(derive_metrics(domain)) == expected

    def test_small_site_without_multiplier(self) -> None:
        """
        SCENARIO: 500k visits, short .com domain
        EXPECTED: Plain weighted sum, no multiplier
        """
        # Arrange
        metrics = create_metrics(
            age=1, traffic=500_000, authority=10, length=7, extension="com"
        )

        # Act
        breakdown = calculate_breakdown(metrics)

        # Assert
        assert breakdown.traffic_value == pytest.approx(5_000)
        assert breakdown.authority_value == 1_000
        assert breakdown.age_value == 500
        assert breakdown.length_bonus == 5_000
        assert breakdown.extension_bonus == 10_000
        assert breakdown.popularity_multiplier == 1.0
        assert breakdown.estimated_value == 21_500

    def test_rounds_half_up(self) -> None:
        """
        SCENARIO: Total ends in exactly .5
        EXPECTED: Rounded up, not to even
        """
        # Arrange: 0.5 + 0 + 0 + 500 + 1000
        metrics = create_metrics(age=0, traffic=50, authority=0, length=20)

        # Act & Assert
        assert calculate_value(metrics) == 1_501

    def test_empty_domain_value(self) -> None:
        """
        SCENARIO: Metrics for an empty normalized domain
        EXPECTED: com bonus and short-length bonus applied
        """
        # Arrange
        metrics = derive_metrics("", FixedRandom("low"))

        # Act
        breakdown = calculate_breakdown(metrics)

        # Assert
        assert breakdown.length_bonus == 5_000
        assert breakdown.extension_bonus == 10_000
        # traffic 100000, authority 10, age 1
        assert breakdown.estimated_value == 1_000 + 1_000 + 500 + 5_000 + 10_000

    def test_value_is_non_negative_integer(self) -> None:
        """
        SCENARIO: Many randomized metric combinations
        EXPECTED: Always a non-negative int
        """
        # Arrange
        rng = random.Random(3)
        domains = ["a.com", "example.org", "a-very-long-domain-name.net", "x", ""]

        for _ in range(200):
            for domain in domains:
                # Act
                value = calculate_value(derive_metrics(domain, rng))

                # Assert
                assert isinstance(value, int)
                assert value >= 0


class TestRoundHalfUp:
    """Test cases for round_half_up."""

    @pytest.mark.parametrize(
        "value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)]
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.49999999999999994, 0),
            (-2.5, -2),
            (-0.5, 0),
            (-2.51, -3),
            (4_503_599_627_370_495.5, 4_503_599_627_370_496),
        ],
    )
    def test_matches_js_math_round(self, value: float, expected: int) -> None:
        """
        SCENARIO: Values where adding 0.5 in floating point is inexact
        EXPECTED: Same result as JavaScript Math.round
        """
        assert round_half_up(value) == expected
