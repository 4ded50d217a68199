"""
Value Formula - Weighted Sum of Domain Metrics.

    traffic x 0.01 + authority x 100 + age x 500 + length bonus + extension bonus

multiplied by 1.5 above one million monthly visits and by a further 2 above
ten million. No clamping is applied.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, localcontext

from site_valuator.domain.value_objects import DomainMetrics, ValueBreakdown

TRAFFIC_VALUE_PER_VISIT = 0.01
AUTHORITY_VALUE_PER_POINT = 100
AGE_VALUE_PER_YEAR = 500

EXTENSION_BONUSES = {
    "com": 10_000,
    "org": 5_000,
    "net": 3_000,
}
OTHER_EXTENSION_BONUS = 1_000

POPULAR_TRAFFIC_THRESHOLD = 1_000_000
POPULAR_MULTIPLIER = 1.5
VERY_POPULAR_TRAFFIC_THRESHOLD = 10_000_000
VERY_POPULAR_MULTIPLIER = 2


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward +infinity.

    Works on the exact binary value of the float, so 0.49999999999999994
    rounds to 0 and -2.5 to -2.
    """
    with localcontext() as ctx:
        ctx.prec = 64
        shifted = Decimal(value) + Decimal("0.5")
        return int(shifted.to_integral_value(rounding=ROUND_FLOOR))


def length_bonus(domain_length: int) -> int:
    """Shorter domains earn a larger bonus."""
    if domain_length < 10:
        return 5_000
    if domain_length < 15:
        return 2_000
    return 500


def extension_bonus(extension: str) -> int:
    return EXTENSION_BONUSES.get(extension, OTHER_EXTENSION_BONUS)


def popularity_multiplier(monthly_traffic: int) -> float:
    """Cumulative multiplier: 1, 1.5 or 3."""
    multiplier = 1.0
    if monthly_traffic > POPULAR_TRAFFIC_THRESHOLD:
        multiplier *= POPULAR_MULTIPLIER
    if monthly_traffic > VERY_POPULAR_TRAFFIC_THRESHOLD:
        multiplier *= VERY_POPULAR_MULTIPLIER
    return multiplier


def calculate_breakdown(metrics: DomainMetrics) -> ValueBreakdown:
    """
    Apply the formula and keep every intermediate component.

    Args:
        metrics: Derived domain metrics

    Returns:
        ValueBreakdown whose estimated_value is the rounded total
    """
    traffic_value = metrics.monthly_traffic * TRAFFIC_VALUE_PER_VISIT
    authority_value = metrics.domain_authority * AUTHORITY_VALUE_PER_POINT
    age_value = metrics.domain_age_years * AGE_VALUE_PER_YEAR
    length = length_bonus(metrics.domain_length)
    extension = extension_bonus(metrics.extension)

    base_value = traffic_value + authority_value + age_value + length + extension

    # Applied as successive factors so the float result matches x1.5 then x2
    total = base_value
    if metrics.monthly_traffic > POPULAR_TRAFFIC_THRESHOLD:
        total *= POPULAR_MULTIPLIER
    if metrics.monthly_traffic > VERY_POPULAR_TRAFFIC_THRESHOLD:
        total *= VERY_POPULAR_MULTIPLIER

    return ValueBreakdown(
        traffic_value=traffic_value,
        authority_value=authority_value,
        age_value=age_value,
        length_bonus=length,
        extension_bonus=extension,
        base_value=base_value,
        popularity_multiplier=popularity_multiplier(metrics.monthly_traffic),
        estimated_value=round_half_up(total),
    )


def calculate_value(metrics: DomainMetrics) -> int:
    """Estimated value in whole USD."""
    return calculate_breakdown(metrics).estimated_value
