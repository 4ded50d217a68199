"""
Display Formatting.

Boundary helpers for presenting results: en-US currency with no decimals,
compact visitor counts, and a plain-text summary of a result.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Union

from site_valuator.domain.entities import (
    EstimationOutcome,
    FailedEstimation,
    RevenueValuationResult,
    ValuationResult,
)

Number = Union[int, float]

CURRENCY_SYMBOLS = {"USD": "$"}
COMPACT_SUFFIXES = ("", "K", "M", "B", "T")

DISCLAIMER = (
    "This is an estimated value based on public indicators and algorithmic "
    "calculations. Actual website value depends on revenue, profit margins, "
    "assets, and other private business factors not available publicly."
)


def format_currency(value: Number, currency: str = "USD") -> str:
    """
    Format as whole currency units with thousands separators.

    Example:
        >>> format_currency(2700103500)
        '$2,700,103,500'
    """
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(int(amount)):,}"


def _compact_digits(value: Decimal) -> Decimal:
    # Whole numbers from 10 up, one decimal below
    step = Decimal("1") if value >= 10 else Decimal("0.1")
    return value.quantize(step, rounding=ROUND_HALF_UP)


def format_compact(number: Number) -> str:
    """
    Short form of a count, e.g. 10000 -> "10K", 1500000 -> "1.5M".
    """
    value = Decimal(str(number))
    sign = "-" if value < 0 else ""
    value = abs(value)

    unit = 0
    while value >= 1000 and unit < len(COMPACT_SUFFIXES) - 1:
        value /= 1000
        unit += 1

    rounded = _compact_digits(value)
    if rounded >= 1000 and unit < len(COMPACT_SUFFIXES) - 1:
        unit += 1
        rounded = _compact_digits(rounded / 1000)

    return f"{sign}{format(rounded.normalize(), 'f')}{COMPACT_SUFFIXES[unit]}"


def summarize(result: EstimationOutcome) -> str:
    """Plain-text, multi-line summary of any estimation outcome."""
    if isinstance(result, FailedEstimation):
        return f"Error: {result.error} ({result.domain!r})"

    lines: List[str] = [
        f"Results for {result.domain}",
        f"  Estimated value:   {format_currency(result.estimated_value, result.currency)}",
    ]

    if isinstance(result, ValuationResult):
        metrics = result.metrics
        lines += [
            f"  Monthly traffic:   {metrics.monthly_traffic:,}",
            f"  Domain authority:  {metrics.domain_authority}/100",
            f"  Domain age:        ~{metrics.domain_age_years} years",
            f"  Extension:         .{metrics.extension}",
        ]
    elif isinstance(result, RevenueValuationResult):
        revenue = result.revenue
        lines += [
            f"  Monthly visitors:  {format_compact(result.inputs.monthly_visitors)}",
            f"  RPM:               ${result.inputs.revenue_per_thousand:g}",
            f"  Daily revenue:     {format_currency(revenue.daily_revenue, result.currency)}",
            f"  Monthly revenue:   {format_currency(revenue.monthly_revenue, result.currency)}",
            f"  Yearly revenue:    {format_currency(revenue.yearly_revenue, result.currency)}",
        ]

    lines.append("")
    lines.append(f"Disclaimer: {DISCLAIMER}")
    return "\n".join(lines)
