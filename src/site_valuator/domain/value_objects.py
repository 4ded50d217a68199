"""
Value Objects for Domain Layer.

Value objects are immutable records derived during an estimation. They
describe a website but carry no identity of their own.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DomainMetrics(BaseModel):
    """Heuristic indicators derived from a normalized domain."""

    domain_age_years: int = Field(..., description="Known or estimated age in years")
    monthly_traffic: int = Field(..., description="Known or estimated monthly visits")
    domain_authority: int = Field(..., description="Known or estimated authority score")
    has_ssl: bool = Field(default=True, alias="hasSSL")
    domain_length: int = Field(..., ge=0)
    extension: str = Field(default="com")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ValueBreakdown(BaseModel):
    """Individual components of the heuristic value formula."""

    traffic_value: float
    authority_value: float
    age_value: float
    length_bonus: int
    extension_bonus: int
    base_value: float = Field(..., description="Sum of components before multiplier")
    popularity_multiplier: float = Field(default=1.0)
    estimated_value: int

    model_config = {"frozen": True}


class RevenueInputs(BaseModel):
    """Slider-driven inputs of the revenue multiple model."""

    monthly_visitors: int = Field(..., ge=0)
    revenue_per_thousand: float = Field(..., ge=0, description="RPM in USD")
    multiple: float = Field(default=30, ge=0, description="Monthly revenue multiple")

    model_config = {"frozen": True}


class RevenueValuation(BaseModel):
    """Revenue figures computed from RevenueInputs."""

    monthly_revenue: float
    daily_revenue: float
    yearly_revenue: float
    website_value: float

    model_config = {"frozen": True}

