"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. The known-domain
tables and bonus thresholds are not configurable; they live as constants in
the estimation package.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class GlobalConfig(BaseModel):
    """Global configuration settings."""

    default_strategy: str = Field(default="heuristic")
    currency: str = Field(default="USD")
    random_seed: Optional[int] = Field(
        default=None, description="Seed for reproducible runs; None uses system entropy"
    )


class HeuristicStrategyConfig(BaseModel):
    """Configuration for the heuristic domain strategy."""

    enabled: bool = True
    analysis_delay_seconds: float = Field(default=1.0, ge=0, le=10)


class RevenueStrategyConfig(BaseModel):
    """Configuration for the revenue multiple strategy."""

    enabled: bool = True
    analysis_delay_seconds: float = Field(default=1.5, ge=0, le=10)

    default_monthly_visitors: int = Field(default=10_000, ge=0)
    default_revenue_per_thousand: float = Field(default=15.0, ge=0)
    default_multiple: float = Field(default=30.0, ge=0)

    # Slider bounds
    min_monthly_visitors: int = Field(default=1_000, ge=0)
    max_monthly_visitors: int = Field(default=1_000_000, ge=0)
    visitors_step: int = Field(default=1_000, ge=1)
    min_revenue_per_thousand: float = Field(default=1.0, ge=0)
    max_revenue_per_thousand: float = Field(default=50.0, ge=0)
    revenue_per_thousand_step: float = Field(default=0.5, gt=0)

    # Visitor range drawn when a domain is scanned
    scan_min_visitors: int = Field(default=5_000, ge=0)
    scan_max_visitors: int = Field(default=50_000, ge=0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "RevenueStrategyConfig":
        if self.min_monthly_visitors > self.max_monthly_visitors:
            raise ValueError("min_monthly_visitors must be <= max_monthly_visitors")
        if self.min_revenue_per_thousand > self.max_revenue_per_thousand:
            raise ValueError(
                "min_revenue_per_thousand must be <= max_revenue_per_thousand"
            )
        if self.scan_min_visitors > self.scan_max_visitors:
            raise ValueError("scan_min_visitors must be <= scan_max_visitors")
        return self


class ValuationConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    global_settings: GlobalConfig = Field(
        default_factory=GlobalConfig,
        alias="global",
    )
    heuristic: HeuristicStrategyConfig = Field(
        default_factory=HeuristicStrategyConfig,
    )
    revenue_multiple: RevenueStrategyConfig = Field(
        default_factory=RevenueStrategyConfig,
    )

    model_config = {"populate_by_name": True}
