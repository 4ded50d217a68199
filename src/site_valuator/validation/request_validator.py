"""
Request Validator - Validate Estimation Requests.

Validates requests before any estimation work:
    - Domain input is present (None or "" rejected)
    - Strategy name is known
    - Revenue inputs fall within the configured slider bounds and sit on a
      slider step

Design Notes:
    - Whitespace-only input is accepted; it normalizes to "" and still
      produces a well-formed result
    - Clear error messages, all problems reported at once
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Set, Union

from site_valuator.config.models import RevenueStrategyConfig
from site_valuator.domain.entities import EstimationRequest, StrategyName
from site_valuator.domain.value_objects import RevenueInputs

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when request validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class RequestValidator:
    """Validates estimation requests and revenue slider inputs."""

    def __init__(
        self,
        supported_strategies: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Initialize request validator.

        Args:
            supported_strategies: Strategy names accepted by validate().
                                  Defaults to the built-in strategies.
        """
        self.supported_strategies: Set[str] = set(
            supported_strategies or (s.value for s in StrategyName)
        )

    def validate(self, request: EstimationRequest) -> None:
        """
        Validate an estimation request.

        Raises:
            ValidationError: If validation fails
        """
        errors: List[str] = []

        domain_error = self._validate_domain(request.domain_or_url)
        if domain_error:
            errors.append(domain_error)

        strategy_error = self._validate_strategy(request.strategy)
        if strategy_error:
            errors.append(strategy_error)

        if errors:
            error_message = "; ".join(errors)
            logger.warning(f"Request validation failed: {error_message}")
            raise ValidationError(error_message)

        logger.debug(
            f"Request validated: domain={request.domain_or_url!r}, "
            f"strategy={request.strategy}"
        )

    def _validate_domain(self, domain_or_url: Optional[str]) -> Optional[str]:
        if domain_or_url is None or domain_or_url == "":
            return "Please enter a domain name"
        return None

    def _validate_strategy(self, strategy: str) -> Optional[str]:
        if strategy not in self.supported_strategies:
            supported = ", ".join(sorted(self.supported_strategies))
            return f"Strategy {strategy} not supported. Supported: {supported}"
        return None

    def validate_revenue_inputs(
        self,
        inputs: RevenueInputs,
        config: RevenueStrategyConfig,
    ) -> None:
        """
        Check revenue inputs against the slider bounds and steps.

        Steps count from the slider minimum: with min 1.0 and step 0.5,
        RPM 15.5 is valid and 15.25 is not.

        Raises:
            ValidationError: If a value is outside its slider range or
                             between two steps
        """
        errors: List[str] = []

        if not (
            config.min_monthly_visitors
            <= inputs.monthly_visitors
            <= config.max_monthly_visitors
        ):
            errors.append(
                f"monthly_visitors={inputs.monthly_visitors:,} outside "
                f"[{config.min_monthly_visitors:,}, {config.max_monthly_visitors:,}]"
            )

        if not (
            config.min_revenue_per_thousand
            <= inputs.revenue_per_thousand
            <= config.max_revenue_per_thousand
        ):
            errors.append(
                f"revenue_per_thousand={inputs.revenue_per_thousand} outside "
                f"[{config.min_revenue_per_thousand}, {config.max_revenue_per_thousand}]"
            )

        if not _on_step(
            inputs.monthly_visitors, config.min_monthly_visitors, config.visitors_step
        ):
            errors.append(
                f"monthly_visitors={inputs.monthly_visitors:,} not a multiple of "
                f"{config.visitors_step:,} from {config.min_monthly_visitors:,}"
            )

        if not _on_step(
            inputs.revenue_per_thousand,
            config.min_revenue_per_thousand,
            config.revenue_per_thousand_step,
        ):
            errors.append(
                f"revenue_per_thousand={inputs.revenue_per_thousand} not a multiple of "
                f"{config.revenue_per_thousand_step} from {config.min_revenue_per_thousand}"
            )

        if errors:
            raise ValidationError("; ".join(errors), field="revenue_inputs")


def _on_step(
    value: Union[int, float],
    minimum: Union[int, float],
    step: Union[int, float],
) -> bool:
    # Decimal via str so 0.1-style steps compare exactly
    offset = Decimal(str(value)) - Decimal(str(minimum))
    return offset % Decimal(str(step)) == 0
