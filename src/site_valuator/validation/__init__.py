"""
Validation Package - Input Validation.

    - RequestValidator: Domain presence, strategy name, revenue slider bounds
    - ValidationError: Raised on invalid input
"""

from site_valuator.validation.request_validator import (
    RequestValidator,
    ValidationError,
)

__all__ = [
    "RequestValidator",
    "ValidationError",
]
