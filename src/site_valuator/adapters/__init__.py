"""
Adapters Package - Infrastructure and Presentation Boundary.

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Running aggregates in memory

Formatting:
    - format_currency, format_compact, summarize
"""

from site_valuator.adapters.console_logger import ConsoleAuditLogger
from site_valuator.adapters.formatting import format_compact, format_currency, summarize
from site_valuator.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "ConsoleAuditLogger",
    "InMemoryMetricsCollector",
    "format_compact",
    "format_currency",
    "summarize",
]
