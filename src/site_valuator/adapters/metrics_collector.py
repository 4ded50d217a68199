"""
In-Memory Metrics Collector.

Keeps running aggregates of estimation timings and counts per metric name
and tag set.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Optional, Tuple

MetricKey = Tuple[str, Tuple[Tuple[str, str], ...]]


@dataclass
class MetricAggregate:
    """Running aggregate for one metric series."""

    kind: str
    count: int = 0
    total: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    last: Optional[float] = None

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        self.last = value
        self.minimum = value if self.minimum is None else min(self.minimum, value)
        self.maximum = value if self.maximum is None else max(self.maximum, value)

    @property
    def mean(self) -> float:
        return self.total / self.count if self.count else 0.0


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._series: Dict[MetricKey, MetricAggregate] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int = 1,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summary keyed by metric name, with tagged series suffixed.

        Example key: "estimations_total[strategy=heuristic]"
        """
        with self._lock:
            summary: Dict[str, Any] = {}
            for (name, tags), agg in self._series.items():
                label = name
                if tags:
                    label += "[" + ",".join(f"{k}={v}" for k, v in tags) + "]"
                summary[label] = {
                    "type": agg.kind,
                    "count": agg.count,
                    "total": agg.total,
                    "mean": agg.mean,
                    "min": agg.minimum,
                    "max": agg.maximum,
                    "last": agg.last,
                }
            return summary

    def get_total(self, name: str, tags: Optional[Dict[str, str]] = None) -> float:
        """Total recorded for one series, 0 if never recorded."""
        with self._lock:
            agg = self._series.get(self._key(name, tags))
            return agg.total if agg else 0.0

    def clear(self) -> None:
        with self._lock:
            self._series.clear()

    def _record(
        self,
        name: str,
        kind: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        key = self._key(name, tags)
        with self._lock:
            if key not in self._series:
                self._series[key] = MetricAggregate(kind=kind)
            self._series[key].add(value)

    @staticmethod
    def _key(name: str, tags: Optional[Dict[str, str]]) -> MetricKey:
        return name, tuple(sorted((tags or {}).items()))
