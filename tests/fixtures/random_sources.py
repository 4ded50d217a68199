"""Deterministic random sources for estimator tests."""

from __future__ import annotations

from typing import List, Tuple


class FixedRandom:
    """Random source returning the low or high bound of every range."""

    def __init__(self, pick: str = "low") -> None:
        self.pick = pick
        self.calls: List[Tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return a if self.pick == "low" else b
