"""Shared data structures used across collection and processing."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Dict, List, Optional

PriceSample = List[int]

STOP_TARGET = "target"
STOP_STAGNANT = "stagnant"
STOP_DEADLINE = "deadline"


@dataclass
class CollectionState:
    """Mutable state of the scroll-and-collect loop."""

    current_sample: PriceSample = field(default_factory=list)
    previous_count: int = 0
    stagnant_rounds: int = 0
    rounds: int = 0
    stop_reason: Optional[str] = None


@dataclass
class ScrapeResult:
    """Summary of a scrape invocation."""

    sample_count: int
    average_price: float
    prices: PriceSample = field(default_factory=list)
    min_price: float = 0.0
    max_price: float = 0.0
    median_price: float = 0.0
    rounds: int = 0
    stop_reason: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def rounded_average(self) -> int:
        """Average rounded half-up for display."""

        return int(math.floor(self.average_price + 0.5))

    @classmethod
    def failure(cls, message: str) -> "ScrapeResult":
        return cls(sample_count=0, average_price=0.0, error=message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sample_count": self.sample_count,
            "average_price": self.average_price,
            "rounded_average": self.rounded_average,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "median_price": self.median_price,
            "rounds": self.rounds,
            "stop_reason": self.stop_reason,
            "error": self.error,
            "prices": list(self.prices),
        }
