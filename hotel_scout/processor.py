"""Price statistics for collected samples."""
from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from .collector import average_price
from .models import CollectionState, ScrapeResult


def prices_to_series(prices: Sequence[int]) -> pd.Series:
    """Convert a price sample into a numeric :class:`~pandas.Series`."""

    return pd.Series(list(prices), dtype="float64", name="price")


def summarise_prices(prices: Sequence[int]) -> Dict[str, float]:
    """Return simple statistics across a price sample."""

    series = prices_to_series(prices)
    if series.empty:
        return {
            "count": 0,
            "average_price": 0.0,
            "min_price": 0.0,
            "max_price": 0.0,
            "median_price": 0.0,
        }

    return {
        "count": int(series.count()),
        "average_price": float(average_price(prices)),
        "min_price": float(series.min()),
        "max_price": float(series.max()),
        "median_price": float(series.median()),
    }


def build_scrape_result(state: CollectionState) -> ScrapeResult:
    """Derive the reported :class:`ScrapeResult` from the final loop state."""

    summary = summarise_prices(state.current_sample)
    return ScrapeResult(
        sample_count=int(summary["count"]),
        average_price=summary["average_price"],
        prices=list(state.current_sample),
        min_price=summary["min_price"],
        max_price=summary["max_price"],
        median_price=summary["median_price"],
        rounds=state.rounds,
        stop_reason=state.stop_reason,
    )
