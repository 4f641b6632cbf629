"""Reporting helpers for scraped hotel prices."""
from __future__ import annotations

from datetime import date
from typing import List

from .config import SearchRequest
from .models import STOP_DEADLINE, STOP_STAGNANT, STOP_TARGET, ScrapeResult

_STOP_MESSAGES = {
    STOP_TARGET: "target sample size reached",
    STOP_STAGNANT: "no new hotels after repeated scrolling",
    STOP_DEADLINE: "collection time budget exhausted",
}


def _format_date(value: date) -> str:
    return value.strftime("%d %b %Y")


def _format_price(value: float) -> str:
    return f"₹{value:,.0f}"


def summary_line(request: SearchRequest, result: ScrapeResult) -> str:
    """One-line summary: ``Average price of 3-star hotels in Pune: ₹4,210``."""

    return (
        f"Average price of {request.star_label}-star hotels in "
        f"{request.destination_name}: ₹{result.rounded_average:,}"
    )


def build_report(request: SearchRequest, result: ScrapeResult) -> str:
    """Create a text report summarising the scrape."""

    lines: List[str] = [
        "Hotel Price Report",
        "==================",
        "",
        f"Destination: {request.destination_name} ({request.destination_code})",
        f"Stay: {_format_date(request.checkin)} – {_format_date(request.checkout)}",
        f"Star rating: {request.star_label}",
        f"Target sample size: {request.target_sample_size}",
        "",
        "Summary:",
    ]

    if not result.ok:
        lines.append(f"- Scrape failed: {result.error}")
        return "\n".join(lines)

    if result.sample_count == 0:
        lines.append("- No prices found")
    else:
        lines.append(f"- {result.sample_count} prices fetched")
        lines.append(f"- {summary_line(request, result)}")
        lines.append(f"- Cheapest: {_format_price(result.min_price)}")
        lines.append(f"- Most expensive: {_format_price(result.max_price)}")
        lines.append(f"- Median: {_format_price(result.median_price)}")

    if result.stop_reason:
        reason = _STOP_MESSAGES.get(result.stop_reason, result.stop_reason)
        lines.append(f"- Stopped after {result.rounds} rounds: {reason}")
    if result.sample_count < request.target_sample_size:
        lines.append(f"WARNING: only {result.sample_count} of {request.target_sample_size} requested prices")

    return "\n".join(lines)
