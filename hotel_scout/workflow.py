"""High level orchestration for running a hotel price scrape."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .config import ScraperSettings, SearchRequest, create_request
from .models import ScrapeResult
from .reporter import build_report
from .scraper import SurfaceFactory, run_scrape, scrape_hotel_prices


@dataclass
class WorkflowResult:
    """Result returned by :func:`run_price_workflow`."""

    request: SearchRequest
    result: ScrapeResult
    report: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "request": self.request.to_dict(),
            "result": self.result.to_dict(),
            "report": self.report,
        }


def _as_request(data: Mapping[str, Any] | SearchRequest) -> SearchRequest:
    if isinstance(data, SearchRequest):
        return data
    if isinstance(data, Mapping):
        return create_request(data)
    raise TypeError("Unsupported request payload type")


async def run_price_workflow_async(
    data: Mapping[str, Any] | SearchRequest,
    settings: Optional[ScraperSettings] = None,
    surface_factory: Optional[SurfaceFactory] = None,
) -> WorkflowResult:
    """Normalise the request, scrape prices and build the report."""

    request = _as_request(data)
    result = await scrape_hotel_prices(request, settings, surface_factory)
    return WorkflowResult(request=request, result=result, report=build_report(request, result))


def run_price_workflow(
    data: Mapping[str, Any] | SearchRequest,
    settings: Optional[ScraperSettings] = None,
    surface_factory: Optional[SurfaceFactory] = None,
) -> WorkflowResult:
    """Synchronous variant of :func:`run_price_workflow_async`."""

    request = _as_request(data)
    result = run_scrape(request, settings, surface_factory)
    return WorkflowResult(request=request, result=result, report=build_report(request, result))


__all__ = ["WorkflowResult", "run_price_workflow", "run_price_workflow_async"]
