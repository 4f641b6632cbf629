"""Hotel price scraping with an incremental scroll-and-collect loop."""
from .config import ScraperSettings, SearchRequest, create_request
from .dates import normalise_date, parse_date, resolve_stay_dates
from .exceptions import ListingsNotFoundError, NavigationError, ScrapeError, UnparseableDateError
from .models import CollectionState, ScrapeResult
from .scraper import run_scrape, scrape_hotel_prices
from .workflow import WorkflowResult, run_price_workflow, run_price_workflow_async

__all__ = [
    "CollectionState",
    "ListingsNotFoundError",
    "NavigationError",
    "ScrapeError",
    "ScrapeResult",
    "ScraperSettings",
    "SearchRequest",
    "UnparseableDateError",
    "WorkflowResult",
    "create_request",
    "normalise_date",
    "parse_date",
    "resolve_stay_dates",
    "run_price_workflow",
    "run_price_workflow_async",
    "run_scrape",
    "scrape_hotel_prices",
]
