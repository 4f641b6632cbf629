"""Error types raised while normalising requests and scraping listings."""
from __future__ import annotations


class UnparseableDateError(ValueError):
    """Raised when a date string matches none of the accepted formats."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Could not parse date {value!r}")
        self.value = value


class ScrapeError(RuntimeError):
    """Base class for failures that end a scrape invocation."""


class NavigationError(ScrapeError):
    """The homepage or the listing page failed to load."""


class ListingsNotFoundError(ScrapeError):
    """No listing card appeared within the bounded wait."""


__all__ = [
    "ListingsNotFoundError",
    "NavigationError",
    "ScrapeError",
    "UnparseableDateError",
]
