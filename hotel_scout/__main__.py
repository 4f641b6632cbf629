"""Run the reference Pune scrape: ``python -m hotel_scout``."""
from __future__ import annotations

import logging

from .config import ScraperSettings
from .workflow import run_price_workflow

logging.basicConfig(level=logging.INFO)

EXAMPLE_REQUEST = {
    "destinationName": "Pune",
    "destinationCode": "CTPUN",
    "checkinDate": "March 27, 2025",
    "checkoutDate": "March 28, 2025",
    "starRatingFilter": 3,
    "targetSampleSize": 50,
}


def main() -> None:
    outcome = run_price_workflow(EXAMPLE_REQUEST, ScraperSettings.from_env())
    print(outcome.report)


if __name__ == "__main__":
    main()
