"""Browser-driven hotel price scraping."""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Optional

from playwright.async_api import async_playwright

from .collector import collect_prices
from .config import ScraperSettings, SearchRequest
from .models import CollectionState, ScrapeResult
from .processor import build_scrape_result
from .sources import MAKEMYTRIP, PlaywrightPageSurface, SiteProfile, build_search_url

LOGGER = logging.getLogger(__name__)

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

SurfaceFactory = Callable[[ScraperSettings, SiteProfile], AsyncContextManager[Any]]


@asynccontextmanager
async def open_playwright_surface(
    settings: ScraperSettings, profile: SiteProfile = MAKEMYTRIP
) -> AsyncIterator[PlaywrightPageSurface]:
    """Launch Chromium and yield a page surface; the browser is always closed."""

    async with async_playwright() as p:  # pragma: no cover - network heavy
        browser = await p.chromium.launch(headless=settings.headless, args=BROWSER_ARGS)
        try:
            context = await browser.new_context(user_agent=settings.user_agent, no_viewport=True)
            page = await context.new_page()
            yield PlaywrightPageSurface(page, profile)
        finally:
            LOGGER.info("Closing browser")
            await browser.close()


async def _collect_from_surface(
    surface: Any,
    url: str,
    request: SearchRequest,
    settings: ScraperSettings,
    profile: SiteProfile,
) -> CollectionState:
    LOGGER.info("Navigating to %s homepage", profile.provider)
    await surface.navigate(profile.homepage_url, wait_until="domcontentloaded", timeout=settings.navigation_timeout)

    LOGGER.info("Closing login popup")
    await surface.dismiss_overlay(settings.overlay_delay)

    LOGGER.info("Navigating to hotel listings page")
    await surface.navigate(url, wait_until="networkidle", timeout=settings.navigation_timeout)

    LOGGER.info("Waiting for hotel listings to load")
    await surface.wait_for_listings(settings.listings_timeout)

    return await collect_prices(
        surface,
        request.target_sample_size,
        settle_delay=settings.settle_delay,
        max_stagnant_rounds=settings.max_stagnant_rounds,
        max_duration=settings.max_duration,
    )


async def scrape_hotel_prices(
    request: SearchRequest,
    settings: Optional[ScraperSettings] = None,
    surface_factory: Optional[SurfaceFactory] = None,
    profile: SiteProfile = MAKEMYTRIP,
) -> ScrapeResult:
    """Scrape listing prices for ``request`` and return their summary.

    Any failure while driving the page ends the invocation and is returned as
    a failed :class:`ScrapeResult`; the page surface is released either way.
    """

    settings = settings or ScraperSettings()
    factory = surface_factory or open_playwright_surface
    url = build_search_url(request, profile)

    LOGGER.info(
        "Launching browser for %s (%s-star hotels)", request.destination_name, request.star_label
    )
    try:
        async with factory(settings, profile) as surface:
            state = await _collect_from_surface(surface, url, request, settings, profile)
    except Exception as exc:
        LOGGER.error("Scraping %s failed: %s", request.destination_name, exc)
        return ScrapeResult.failure(str(exc) or exc.__class__.__name__)

    result = build_scrape_result(state)
    LOGGER.info("Fetched %d prices", result.sample_count)
    LOGGER.info(
        "Average price of %s-star hotels in %s: %d",
        request.star_label,
        request.destination_name,
        result.rounded_average,
    )
    return result


def run_scrape(
    request: SearchRequest,
    settings: Optional[ScraperSettings] = None,
    surface_factory: Optional[SurfaceFactory] = None,
) -> ScrapeResult:
    """Run :func:`scrape_hotel_prices` from synchronous code.

    When called from a thread that already runs an event loop, the scrape runs
    on its own loop in a worker thread and this call blocks until it finishes.
    """

    def runner() -> ScrapeResult:
        return asyncio.run(scrape_hotel_prices(request, settings, surface_factory))

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return runner()

    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(runner).result()
