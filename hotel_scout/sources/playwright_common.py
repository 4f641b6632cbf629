"""Reusable Playwright helpers shared by listing scrapers."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from hotel_scout.exceptions import ListingsNotFoundError, NavigationError
from hotel_scout.models import PriceSample

from .makemytrip import SiteProfile

LOGGER = logging.getLogger(__name__)

NON_DIGIT_PATTERN = re.compile(r"[^\d]")

SCROLL_TO_BOTTOM_SCRIPT = "() => window.scrollTo(0, document.body.scrollHeight)"

# Returns one entry per card: the price text, or null when the card has no price element.
PRICE_TEXTS_SCRIPT = """
([cardSelector, priceSelector]) => Array.from(document.querySelectorAll(cardSelector)).map(
    (card) => {
        const priceEl = card.querySelector(priceSelector);
        return priceEl ? priceEl.textContent : null;
    }
)
"""


def parse_price_from_text(text: Optional[str]) -> Optional[int]:
    """Return the whole price in ``text`` or ``None`` when no digits remain.

    Every non-digit is stripped, so ``"₹ 3,499"`` becomes ``3499``.
    """

    if not text:
        return None
    digits = NON_DIGIT_PATTERN.sub("", text)
    if not digits:
        return None
    price = int(digits)
    return price if price > 0 else None


def parse_prices(texts: Iterable[Optional[str]]) -> PriceSample:
    """Parse card price texts, dropping cards without a usable price."""

    prices: PriceSample = []
    skipped = 0
    for text in texts:
        price = parse_price_from_text(text)
        if price is None:
            skipped += 1
            continue
        prices.append(price)
    if skipped:
        LOGGER.debug("Skipped %d cards without a parseable price", skipped)
    return prices


async def dismiss_login_overlay(page: Page, delay: float = 0.0) -> None:
    """Attempt to close the login popup shown on first visit."""

    try:
        await page.keyboard.press("Escape")
    except PlaywrightError as exc:
        LOGGER.warning("Could not dismiss login overlay: %s", exc)
    if delay:
        await page.wait_for_timeout(delay * 1000)


class PlaywrightPageSurface:
    """Page surface backed by a live Playwright :class:`Page`."""

    def __init__(self, page: Page, profile: SiteProfile) -> None:
        self.page = page
        self.profile = profile

    async def navigate(self, url: str, wait_until: str = "domcontentloaded", timeout: float = 0) -> None:
        try:
            await self.page.goto(url, wait_until=wait_until, timeout=timeout * 1000)
        except PlaywrightError as exc:
            raise NavigationError(f"Navigation to {url} failed: {exc}") from exc

    async def wait_for_listings(self, timeout: float) -> None:
        try:
            await self.page.wait_for_selector(self.profile.card_selector, timeout=timeout * 1000)
        except PlaywrightTimeoutError as exc:
            raise ListingsNotFoundError(
                f"No listings matching {self.profile.card_selector!r} within {timeout:.0f}s"
            ) from exc

    async def dismiss_overlay(self, delay: float = 0.0) -> None:
        await dismiss_login_overlay(self.page, delay)

    async def scroll_to_bottom(self) -> None:
        await self.page.evaluate(SCROLL_TO_BOTTOM_SCRIPT)

    async def sample_prices(self) -> PriceSample:
        """Read every rendered card's price; cards without one are skipped."""

        texts: List[Optional[str]] = await self.page.evaluate(
            PRICE_TEXTS_SCRIPT, [self.profile.card_selector, self.profile.price_selector]
        )
        return parse_prices(texts or [])
