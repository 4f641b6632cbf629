"""Site profiles and Playwright page surfaces."""
from .makemytrip import MAKEMYTRIP, SiteProfile, build_search_url
from .playwright_common import PlaywrightPageSurface, parse_price_from_text, parse_prices

__all__ = [
    "MAKEMYTRIP",
    "PlaywrightPageSurface",
    "SiteProfile",
    "build_search_url",
    "parse_price_from_text",
    "parse_prices",
]
