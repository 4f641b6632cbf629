"""MakeMyTrip hotel listing profile and search URL construction."""
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from hotel_scout.config import SearchRequest


@dataclass(frozen=True)
class SiteProfile:
    """Addresses and selectors describing a hotel listing site."""

    provider: str
    homepage_url: str
    listing_url: str
    card_selector: str
    price_selector: str
    country: str = "IN"


MAKEMYTRIP = SiteProfile(
    provider="makemytrip.com",
    homepage_url="https://www.makemytrip.com/",
    listing_url="https://www.makemytrip.com/hotels/hotel-listing/",
    card_selector="div.listingRowOuter",
    price_selector="p.priceText",
)


def build_star_filter(star_rating: int | None) -> str:
    if star_rating is None:
        return ""
    return f"&filterData=STAR_RATING%7C{star_rating}"


def build_search_url(request: SearchRequest, profile: SiteProfile = MAKEMYTRIP) -> str:
    """Return the listing URL for ``request``, sorted by review rating."""

    code = request.destination_code
    return (
        f"{profile.listing_url}?checkin={request.checkin_token}"
        f"&checkout={request.checkout_token}"
        f"&city={code}&country={profile.country}&locusId={code}&locusType=city"
        "&regionNearByExp=3&roomStayQualifier=2e0e&rsc=1e2e0e"
        f"&searchText={quote(request.destination_name, safe='')}"
        f"{build_star_filter(request.star_rating)}"
        "&sort=reviewRating-desc"
    )
