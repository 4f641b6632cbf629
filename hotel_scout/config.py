"""Configuration helpers for hotel price scraping."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import os
from typing import Any, Dict, Mapping, Optional

from .dates import format_token, resolve_stay_dates

DEFAULT_TARGET_SAMPLE_SIZE = 50
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class SearchRequest:
    """Parameters of a single scrape invocation."""

    destination_name: str
    destination_code: str
    checkin: date
    checkout: date
    star_rating: Optional[int] = None
    target_sample_size: int = DEFAULT_TARGET_SAMPLE_SIZE

    def __post_init__(self) -> None:
        if not self.destination_name or not self.destination_code:
            raise ValueError("destination name and code are required")
        if self.checkout <= self.checkin:
            raise ValueError("checkout must be after checkin")
        if self.star_rating is not None and not 1 <= self.star_rating <= 5:
            raise ValueError(f"star rating must be between 1 and 5, got {self.star_rating}")
        if self.target_sample_size < 1:
            raise ValueError("target sample size must be positive")

    @property
    def checkin_token(self) -> str:
        return format_token(self.checkin)

    @property
    def checkout_token(self) -> str:
        return format_token(self.checkout)

    @property
    def star_label(self) -> str:
        return str(self.star_rating) if self.star_rating is not None else "all"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable version of the request."""

        return {
            "destination_name": self.destination_name,
            "destination_code": self.destination_code,
            "checkin": self.checkin.isoformat(),
            "checkout": self.checkout.isoformat(),
            "star_rating": self.star_rating,
            "target_sample_size": self.target_sample_size,
        }


@dataclass
class ScraperSettings:
    """Browser and timing knobs. Durations are in seconds."""

    headless: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    settle_delay: float = 3.0
    overlay_delay: float = 3.0
    listings_timeout: float = 15.0
    navigation_timeout: float = 90.0
    max_stagnant_rounds: int = 3
    max_duration: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScraperSettings":
        """Build settings from ``HOTEL_SCOUT_*`` environment variables."""

        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            headless=_parse_bool(env.get("HOTEL_SCOUT_HEADLESS"), defaults.headless),
            user_agent=env.get("HOTEL_SCOUT_USER_AGENT") or defaults.user_agent,
            settle_delay=_parse_seconds(env.get("HOTEL_SCOUT_SETTLE_DELAY"), defaults.settle_delay),
            overlay_delay=_parse_seconds(env.get("HOTEL_SCOUT_OVERLAY_DELAY"), defaults.overlay_delay),
            listings_timeout=_parse_seconds(
                env.get("HOTEL_SCOUT_LISTINGS_TIMEOUT"), defaults.listings_timeout
            ),
            navigation_timeout=_parse_seconds(
                env.get("HOTEL_SCOUT_NAVIGATION_TIMEOUT"), defaults.navigation_timeout
            ),
            max_duration=_parse_seconds(env.get("HOTEL_SCOUT_MAX_DURATION"), defaults.max_duration),
        )


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_seconds(value: str | None, default: Optional[float]) -> Optional[float]:
    if not value:
        return default
    try:
        seconds = float(value.strip())
    except ValueError:
        return default
    return seconds if seconds >= 0 else default


def _parse_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value not in (None, ""):
            return value
    return None


def create_request(data: Mapping[str, Any], today: Optional[date] = None) -> SearchRequest:
    """Create a :class:`SearchRequest` from an in-process configuration mapping.

    Both the camelCase keys (``destinationName``, ``checkinDate``...) and their
    snake_case equivalents are recognised.
    """

    checkin, checkout = resolve_stay_dates(
        _first(data, "checkinDate", "checkin_date", "checkin"),
        _first(data, "checkoutDate", "checkout_date", "checkout"),
        today=today,
    )
    target = _parse_int(_first(data, "targetSampleSize", "target_sample_size"))
    return SearchRequest(
        destination_name=str(_first(data, "destinationName", "destination_name") or "").strip(),
        destination_code=str(_first(data, "destinationCode", "destination_code") or "").strip(),
        checkin=checkin,
        checkout=checkout,
        star_rating=_parse_int(_first(data, "starRatingFilter", "star_rating")),
        target_sample_size=target if target is not None else DEFAULT_TARGET_SAMPLE_SIZE,
    )
