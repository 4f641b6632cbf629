from datetime import date
import unittest

from hotel_scout.config import (
    DEFAULT_USER_AGENT,
    ScraperSettings,
    SearchRequest,
    create_request,
)
from hotel_scout.exceptions import UnparseableDateError


class CreateRequestTests(unittest.TestCase):
    def test_camel_case_mapping(self) -> None:
        request = create_request(
            {
                "destinationName": "Pune",
                "destinationCode": "CTPUN",
                "checkinDate": "March 27, 2025",
                "checkoutDate": "March 28, 2025",
                "starRatingFilter": 3,
                "targetSampleSize": 50,
            }
        )
        self.assertEqual(request.destination_name, "Pune")
        self.assertEqual(request.destination_code, "CTPUN")
        self.assertEqual(request.checkin_token, "03272025")
        self.assertEqual(request.checkout_token, "03282025")
        self.assertEqual(request.star_rating, 3)
        self.assertEqual(request.star_label, "3")
        self.assertEqual(request.target_sample_size, 50)

    def test_snake_case_mapping_and_defaults(self) -> None:
        request = create_request(
            {"destination_name": "Goa", "destination_code": "CTGOI", "star_rating": ""},
            today=date(2025, 12, 31),
        )
        self.assertEqual(request.checkin, date(2025, 12, 31))
        self.assertEqual(request.checkout, date(2026, 1, 1))
        self.assertIsNone(request.star_rating)
        self.assertEqual(request.star_label, "all")
        self.assertEqual(request.target_sample_size, 50)

    def test_string_numbers_are_accepted(self) -> None:
        request = create_request(
            {
                "destinationName": "Pune",
                "destinationCode": "CTPUN",
                "checkinDate": "2025-03-27",
                "starRatingFilter": "4",
                "targetSampleSize": "20",
            }
        )
        self.assertEqual(request.star_rating, 4)
        self.assertEqual(request.target_sample_size, 20)

    def test_unparseable_date_is_surfaced(self) -> None:
        with self.assertRaises(UnparseableDateError):
            create_request({"destinationName": "Pune", "destinationCode": "CTPUN", "checkinDate": "soon"})

    def test_invalid_requests_are_rejected(self) -> None:
        base = {"destinationName": "Pune", "destinationCode": "CTPUN", "checkinDate": "March 27, 2025"}
        for overrides in [
            {"starRatingFilter": 6},
            {"starRatingFilter": 0},
            {"targetSampleSize": 0},
            {"checkoutDate": "March 27, 2025"},
            {"checkoutDate": "March 20, 2025"},
            {"destinationCode": ""},
        ]:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValueError):
                    create_request({**base, **overrides})

    def test_request_is_immutable(self) -> None:
        request = SearchRequest("Pune", "CTPUN", date(2025, 3, 27), date(2025, 3, 28))
        with self.assertRaises(AttributeError):
            request.target_sample_size = 10  # type: ignore[misc]


class ScraperSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = ScraperSettings.from_env({})
        self.assertFalse(settings.headless)
        self.assertEqual(settings.user_agent, DEFAULT_USER_AGENT)
        self.assertEqual(settings.settle_delay, 3.0)
        self.assertEqual(settings.listings_timeout, 15.0)
        self.assertEqual(settings.max_stagnant_rounds, 3)
        self.assertIsNone(settings.max_duration)

    def test_environment_overrides(self) -> None:
        settings = ScraperSettings.from_env(
            {
                "HOTEL_SCOUT_HEADLESS": "true",
                "HOTEL_SCOUT_SETTLE_DELAY": "1.5",
                "HOTEL_SCOUT_MAX_DURATION": "120",
                "HOTEL_SCOUT_LISTINGS_TIMEOUT": "not-a-number",
            }
        )
        self.assertTrue(settings.headless)
        self.assertEqual(settings.settle_delay, 1.5)
        self.assertEqual(settings.max_duration, 120.0)
        self.assertEqual(settings.listings_timeout, 15.0)


if __name__ == "__main__":
    unittest.main()
