import datetime
import unittest

from ganttgrid.time import (
    calendar_date_from_value,
    date_to_display_str,
    date_to_iso_str_optional,
    days_between,
    parse_calendar_date,
    parse_calendar_date_optional,
)


class TestParseCalendarDate(unittest.TestCase):
    def test_plain_date(self) -> None:
        self.assertEqual(parse_calendar_date("2025-01-10"), datetime.date(2025, 1, 10))

    def test_datetime_string_keeps_written_calendar_day(self) -> None:
        # Late evening west of UTC would be the next day in UTC
        self.assertEqual(
            parse_calendar_date("2025-01-10T23:30:00-06:00"), datetime.date(2025, 1, 10)
        )
        # Midnight UTC would be the previous day west of UTC
        self.assertEqual(
            parse_calendar_date("2025-01-10T00:00:00+00:00"), datetime.date(2025, 1, 10)
        )
        self.assertEqual(
            parse_calendar_date("2025-01-10 08:15:00"), datetime.date(2025, 1, 10)
        )

    def test_malformed_strings_raise(self) -> None:
        malformed = (
            "",
            "   ",
            "not-a-date",
            "2025-02-30",
            "10/01/2025",
            "2025",
            "2025-03",
            "20250110",
        )
        for value in malformed:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_calendar_date(value)

    def test_optional(self) -> None:
        self.assertIsNone(parse_calendar_date_optional(None))
        self.assertEqual(
            parse_calendar_date_optional("2024-02-29"), datetime.date(2024, 2, 29)
        )


class TestCalendarDateFromValue(unittest.TestCase):
    def test_values_from_loaders(self) -> None:
        self.assertIsNone(calendar_date_from_value(None))
        self.assertIsNone(calendar_date_from_value(""))
        self.assertEqual(
            calendar_date_from_value(datetime.date(2025, 3, 1)), datetime.date(2025, 3, 1)
        )
        self.assertEqual(
            calendar_date_from_value(
                datetime.datetime(2025, 3, 1, 23, 0, tzinfo=datetime.timezone.utc)
            ),
            datetime.date(2025, 3, 1),
        )
        self.assertEqual(
            calendar_date_from_value("2025-03-01T05:00:00Z"), datetime.date(2025, 3, 1)
        )


class TestFormatting(unittest.TestCase):
    def test_iso_and_display(self) -> None:
        value = datetime.date(2025, 1, 15)
        self.assertEqual(date_to_iso_str_optional(value), "2025-01-15")
        self.assertIsNone(date_to_iso_str_optional(None))
        self.assertEqual(date_to_display_str(value), "2025-01-15 Wed")

    def test_days_between_is_signed(self) -> None:
        a = datetime.date(2025, 1, 1)
        b = datetime.date(2025, 1, 11)
        self.assertEqual(days_between(a, b), 10)
        self.assertEqual(days_between(b, a), -10)


if __name__ == "__main__":
    unittest.main()
