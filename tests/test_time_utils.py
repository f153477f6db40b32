import unittest
from datetime import date, datetime

from courtside.utils import (
    fmt_clock, format_date, format_time, minutes_of_day, parse_schedule_date, time_to_minutes
)


class TimeUtilsTests(unittest.TestCase):
    def test_format_date_is_not_zero_padded(self) -> None:
        self.assertEqual(format_date(datetime(2026, 1, 9, 8, 0)), "9.1.2026")
        self.assertEqual(format_date(date(2026, 11, 10)), "10.11.2026")

    def test_format_time_is_zero_padded(self) -> None:
        self.assertEqual(format_time(datetime(2026, 1, 9, 8, 5)), "08:05")

    def test_fmt_clock(self) -> None:
        self.assertEqual(fmt_clock(datetime(2026, 1, 10, 14, 7, 33)), "14:07 (10.1.2026)")

    def test_minutes(self) -> None:
        self.assertEqual(minutes_of_day(datetime(2026, 1, 10, 14, 7, 59)), 14 * 60 + 7)
        self.assertEqual(time_to_minutes("00:00"), 0)
        self.assertEqual(time_to_minutes("23:59"), 23 * 60 + 59)
        self.assertIsNone(time_to_minutes("noon"))
        self.assertIsNone(time_to_minutes("12:xx"))
        self.assertIsNone(time_to_minutes(None))

    def test_parse_schedule_date(self) -> None:
        self.assertEqual(parse_schedule_date("9.1.2026"), date(2026, 1, 9))
        self.assertEqual(parse_schedule_date("09.01.2026"), date(2026, 1, 9))
        self.assertIsNone(parse_schedule_date("30.2.2026"))
        self.assertIsNone(parse_schedule_date("2026-01-09"))


if __name__ == "__main__":
    unittest.main()
